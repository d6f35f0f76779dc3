from abc import ABC, abstractmethod
from typing import List, Optional

from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_events(
        self, *, status: EventStatus, category: Optional[str] = None
    ) -> List[EventEntity]:
        pass
