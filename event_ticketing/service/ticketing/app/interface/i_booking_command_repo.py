from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def mark_cancelled(self, *, booking: Booking) -> bool:
        """
        Persist the cancelled state only if the stored booking is not
        cancelled yet. Returns False when another request won the race.
        """
        pass
