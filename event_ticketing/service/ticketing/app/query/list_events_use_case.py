from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_events(
        self,
        *,
        status: EventStatus = EventStatus.PUBLISHED,
        category: Optional[str] = None,
    ) -> List[EventEntity]:
        """Public catalogue: published events by default, earliest date first"""
        events = await self.event_query_repo.list_events(status=status, category=category)

        Logger.base.info(f'✅ [LIST_EVENTS] Found {len(events)} {status.value} events')
        return events
