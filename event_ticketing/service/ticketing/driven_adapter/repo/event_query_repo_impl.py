from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus
from event_ticketing.service.ticketing.driven_adapter.model.event_model import EventModel
from event_ticketing.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    event_model_to_entity,
)


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            # Session injected by UoW - use directly (no context manager needed)
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventModel)
                .where(EventModel.id == event_id)
                .execution_options(populate_existing=True)
            )
            db_event = result.scalar_one_or_none()
            return event_model_to_entity(db_event) if db_event else None

    @Logger.io
    async def list_events(
        self, *, status: EventStatus, category: Optional[str] = None
    ) -> List[EventEntity]:
        async with self._get_session() as session:
            stmt = select(EventModel).where(EventModel.status == status.value)
            if category:
                stmt = stmt.where(EventModel.category == category)
            result = await session.execute(stmt.order_by(EventModel.date, EventModel.id))
            return [event_model_to_entity(db_event) for db_event in result.scalars().all()]
