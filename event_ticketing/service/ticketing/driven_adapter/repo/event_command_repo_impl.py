from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_event_command_repo import (
    IEventCommandRepo,
)
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus
from event_ticketing.service.ticketing.driven_adapter.model.event_model import EventModel


def event_model_to_entity(db_event: EventModel) -> EventEntity:
    return EventEntity(
        id=db_event.id,
        title=db_event.title,
        description=db_event.description,
        organizer_id=db_event.organizer_id,
        date=db_event.date,
        location=db_event.location,
        total_tickets=db_event.total_tickets,
        available_tickets=db_event.available_tickets,
        ticket_price=db_event.ticket_price,
        status=EventStatus(db_event.status),
        category=db_event.category,
        created_at=db_event.created_at,
        updated_at=db_event.updated_at,
    )


class EventCommandRepoImpl(IEventCommandRepo):
    """
    Event writes.

    Inventory counters are only ever changed with conditional UPDATEs so the
    database re-checks availability at write time, whatever the caller read
    before.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield the UoW session when one was injected, otherwise open one from
        session_factory. Only the standalone path commits on its own.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
                await session.commit()
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self._get_session() as session:
            db_event = EventModel(
                title=event.title,
                description=event.description,
                organizer_id=event.organizer_id,
                date=event.date,
                location=event.location,
                total_tickets=event.total_tickets,
                available_tickets=event.available_tickets,
                ticket_price=event.ticket_price,
                status=event.status.value,
                category=event.category,
            )
            session.add(db_event)
            await session.flush()
            await session.refresh(db_event)
            return event_model_to_entity(db_event)

    @Logger.io
    async def get_for_update(self, *, event_id: int) -> Optional[EventEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventModel)
                .where(EventModel.id == event_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_event = result.scalar_one_or_none()
            return event_model_to_entity(db_event) if db_event else None

    @Logger.io
    async def update(self, *, event: EventEntity) -> EventEntity:
        async with self._get_session() as session:
            db_event = await session.get(EventModel, event.id)
            if db_event is None:
                raise ValueError(f'Event {event.id} does not exist')

            db_event.title = event.title
            db_event.description = event.description
            db_event.date = event.date
            db_event.location = event.location
            db_event.total_tickets = event.total_tickets
            db_event.available_tickets = event.available_tickets
            db_event.ticket_price = event.ticket_price
            db_event.status = event.status.value
            db_event.category = event.category
            await session.flush()
            await session.refresh(db_event)
            return event_model_to_entity(db_event)

    @Logger.io
    async def delete(self, *, event_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(delete(EventModel).where(EventModel.id == event_id))
            return bool(result.rowcount)

    @Logger.io
    async def try_reserve_tickets(self, *, event_id: int, quantity: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(EventModel)
                .where(
                    EventModel.id == event_id,
                    EventModel.status == EventStatus.PUBLISHED.value,
                    EventModel.available_tickets >= quantity,
                )
                .values(available_tickets=EventModel.available_tickets - quantity)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1

    @Logger.io
    async def release_tickets(self, *, event_id: int, quantity: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(EventModel)
                .where(
                    EventModel.id == event_id,
                    EventModel.available_tickets + quantity <= EventModel.total_tickets,
                )
                .values(available_tickets=EventModel.available_tickets + quantity)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1
