from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking, BookingStatus
from event_ticketing.service.ticketing.driven_adapter.model.booking_model import BookingModel


def booking_model_to_entity(db_booking: BookingModel) -> Booking:
    return Booking(
        id=db_booking.id,
        customer_id=db_booking.customer_id,
        event_id=db_booking.event_id,
        quantity=db_booking.quantity,
        total_price=db_booking.total_price,
        booking_reference=db_booking.booking_reference,
        status=BookingStatus(db_booking.status),
        created_at=db_booking.created_at,
        updated_at=db_booking.updated_at,
    )


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
                await session.commit()
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(
                id=booking.id,
                customer_id=booking.customer_id,
                event_id=booking.event_id,
                quantity=booking.quantity,
                total_price=booking.total_price,
                status=booking.status.value,
                booking_reference=booking.booking_reference,
                created_at=booking.created_at,
                updated_at=booking.updated_at,
            )
            session.add(db_booking)
            await session.flush()
            await session.refresh(db_booking)
            return booking_model_to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .execution_options(populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()
            return booking_model_to_entity(db_booking) if db_booking else None

    @Logger.io
    async def mark_cancelled(self, *, booking: Booking) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(BookingModel)
                .where(
                    BookingModel.id == booking.id,
                    BookingModel.status != BookingStatus.CANCELLED.value,
                )
                .values(status=BookingStatus.CANCELLED.value, updated_at=booking.updated_at)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1
