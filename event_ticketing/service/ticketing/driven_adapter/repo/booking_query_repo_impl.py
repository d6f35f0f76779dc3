from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from event_ticketing.service.ticketing.domain.entity.booking_entity import BookingStatus
from event_ticketing.service.ticketing.driven_adapter.model.booking_model import BookingModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_booking_dict(db_booking: BookingModel) -> dict:
        event = db_booking.event
        customer = db_booking.customer
        return {
            'id': db_booking.id,
            'customer_id': db_booking.customer_id,
            'event_id': db_booking.event_id,
            'quantity': db_booking.quantity,
            'total_price': db_booking.total_price,
            'status': db_booking.status,
            'booking_reference': db_booking.booking_reference,
            'created_at': db_booking.created_at,
            'updated_at': db_booking.updated_at,
            # Event may have been deleted since the booking was made
            'event': {
                'id': event.id,
                'title': event.title,
                'date': event.date,
                'location': event.location,
                'ticket_price': event.ticket_price,
                'status': event.status,
                'organizer_id': event.organizer_id,
            }
            if event
            else None,
            'customer': {
                'id': customer.id,
                'name': customer.name,
                'email': customer.email,
            }
            if customer
            else None,
        }

    @Logger.io
    async def get_by_id_with_details(self, *, booking_id: UUID) -> Optional[dict]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .execution_options(populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()
            return self._to_booking_dict(db_booking) if db_booking else None

    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[dict]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.customer_id == customer_id)
                .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [self._to_booking_dict(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def list_by_event(
        self, *, event_id: int, statuses: Optional[Sequence[BookingStatus]] = None
    ) -> List[dict]:
        async with self._get_session() as session:
            stmt = select(BookingModel).where(BookingModel.event_id == event_id)
            if statuses:
                stmt = stmt.where(BookingModel.status.in_([status.value for status in statuses]))
            result = await session.execute(
                stmt.order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [self._to_booking_dict(db_booking) for db_booking in result.scalars().all()]
