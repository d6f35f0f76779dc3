from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from event_ticketing.platform.exception.exceptions import ConflictError, NotFoundError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.metrics.ticketing_metrics import metrics
from event_ticketing.platform.state.keyed_lock import KeyedLock
from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking


class CancelBookingUseCase:
    """
    Customer cancels an own booking and its tickets go back to the event.

    The status flip is conditional (status != cancelled), so two concurrent
    cancels of the same booking restore the tickets only once.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, event_lock: KeyedLock) -> None:
        self.uow = uow
        self.event_lock = event_lock
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        event_lock: KeyedLock = Depends(Provide[Container.event_lock]),
    ) -> Self:
        return cls(uow=uow, event_lock=event_lock)

    @Logger.io
    async def cancel_booking(self, *, booking_id: UUID, customer_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.cancel_booking',
            attributes={'booking.id': str(booking_id), 'booking.customer_id': customer_id},
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)

            if booking is None:
                raise NotFoundError('Booking not found')

            booking.validate_owner(customer_id, action='cancel')
            cancelled = booking.cancel()

            async with self.event_lock.hold(booking.event_id):
                async with self.uow:
                    if not await self.uow.booking_command_repo.mark_cancelled(booking=cancelled):
                        raise ConflictError('Booking is already cancelled', status_code=400)

                    restored = await self.uow.event_command_repo.release_tickets(
                        event_id=booking.event_id, quantity=booking.quantity
                    )
                    if not restored:
                        Logger.base.warning(
                            f'⚠️ [CANCEL] Event {booking.event_id} not found or already full, '
                            f'{booking.quantity} ticket(s) not restored'
                        )
                    await self.uow.commit()

            metrics.record_cancellation(quantity=booking.quantity)
            Logger.base.info(
                f'↩️ [CANCEL] {booking.booking_reference}: {booking.quantity} ticket(s) '
                f'returned to event {booking.event_id}'
            )
            return cancelled
