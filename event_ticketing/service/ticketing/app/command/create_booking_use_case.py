from typing import NoReturn, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from event_ticketing.platform.exception.exceptions import (
    CapacityError,
    NotFoundError,
    ValidationError,
)
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.metrics.ticketing_metrics import metrics
from event_ticketing.platform.state.keyed_lock import KeyedLock
from event_ticketing.service.ticketing.app.interface.i_notification_queue import (
    INotificationQueue,
)
from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking
from event_ticketing.service.ticketing.domain.notification.notification import (
    BookingConfirmationNotification,
)


class CreateBookingUseCase:
    """
    Customer books tickets for a published event.

    Flow:
    1. Take the event's lock (serializes with other bookings, cancels and resizes)
    2. Conditional decrement: only succeeds while the event is published and
       has at least `quantity` tickets left
    3. Insert the confirmed booking in the same transaction and commit
    4. Queue the booking confirmation (never fails the booking)

    When the decrement touches no row, the event is re-read to report why.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        event_lock: KeyedLock,
        notification_queue: INotificationQueue,
    ) -> None:
        self.uow = uow
        self.event_lock = event_lock
        self.notification_queue = notification_queue
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        event_lock: KeyedLock = Depends(Provide[Container.event_lock]),
        notification_queue: INotificationQueue = Depends(
            Provide[Container.notification_queue]
        ),
    ) -> Self:
        return cls(uow=uow, event_lock=event_lock, notification_queue=notification_queue)

    @Logger.io
    async def create_booking(self, *, customer_id: int, event_id: int, quantity: int) -> Booking:
        if quantity < 1:
            raise ValidationError('quantity must be at least 1', field='quantity')

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'booking.customer_id': customer_id,
                'booking.event_id': event_id,
                'booking.quantity': quantity,
            },
        ):
            async with self.event_lock.hold(event_id):
                async with self.uow:
                    reserved = await self.uow.event_command_repo.try_reserve_tickets(
                        event_id=event_id, quantity=quantity
                    )
                    if not reserved:
                        await self._raise_reservation_failure(event_id=event_id, quantity=quantity)

                    event = await self.uow.event_query_repo.get_by_id(event_id=event_id)
                    assert event is not None, 'Event vanished after reserving its tickets'

                    booking = await self.uow.booking_command_repo.create(
                        booking=Booking.create(
                            customer_id=customer_id,
                            event_id=event_id,
                            quantity=quantity,
                            ticket_price=event.ticket_price,
                        )
                    )
                    await self.uow.commit()

            metrics.record_booking(result='confirmed', quantity=quantity)
            Logger.base.info(
                f'🎟️ [BOOKING] {booking.booking_reference}: customer {customer_id} took '
                f'{quantity} ticket(s) of event {event_id}, {event.available_tickets} left'
            )

            await self.notification_queue.enqueue(
                BookingConfirmationNotification.from_booking(booking, event)
            )
            return booking

    async def _raise_reservation_failure(self, *, event_id: int, quantity: int) -> NoReturn:
        event = await self.uow.event_query_repo.get_by_id(event_id=event_id)

        if event is None:
            metrics.record_booking(result='not_found')
            raise NotFoundError('Event not found')

        if not event.is_published:
            metrics.record_booking(result='not_published')
            raise ValidationError('Event is not published')

        metrics.record_booking(result='sold_out')
        Logger.base.warning(
            f'⚠️ [BOOKING] Event {event_id} has {event.available_tickets} left, '
            f'{quantity} requested'
        )
        raise CapacityError(remaining=event.available_tickets)
