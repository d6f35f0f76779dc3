"""
Notification payloads

Snapshots handed to the notification dispatcher after a state change.
Delivery is at-most-once: a payload lost between the state change and the
enqueue is never replayed.
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, ClassVar, Union

import attrs

from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity


class NotificationJobType(StrEnum):
    BOOKING_CONFIRMATION = 'booking-confirmation'
    EVENT_UPDATE = 'event-notification'


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@attrs.define(frozen=True)
class BookingConfirmationNotification:
    job_type: ClassVar[NotificationJobType] = NotificationJobType.BOOKING_CONFIRMATION

    booking_id: str
    booking_reference: str
    customer_id: int
    event_id: int
    event_title: str
    event_date: str
    event_location: str
    quantity: int
    total_price: float
    status: str
    occurred_at: str = attrs.field(factory=_now_iso)

    @classmethod
    def from_booking(cls, booking: Booking, event: EventEntity) -> 'BookingConfirmationNotification':
        return cls(
            booking_id=str(booking.id),
            booking_reference=booking.booking_reference,
            customer_id=booking.customer_id,
            event_id=booking.event_id,
            event_title=event.title,
            event_date=event.date.isoformat(),
            event_location=event.location,
            quantity=booking.quantity,
            total_price=booking.total_price,
            status=booking.status.value,
        )


@attrs.define(frozen=True)
class EventUpdateNotification:
    job_type: ClassVar[NotificationJobType] = NotificationJobType.EVENT_UPDATE

    event_id: int
    event_title: str
    organizer_id: int
    organizer_name: str
    changes: str
    occurred_at: str = attrs.field(factory=_now_iso)

    @classmethod
    def from_event(
        cls, event: EventEntity, *, organizer_name: str, changes: str
    ) -> 'EventUpdateNotification':
        assert event.id is not None, 'Event must be persisted before notifying'
        return cls(
            event_id=event.id,
            event_title=event.title,
            organizer_id=event.organizer_id,
            organizer_name=organizer_name,
            changes=changes,
        )


Notification = Union[BookingConfirmationNotification, EventUpdateNotification]

NOTIFICATION_TYPES: dict[NotificationJobType, type[Notification]] = {
    NotificationJobType.BOOKING_CONFIRMATION: BookingConfirmationNotification,
    NotificationJobType.EVENT_UPDATE: EventUpdateNotification,
}


def notification_to_dict(notification: Notification) -> dict[str, Any]:
    return {'job_type': notification.job_type.value, 'payload': attrs.asdict(notification)}


def notification_from_dict(data: dict[str, Any]) -> Notification:
    notification_cls = NOTIFICATION_TYPES[NotificationJobType(data['job_type'])]
    return notification_cls(**data['payload'])
