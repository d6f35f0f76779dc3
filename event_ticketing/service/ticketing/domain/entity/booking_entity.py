from datetime import datetime, timezone
from enum import StrEnum
import secrets
import string
import time
from typing import Optional
from uuid import UUID

import attrs
import uuid_utils

from event_ticketing.platform.exception.exceptions import (
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from event_ticketing.platform.logging.loguru_io import Logger


class BookingStatus(StrEnum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


# Bookings in these states still hold tickets and receive event updates
ACTIVE_BOOKING_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.PENDING)

_REFERENCE_ALPHABET = string.digits + string.ascii_uppercase
_REFERENCE_SUFFIX_LENGTH = 9


def generate_booking_reference() -> str:
    """'BK' + epoch millis + 9 random base36 characters, e.g. BK1718000000000X7K2P9QZ4A"""
    suffix = ''.join(secrets.choice(_REFERENCE_ALPHABET) for _ in range(_REFERENCE_SUFFIX_LENGTH))
    return f'BK{int(time.time() * 1000)}{suffix}'


def _validate_quantity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValidationError('quantity must be at least 1', field='quantity')


@attrs.define
class Booking:
    id: UUID
    customer_id: int
    event_id: int
    quantity: int = attrs.field(validator=_validate_quantity)
    total_price: float
    booking_reference: str
    status: BookingStatus = attrs.field(default=BookingStatus.CONFIRMED, converter=BookingStatus)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        customer_id: int,
        event_id: int,
        quantity: int,
        ticket_price: float,
    ) -> 'Booking':
        now = datetime.now(timezone.utc)
        return cls(
            id=UUID(str(uuid_utils.uuid7())),
            customer_id=customer_id,
            event_id=event_id,
            quantity=quantity,
            total_price=round(quantity * ticket_price, 2),
            booking_reference=generate_booking_reference(),
            status=BookingStatus.CONFIRMED,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    def validate_owner(self, customer_id: int, *, action: str) -> None:
        if self.customer_id != customer_id:
            raise AuthorizationError(f'Not authorized to {action} this booking')

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel booking (Domain validation)

        Raises:
            ConflictError: When the booking is already cancelled
        """
        if self.is_cancelled:
            raise ConflictError('Booking is already cancelled', status_code=400)

        return attrs.evolve(
            self, status=BookingStatus.CANCELLED, updated_at=datetime.now(timezone.utc)
        )
