from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from event_ticketing.service.ticketing.domain.entity.booking_entity import BookingStatus
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.base_schema import (
    CamelModel,
)


class BookingCreateRequest(CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'eventId': 1, 'quantity': 2}})

    event_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1)


class BookingEventSummary(CamelModel):
    id: int
    title: str
    date: datetime
    location: str
    ticket_price: float
    status: EventStatus
    organizer_id: int


class BookingCustomerSummary(CamelModel):
    id: int
    name: str
    email: str


class BookingResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '01234567-89ab-7def-0123-456789abcdef',
                'bookingReference': 'BK1718000000000X7K2P9QZ4A',
                'customerId': 2,
                'eventId': 1,
                'quantity': 3,
                'totalPrice': 150.0,
                'status': 'confirmed',
                'createdAt': '2026-06-01T10:30:00Z',
            }
        }
    )

    id: UUID
    booking_reference: str
    customer_id: int
    event_id: int
    quantity: int
    total_price: float
    status: BookingStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Present on reads; None once the event has been deleted
    event: Optional[BookingEventSummary] = None
    customer: Optional[BookingCustomerSummary] = None


class BookingEnvelopeResponse(CamelModel):
    message: str
    booking: BookingResponse
