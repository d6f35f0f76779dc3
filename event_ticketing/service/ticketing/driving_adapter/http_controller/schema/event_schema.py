from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.base_schema import (
    CamelModel,
)


class EventCreateRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Summer Jazz Night',
                'description': 'An evening of live jazz by the river',
                'date': '2026-07-15T19:30:00Z',
                'location': 'Riverside Amphitheatre',
                'totalTickets': 200,
                'ticketPrice': 45.0,
                'category': 'music',
            }
        }
    )

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    date: datetime
    location: str = Field(..., min_length=1, max_length=200)
    total_tickets: int = Field(..., ge=1)
    ticket_price: float = Field(..., ge=0)
    category: Optional[str] = Field(None, max_length=50)


class EventUpdateRequest(CamelModel):
    """Every field optional; only the fields sent are changed"""

    model_config = ConfigDict(
        json_schema_extra={'example': {'ticketPrice': 55.0, 'totalTickets': 250}}
    )

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime] = None
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    total_tickets: Optional[int] = Field(None, ge=1)
    ticket_price: Optional[float] = Field(None, ge=0)
    status: Optional[EventStatus] = None
    category: Optional[str] = Field(None, max_length=50)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EventResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'title': 'Summer Jazz Night',
                'description': 'An evening of live jazz by the river',
                'organizerId': 1,
                'date': '2026-07-15T19:30:00Z',
                'location': 'Riverside Amphitheatre',
                'totalTickets': 200,
                'availableTickets': 197,
                'ticketPrice': 45.0,
                'status': 'published',
                'category': 'music',
            }
        }
    )

    id: int
    title: str
    description: str
    organizer_id: int
    date: datetime
    location: str
    total_tickets: int
    available_tickets: int
    ticket_price: float
    status: EventStatus
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventEnvelopeResponse(CamelModel):
    message: str
    event: EventResponse
