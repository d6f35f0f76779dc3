from datetime import datetime, timezone
from typing import Any, Optional

import attrs

from event_ticketing.platform.exception.exceptions import AuthorizationError, ValidationError
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus


# Fields an organizer may change through an update
UPDATABLE_FIELDS = (
    'title',
    'description',
    'date',
    'location',
    'total_tickets',
    'ticket_price',
    'status',
    'category',
)

# Public (camelCase) names used in error payloads
_FIELD_ALIASES = {'total_tickets': 'totalTickets', 'ticket_price': 'ticketPrice'}


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f'Event {attribute.name} cannot be empty', field=attribute.name)


def _validate_total_tickets(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValidationError('totalTickets must be at least 1', field='totalTickets')


def _validate_ticket_price(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value < 0:
        raise ValidationError('ticketPrice cannot be negative', field='ticketPrice')


@attrs.define
class EventEntity:
    title: str = attrs.field(validator=_validate_non_empty_string)
    description: str = attrs.field(validator=_validate_non_empty_string)
    organizer_id: int
    date: datetime
    location: str = attrs.field(validator=_validate_non_empty_string)
    total_tickets: int = attrs.field(validator=_validate_total_tickets)
    available_tickets: int
    ticket_price: float = attrs.field(validator=_validate_ticket_price)
    status: EventStatus = attrs.field(default=EventStatus.DRAFT, converter=EventStatus)
    category: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.available_tickets <= self.total_tickets:
            raise ValidationError(
                f'availableTickets must be between 0 and {self.total_tickets}',
                field='availableTickets',
            )

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        organizer_id: int,
        date: datetime,
        location: str,
        total_tickets: int,
        ticket_price: float,
        category: Optional[str] = None,
    ) -> 'EventEntity':
        now = datetime.now(timezone.utc)
        return cls(
            title=title,
            description=description,
            organizer_id=organizer_id,
            date=date,
            location=location,
            total_tickets=total_tickets,
            available_tickets=total_tickets,
            ticket_price=ticket_price,
            status=EventStatus.DRAFT,
            category=category,
            created_at=now,
            updated_at=now,
        )

    @property
    def sold_tickets(self) -> int:
        return self.total_tickets - self.available_tickets

    @property
    def is_published(self) -> bool:
        return self.status == EventStatus.PUBLISHED

    def validate_owner(self, user_id: int, *, action: str) -> None:
        if self.organizer_id != user_id:
            raise AuthorizationError(f'Not authorized to {action} this event')

    def apply_changes(self, changes: dict[str, Any]) -> 'EventEntity':
        """
        Return a copy with the organizer's changes applied.

        A new total_tickets keeps the tickets already sold: available tickets
        shift by the difference, and the total can never drop below sold.
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f'Cannot update field {sorted(unknown)[0]}')

        updates = dict(changes)
        new_total = updates.get('total_tickets')
        if new_total is not None and new_total != self.total_tickets:
            if new_total < self.sold_tickets:
                raise ValidationError(
                    f'totalTickets cannot be lower than tickets already sold ({self.sold_tickets})',
                    field='totalTickets',
                )
            updates['available_tickets'] = self.available_tickets + (new_total - self.total_tickets)

        return attrs.evolve(self, **updates, updated_at=datetime.now(timezone.utc))

    def publish(self) -> 'EventEntity':
        return attrs.evolve(
            self, status=EventStatus.PUBLISHED, updated_at=datetime.now(timezone.utc)
        )

    @staticmethod
    def describe_changes(changes: dict[str, Any]) -> str:
        if not changes:
            return 'No changes'
        names = [_FIELD_ALIASES.get(field, field) for field in changes]
        return f'Updated {", ".join(names)}'
