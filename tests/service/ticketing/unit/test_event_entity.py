from datetime import datetime, timezone

import pytest

from event_ticketing.platform.exception.exceptions import AuthorizationError, ValidationError
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus


def _event(**overrides) -> EventEntity:
    fields = {
        'id': 1,
        'title': 'Summer Jazz Night',
        'description': 'Live jazz',
        'organizer_id': 7,
        'date': datetime(2030, 7, 15, 19, 30, tzinfo=timezone.utc),
        'location': 'Riverside',
        'total_tickets': 10,
        'available_tickets': 10,
        'ticket_price': 50.0,
        'status': EventStatus.PUBLISHED,
    }
    fields.update(overrides)
    return EventEntity(**fields)


@pytest.mark.unit
class TestEventEntity:
    def test_create_starts_as_draft_with_all_tickets_available(self):
        event = EventEntity.create(
            title='Summer Jazz Night',
            description='Live jazz',
            organizer_id=7,
            date=datetime(2030, 7, 15, tzinfo=timezone.utc),
            location='Riverside',
            total_tickets=25,
            ticket_price=12.5,
        )

        assert event.status == EventStatus.DRAFT
        assert event.available_tickets == 25
        assert event.sold_tickets == 0

    def test_available_tickets_cannot_exceed_total(self):
        with pytest.raises(ValidationError):
            _event(total_tickets=5, available_tickets=6)

    def test_total_tickets_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            _event(total_tickets=0, available_tickets=0)

        assert exc_info.value.field == 'totalTickets'

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError):
            _event(title='   ')

    def test_validate_owner_rejects_other_organizer(self):
        event = _event()

        with pytest.raises(AuthorizationError) as exc_info:
            event.validate_owner(99, action='update')

        assert exc_info.value.message == 'Not authorized to update this event'

    def test_resize_up_shifts_available_by_difference(self):
        event = _event(total_tickets=10, available_tickets=4)

        resized = event.apply_changes({'total_tickets': 15})

        assert resized.total_tickets == 15
        assert resized.available_tickets == 9
        assert resized.sold_tickets == event.sold_tickets

    def test_resize_down_to_exactly_sold_leaves_none_available(self):
        event = _event(total_tickets=10, available_tickets=4)

        resized = event.apply_changes({'total_tickets': 6})

        assert resized.available_tickets == 0

    def test_resize_below_sold_is_rejected(self):
        event = _event(total_tickets=10, available_tickets=4)

        with pytest.raises(ValidationError) as exc_info:
            event.apply_changes({'total_tickets': 5})

        assert exc_info.value.field == 'totalTickets'
        assert '(6)' in exc_info.value.message

    def test_apply_changes_does_not_mutate_original(self):
        event = _event()

        event.apply_changes({'title': 'New title', 'ticket_price': 60.0})

        assert event.title == 'Summer Jazz Night'
        assert event.ticket_price == 50.0

    def test_apply_changes_rejects_unknown_field(self):
        with pytest.raises(ValidationError):
            _event().apply_changes({'available_tickets': 100})

    def test_publish(self):
        published = _event(status=EventStatus.DRAFT).publish()

        assert published.is_published

    def test_describe_changes_uses_public_field_names(self):
        assert (
            EventEntity.describe_changes({'title': 'x', 'ticket_price': 1.0})
            == 'Updated title, ticketPrice'
        )
        assert EventEntity.describe_changes({}) == 'No changes'
