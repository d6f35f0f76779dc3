import pytest

from event_ticketing.platform.constant.route_constant import (
    EVENT_BASE,
    EVENT_DELETE,
    EVENT_GET,
    EVENT_PUBLISH,
    EVENT_UPDATE,
)
from tests.shared.utils import (
    assert_response_status,
    book_tickets,
    create_event,
    create_published_event,
    event_payload,
)
from tests.util_constant import TEST_EVENT_TITLE, TEST_EVENT_TOTAL_TICKETS


@pytest.mark.integration
class TestCreateEvent:
    def test_organizer_creates_draft(self, client, organizer):
        response = client.post(EVENT_BASE, json=event_payload(), headers=organizer['headers'])

        assert_response_status(response, 201)
        body = response.json()
        assert body['message'] == 'Event created successfully'
        event = body['event']
        assert event['title'] == TEST_EVENT_TITLE
        assert event['status'] == 'draft'
        assert event['organizerId'] == organizer['user']['id']
        assert event['availableTickets'] == event['totalTickets'] == TEST_EVENT_TOTAL_TICKETS

    def test_customer_cannot_create(self, client, customer):
        response = client.post(EVENT_BASE, json=event_payload(), headers=customer['headers'])

        assert_response_status(response, 403)

    def test_anonymous_cannot_create(self, client):
        response = client.post(EVENT_BASE, json=event_payload())

        assert_response_status(response, 401)

    def test_zero_tickets_is_rejected(self, client, organizer):
        response = client.post(
            EVENT_BASE, json=event_payload(totalTickets=0), headers=organizer['headers']
        )

        assert_response_status(response, 400)
        assert response.json()['field'] == 'totalTickets'

    def test_negative_price_is_rejected(self, client, organizer):
        response = client.post(
            EVENT_BASE, json=event_payload(ticketPrice=-1), headers=organizer['headers']
        )

        assert_response_status(response, 400)
        assert response.json()['field'] == 'ticketPrice'

    def test_missing_title_is_rejected(self, client, organizer):
        payload = event_payload()
        del payload['title']

        response = client.post(EVENT_BASE, json=payload, headers=organizer['headers'])

        assert_response_status(response, 400)


@pytest.mark.integration
class TestListAndGetEvents:
    def test_list_defaults_to_published(self, client, organizer):
        create_event(client, organizer['headers'], title='Draft Show')
        published = create_published_event(client, organizer['headers'], title='Live Show')

        response = client.get(EVENT_BASE)

        assert_response_status(response, 200)
        assert [event['id'] for event in response.json()] == [published['id']]

    def test_list_by_status(self, client, organizer):
        draft = create_event(client, organizer['headers'], title='Draft Show')
        create_published_event(client, organizer['headers'], title='Live Show')

        response = client.get(EVENT_BASE, params={'status': 'draft'})

        assert_response_status(response, 200)
        assert [event['id'] for event in response.json()] == [draft['id']]

    def test_list_by_category(self, client, organizer):
        create_published_event(client, organizer['headers'], category='music')
        sport = create_published_event(client, organizer['headers'], category='sport')

        response = client.get(EVENT_BASE, params={'category': 'sport'})

        assert_response_status(response, 200)
        assert [event['id'] for event in response.json()] == [sport['id']]

    def test_invalid_status_filter(self, client):
        response = client.get(EVENT_BASE, params={'status': 'archived'})

        assert_response_status(response, 400)

    def test_get_event_is_public(self, client, organizer):
        event = create_event(client, organizer['headers'])

        response = client.get(EVENT_GET.format(event_id=event['id']))

        assert_response_status(response, 200)
        assert response.json()['id'] == event['id']

    def test_get_missing_event(self, client):
        response = client.get(EVENT_GET.format(event_id=999999))

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'Event not found'


@pytest.mark.integration
class TestUpdateEvent:
    def test_owner_updates_fields(self, client, organizer):
        event = create_event(client, organizer['headers'])

        response = client.put(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'title': 'Winter Jazz Night', 'ticketPrice': 60.0},
            headers=organizer['headers'],
        )

        assert_response_status(response, 200)
        updated = response.json()['event']
        assert updated['title'] == 'Winter Jazz Night'
        assert updated['ticketPrice'] == 60.0
        assert updated['location'] == event['location']

    def test_resize_keeps_sold_tickets(self, client, organizer, customer):
        event = create_published_event(client, organizer['headers'])
        assert_response_status(book_tickets(client, customer['headers'], event['id'], 4), 201)

        response = client.put(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'totalTickets': 20},
            headers=organizer['headers'],
        )

        assert_response_status(response, 200)
        updated = response.json()['event']
        assert updated['totalTickets'] == 20
        assert updated['availableTickets'] == 16

    def test_resize_below_sold_is_rejected(self, client, organizer, customer):
        event = create_published_event(client, organizer['headers'])
        assert_response_status(book_tickets(client, customer['headers'], event['id'], 6), 201)

        response = client.put(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'totalTickets': 5},
            headers=organizer['headers'],
        )

        assert_response_status(response, 400)
        assert response.json()['field'] == 'totalTickets'
        current = client.get(EVENT_GET.format(event_id=event['id'])).json()
        assert current['totalTickets'] == TEST_EVENT_TOTAL_TICKETS
        assert current['availableTickets'] == TEST_EVENT_TOTAL_TICKETS - 6

    def test_other_organizer_cannot_update(self, client, organizer, another_organizer):
        event = create_event(client, organizer['headers'])

        response = client.put(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'title': 'Hijacked'},
            headers=another_organizer['headers'],
        )

        assert_response_status(response, 403)

    def test_update_missing_event(self, client, organizer):
        response = client.put(
            EVENT_UPDATE.format(event_id=999999),
            json={'title': 'Ghost'},
            headers=organizer['headers'],
        )

        assert_response_status(response, 404)


@pytest.mark.integration
class TestPublishAndDeleteEvent:
    def test_publish(self, client, organizer):
        event = create_event(client, organizer['headers'])

        response = client.post(
            EVENT_PUBLISH.format(event_id=event['id']), headers=organizer['headers']
        )

        assert_response_status(response, 200)
        assert response.json()['event']['status'] == 'published'

    def test_other_organizer_cannot_publish(self, client, organizer, another_organizer):
        event = create_event(client, organizer['headers'])

        response = client.post(
            EVENT_PUBLISH.format(event_id=event['id']), headers=another_organizer['headers']
        )

        assert_response_status(response, 403)

    def test_publish_missing_event(self, client, organizer):
        response = client.post(EVENT_PUBLISH.format(event_id=999999), headers=organizer['headers'])

        assert_response_status(response, 404)

    def test_delete(self, client, organizer):
        event = create_event(client, organizer['headers'])

        response = client.delete(
            EVENT_DELETE.format(event_id=event['id']), headers=organizer['headers']
        )

        assert_response_status(response, 200)
        assert response.json()['message'] == 'Event deleted successfully'
        assert_response_status(client.get(EVENT_GET.format(event_id=event['id'])), 404)

    def test_other_organizer_cannot_delete(self, client, organizer, another_organizer):
        event = create_event(client, organizer['headers'])

        response = client.delete(
            EVENT_DELETE.format(event_id=event['id']), headers=another_organizer['headers']
        )

        assert_response_status(response, 403)
        assert_response_status(client.get(EVENT_GET.format(event_id=event['id'])), 200)

    def test_delete_missing_event(self, client, organizer):
        response = client.delete(EVENT_DELETE.format(event_id=999999), headers=organizer['headers'])

        assert_response_status(response, 404)
