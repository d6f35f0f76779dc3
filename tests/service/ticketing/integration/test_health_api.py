import pytest

from event_ticketing.platform.constant.route_constant import HEALTH
from tests.shared.utils import assert_response_status, book_tickets, create_published_event


@pytest.mark.integration
class TestHealth:
    def test_api_health(self, client):
        response = client.get(HEALTH)

        assert_response_status(response, 200)
        assert response.json() == {'status': 'OK', 'message': 'Event Booking API is running'}

    def test_container_health(self, client):
        response = client.get('/health')

        assert_response_status(response, 200)
        assert response.json()['status'] == 'healthy'

    def test_metrics_exposed(self, client, organizer, customer):
        event = create_published_event(client, organizer['headers'])
        book_tickets(client, customer['headers'], event['id'], 1)

        response = client.get('/metrics')

        assert_response_status(response, 200)
        assert 'booking_requests_total' in response.text
        assert 'tickets_booked_total' in response.text
