from typing import Any, Dict

from fastapi.testclient import TestClient

from event_ticketing.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_SIGNUP,
    BOOKING_BASE,
    EVENT_BASE,
    EVENT_PUBLISH,
)
from tests.util_constant import (
    DEFAULT_PASSWORD,
    TEST_EVENT_CATEGORY,
    TEST_EVENT_DATE,
    TEST_EVENT_DESCRIPTION,
    TEST_EVENT_LOCATION,
    TEST_EVENT_TICKET_PRICE,
    TEST_EVENT_TITLE,
    TEST_EVENT_TOTAL_TICKETS,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response.text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_user(
    client: TestClient, email: str, name: str, role: str, password: str = DEFAULT_PASSWORD
) -> Dict[str, Any]:
    """Sign up and return {'token', 'user', 'headers'}"""
    response = client.post(
        AUTH_SIGNUP, json={'name': name, 'email': email, 'password': password, 'role': role}
    )
    assert_response_status(response, 201, f'Failed to create {role} user')
    body = response.json()
    return {'token': body['token'], 'user': body['user'], 'headers': auth_headers(body['token'])}


def login_user(client: TestClient, email: str, password: str = DEFAULT_PASSWORD):
    return client.post(AUTH_LOGIN, json={'email': email, 'password': password})


def event_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        'title': TEST_EVENT_TITLE,
        'description': TEST_EVENT_DESCRIPTION,
        'date': TEST_EVENT_DATE,
        'location': TEST_EVENT_LOCATION,
        'totalTickets': TEST_EVENT_TOTAL_TICKETS,
        'ticketPrice': TEST_EVENT_TICKET_PRICE,
        'category': TEST_EVENT_CATEGORY,
    }
    payload.update(overrides)
    return payload


def create_event(client: TestClient, headers: Dict[str, str], **overrides: Any) -> Dict[str, Any]:
    response = client.post(EVENT_BASE, json=event_payload(**overrides), headers=headers)
    assert_response_status(response, 201, 'Failed to create event')
    return response.json()['event']


def publish_event(client: TestClient, headers: Dict[str, str], event_id: int) -> Dict[str, Any]:
    response = client.post(EVENT_PUBLISH.format(event_id=event_id), headers=headers)
    assert_response_status(response, 200, 'Failed to publish event')
    return response.json()['event']


def create_published_event(
    client: TestClient, headers: Dict[str, str], **overrides: Any
) -> Dict[str, Any]:
    event = create_event(client, headers, **overrides)
    return publish_event(client, headers, event['id'])


def book_tickets(client: TestClient, headers: Dict[str, str], event_id: int, quantity: int):
    return client.post(
        BOOKING_BASE, json={'eventId': event_id, 'quantity': quantity}, headers=headers
    )
