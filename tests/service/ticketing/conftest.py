import pytest

from tests.shared.utils import create_user
from tests.util_constant import (
    ANOTHER_CUSTOMER_EMAIL,
    ANOTHER_CUSTOMER_NAME,
    ANOTHER_ORGANIZER_EMAIL,
    ANOTHER_ORGANIZER_NAME,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
    TEST_ORGANIZER_EMAIL,
    TEST_ORGANIZER_NAME,
)


@pytest.fixture
def organizer(client):
    return create_user(client, TEST_ORGANIZER_EMAIL, TEST_ORGANIZER_NAME, 'organizer')


@pytest.fixture
def another_organizer(client):
    return create_user(client, ANOTHER_ORGANIZER_EMAIL, ANOTHER_ORGANIZER_NAME, 'organizer')


@pytest.fixture
def customer(client):
    return create_user(client, TEST_CUSTOMER_EMAIL, TEST_CUSTOMER_NAME, 'customer')


@pytest.fixture
def another_customer(client):
    return create_user(client, ANOTHER_CUSTOMER_EMAIL, ANOTHER_CUSTOMER_NAME, 'customer')
