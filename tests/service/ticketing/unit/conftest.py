"""
Unit test configuration for ticketing service.

Overrides autouse fixtures from the root conftest so unit tests run without
a database or the session-scoped TestClient.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, Mock

from fastapi.testclient import TestClient
import pytest


@pytest.fixture(autouse=True)
def clean_database() -> Generator[None, None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    mock_client = MagicMock(spec=TestClient)
    yield mock_client


@pytest.fixture
def mock_uow() -> Mock:
    """Unit of work whose repositories are all AsyncMocks"""
    uow = Mock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.event_command_repo = AsyncMock()
    uow.event_query_repo = AsyncMock()
    uow.booking_command_repo = AsyncMock()
    uow.booking_query_repo = AsyncMock()
    return uow


@pytest.fixture
def mock_notification_queue() -> AsyncMock:
    return AsyncMock()
