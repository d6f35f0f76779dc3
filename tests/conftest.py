import asyncio
import os
from pathlib import Path

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine


# Point the app at a throwaway SQLite file before any settings are loaded
_TEST_DIR = Path(__file__).parent
TEST_DB_PATH = _TEST_DIR / 'test_event_ticketing.db'
TEST_DATABASE_URL = f'sqlite+aiosqlite:///{TEST_DB_PATH}'
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['REDIS_ENABLED'] = 'false'

# Override LOG_DIR to use test log directory
test_log_dir = _TEST_DIR / 'test_log'
test_log_dir.mkdir(exist_ok=True)
os.environ['TEST_LOG_DIR'] = str(test_log_dir)

from event_ticketing.platform.config.di import container  # noqa: E402
from event_ticketing.platform.database.orm_db_setting import Base  # noqa: E402
import event_ticketing.service.ticketing.driven_adapter.model  # noqa: E402, F401
from tests.test_app import app  # noqa: E402


# Children first: booking and event reference user
_TABLES_IN_DELETE_ORDER = ('booking', 'event', 'user')


async def setup_test_database() -> None:
    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def clean_all_tables() -> None:
    engine = create_async_engine(TEST_DATABASE_URL)
    try:
        async with engine.begin() as conn:
            for table in _TABLES_IN_DELETE_ORDER:
                await conn.execute(text(f'DELETE FROM "{table}"'))
    finally:
        await engine.dispose()


def pytest_sessionstart(session):
    asyncio.run(setup_test_database())


def pytest_sessionfinish(session, exitstatus):
    TEST_DB_PATH.unlink(missing_ok=True)


@pytest.fixture(autouse=True)
def clean_database():
    asyncio.run(clean_all_tables())
    # Drop notifications buffered in memory by earlier tests
    container.notification_queue.reset()
    yield


@pytest.fixture(scope='session')
def client():
    with TestClient(app) as test_client:
        yield test_client
