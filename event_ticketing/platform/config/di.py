"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from event_ticketing.platform.config.core_setting import Settings
from event_ticketing.platform.database.orm_db_setting import Database
from event_ticketing.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from event_ticketing.platform.state.keyed_lock import KeyedLock
from event_ticketing.platform.state.redis_client import redis_client
from event_ticketing.service.ticketing.driven_adapter.notification.notification_queue_impl import (
    NotificationQueueImpl,
)
from event_ticketing.service.ticketing.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from event_ticketing.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from event_ticketing.service.ticketing.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)
from event_ticketing.service.ticketing.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from event_ticketing.service.ticketing.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)
from event_ticketing.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Unit of Work (one per request; opens a fresh session on every `async with`)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Per-event inventory serialization, shared by booking, cancel and resize
    event_lock = providers.Singleton(KeyedLock, name='event')

    # Notification dispatcher (Redis list, in-memory fallback)
    notification_queue = providers.Singleton(NotificationQueueImpl, client=redis_client)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
