"""
Unit of Work Pattern - one database transaction shared by several repositories

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback (anything not committed is rolled back on exit)
- Repositories created by the UoW share its session
- Use cases coordinate inventory counters and bookings through one UoW
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from event_ticketing.service.ticketing.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from event_ticketing.service.ticketing.app.interface.i_booking_query_repo import (
        IBookingQueryRepo,
    )
    from event_ticketing.service.ticketing.app.interface.i_event_command_repo import (
        IEventCommandRepo,
    )
    from event_ticketing.service.ticketing.app.interface.i_event_query_repo import (
        IEventQueryRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Ticketing Service

    Usage:
        async with uow:
            reserved = await uow.event_command_repo.try_reserve_tickets(...)
            booking = await uow.booking_command_repo.create(...)
            await uow.commit()
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    event_command_repo: IEventCommandRepo
    event_query_repo: IEventQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened on every `async with` so one UoW instance
    per request is enough.
    """

    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from event_ticketing.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
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

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Create repositories with shared session
        self.booking_command_repo = BookingCommandRepoImpl(session_factory=None)
        self.booking_command_repo.session = self.session
        self.booking_query_repo = BookingQueryRepoImpl(session_factory=None)
        self.booking_query_repo.session = self.session
        self.event_command_repo = EventCommandRepoImpl(session_factory=None)
        self.event_command_repo.session = self.session
        self.event_query_repo = EventQueryRepoImpl(session_factory=None)
        self.event_query_repo.session = self.session

        return await super().__aenter__()

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_cm is not None:
                await self._session_cm.__aexit__(*args)
            self._session_cm = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of `async with`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
