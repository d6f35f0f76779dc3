from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.exception.exceptions import ConflictError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel
from event_ticketing.service.ticketing.driven_adapter.repo.user_query_repo_impl import (
    user_model_to_entity,
)


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                role=user_entity.role.value,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Unique index on email: lost a race with a concurrent signup
                await session.rollback()
                raise ConflictError(f'User with email {user_entity.email} already exists') from e
            await session.refresh(user_model)

            return user_model_to_entity(user_model)
