"""
Account registration (Use Case Layer)
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.exception.exceptions import ConflictError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from event_ticketing.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from event_ticketing.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity, UserRole


class SignUpUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def sign_up(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> UserEntity:
        # Unique index on email still backs this up when two signups race
        if await self.user_query_repo.exists_by_email(email):
            raise ConflictError(f'User with email {email} already exists')

        user_entity = UserEntity(email=email, name=name, role=role)
        user_entity.set_password(password, self.password_hasher)

        created = await self.user_command_repo.create(user_entity)
        Logger.base.info(f'👤 [SIGNUP] Registered {created.role.value} {created.id}')
        return created
