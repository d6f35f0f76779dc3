from typing import AsyncContextManager, Callable, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from event_ticketing.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from event_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        hashed_password=user_model.hashed_password,
        role=UserRole(user_model.role),
        created_at=user_model.created_at,
    )


class UserQueryRepoImpl(IUserQueryRepo):
    """Account lookups; credential checks stay here so the hash never leaves the adapter."""

    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher

    async def _find_by_email(self, email: str) -> Optional[UserModel]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            return result.scalar_one_or_none()

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        user_model = await self._find_by_email(email)
        return user_model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)
            return user_model_to_entity(user_model) if user_model else None

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.first() is not None

    @Logger.io
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        user_model = await self._find_by_email(email)
        if user_model is None:
            return None

        matches = self.password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=user_model.hashed_password
        )
        return user_model_to_entity(user_model) if matches else None
