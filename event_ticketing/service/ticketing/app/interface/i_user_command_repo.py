from abc import ABC, abstractmethod

from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new account. Raises ConflictError when the email is taken."""
        pass
