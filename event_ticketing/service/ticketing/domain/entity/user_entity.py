from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from event_ticketing.platform.exception.exceptions import AuthenticationError


if TYPE_CHECKING:
    from event_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


class UserRole(StrEnum):
    CUSTOMER = 'customer'
    ORGANIZER = 'organizer'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.CUSTOMER
    created_at: Optional[datetime] = None

    @property
    def is_organizer(self) -> bool:
        return self.role == UserRole.ORGANIZER

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('Invalid email or password')

        return user_entity

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        # Use SecretStr to protect sensitive password data
        secret_password = SecretStr(plain_password)
        self.hashed_password = password_hasher.hash_password(plain_password=secret_password)
