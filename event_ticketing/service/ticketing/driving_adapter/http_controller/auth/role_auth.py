"""
Role gate for the HTTP layer.

Authentication (who is calling) happens in auth_controller.get_current_user;
this module only answers whether that account's role may use an endpoint.
Ownership of a specific event or booking is checked later, in the use cases.
"""

from typing import Awaitable, Callable

from fastapi import Depends
from opentelemetry import trace

from event_ticketing.platform.exception.exceptions import AuthorizationError
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth_controller import (
    get_current_user,
)


tracer = trace.get_tracer(__name__)

_ROLE_DENIED_MESSAGES = {
    UserRole.CUSTOMER: 'Only customers can perform this action',
    UserRole.ORGANIZER: 'Only organizers can perform this action',
}


class RoleAuthStrategy:
    @staticmethod
    def can_manage_events(user: UserEntity) -> bool:
        return user.role == UserRole.ORGANIZER

    @staticmethod
    def can_book_tickets(user: UserEntity) -> bool:
        return user.role == UserRole.CUSTOMER

    @classmethod
    def has_role(cls, user: UserEntity, role: UserRole) -> bool:
        if role == UserRole.ORGANIZER:
            return cls.can_manage_events(user)
        return cls.can_book_tickets(user)


def require_role(role: UserRole) -> Callable[..., Awaitable[UserEntity]]:
    async def dependency(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
        with tracer.start_as_current_span(
            f'auth.require_{role.value}',
            attributes={'user.id': current_user.id or 0, 'user.role': current_user.role.value},
        ):
            if not RoleAuthStrategy.has_role(current_user, role):
                raise AuthorizationError(_ROLE_DENIED_MESSAGES[role])
            return current_user

    dependency.__name__ = f'require_{role.value}'
    return dependency


require_customer = require_role(UserRole.CUSTOMER)
require_organizer = require_role(UserRole.ORGANIZER)

__all__ = ['RoleAuthStrategy', 'get_current_user', 'require_customer', 'require_organizer']
