"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, SecretStr

from event_ticketing.service.ticketing.domain.entity.user_entity import UserRole
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.base_schema import (
    CamelModel,
)


class SignUpRequest(CamelModel):
    """Create account request schema"""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Jane Doe',
                'email': 'jane@example.com',
                'password': 'P@ssw0rd',
                'role': 'organizer',
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=6,
        max_length=72,
        description='Password must be 6-72 characters (bcrypt limit)',
    )
    role: UserRole = UserRole.CUSTOMER


class LoginRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'jane@example.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)


class UserResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Jane Doe',
                'email': 'jane@example.com',
                'role': 'organizer',
            }
        }
    )

    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserResponse
