from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.command.sign_up_use_case import SignUpUseCase
from event_ticketing.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    AuthResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()

# auto_error=False so a missing header surfaces as our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserEntity:
    """Current account from the bearer token (stateless, no DB query)"""
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_user_info_from_jwt(token)


@router.post('/signup', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def signup(
    request: SignUpRequest,
    use_case: SignUpUseCase = Depends(SignUpUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await use_case.sign_up(
        name=request.name,
        email=request.email,
        password=request.password.get_secret_value(),
        role=request.role,
    )

    return AuthResponse(
        message='User registered successfully',
        token=jwt_auth.create_jwt_token(user_entity),
        user=UserResponse.model_validate(user_entity),
    )


@router.post('/login', response_model=AuthResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    return AuthResponse(
        message='Login successful',
        token=jwt_auth.create_jwt_token(user_entity),
        user=UserResponse.model_validate(user_entity),
    )


@router.get('/me', response_model=UserResponse)
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
