# app/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.inbound.api.deps import (
    AuthenticatedUser,
    get_current_user,
    get_revoked_token_store,
    get_session,
    get_token_service,
)
from app.application.dtos.user_dto import (
    MessageOutput,
    SignupOutput,
    TokenData,
    UserCreate,
    UserLogin,
)
from app.application.ports.outbound import IRevokedTokenStore, ITokenService
from app.application.use_cases.auth_use_cases import AsyncAuthService
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.error_responses import auth_errors, guard_errors
from app.shared.utils.messages_utils import msg
from app.shared.utils.success_responses import auth_success, common_success, login_success

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
)


async def _signup(
        user_input: UserCreate,
        db: AsyncSession,
        token_service: ITokenService,
        message_key: str,
) -> SignupOutput:
    service = AsyncAuthService(db, token_service)
    try:
        user = await service.register_user(user_input)
    except DatabaseOperationException as e:
        logger.exception(f"Database error during signup: {e}")
        raise DatabaseOperationException(msg("user_create_error"), original_error=e.original_error)
    return SignupOutput(message=msg(message_key), user_id=user.id)


@router.post(
    "/signup",
    response_model=SignupOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates a user with a unique username. The password is stored as a bcrypt hash.",
    responses={**auth_success, **auth_errors}
)
async def signup(
        user_input: UserCreate,
        db: AsyncSession = Depends(get_session),
        token_service: ITokenService = Depends(get_token_service),
):
    return await _signup(user_input, db, token_service, "user_created")


@router.post(
    "/novo",
    response_model=SignupOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user (legacy)",
    description="Older signup route kept for existing clients. Same behaviour as /signup.",
    responses={**auth_success, **auth_errors}
)
async def signup_legacy(
        user_input: UserCreate,
        db: AsyncSession = Depends(get_session),
        token_service: ITokenService = Depends(get_token_service),
):
    return await _signup(user_input, db, token_service, "user_registered")


@router.post(
    "/login",
    response_model=TokenData,
    status_code=status.HTTP_200_OK,
    summary="Login user",
    description="Authenticates user credentials and returns a JWT session token.",
    responses={**login_success, **auth_errors}
)
async def login(
        user_input: UserLogin,
        db: AsyncSession = Depends(get_session),
        token_service: ITokenService = Depends(get_token_service),
):
    service = AsyncAuthService(db, token_service)
    try:
        return await service.login_user(user_input)
    except DatabaseOperationException as e:
        logger.exception(f"Database error during login: {e}")
        raise DatabaseOperationException(msg("login_error"), original_error=e.original_error)


@router.post(
    "/logout",
    response_model=MessageOutput,
    status_code=status.HTTP_200_OK,
    summary="Logout user",
    description="Revokes the presented token for the rest of the server's lifetime.",
    responses={**common_success, **guard_errors}
)
async def logout(
        current_user: AuthenticatedUser = Depends(get_current_user),
        revoked_tokens: IRevokedTokenStore = Depends(get_revoked_token_store),
):
    AsyncAuthService.logout_user(current_user.token, revoked_tokens)
    logger.info(f"User {current_user.user_id} logged out")
    return MessageOutput(message=msg("logout_success"))
