# app/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements the business logic for signup, login and logout,
following Clean Architecture and Domain-Driven Design principles.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import User
from app.adapters.outbound.persistence.repositories.user_repository import user_repository
from app.application.dtos.user_dto import UserCreate, UserLogin, TokenData
from app.application.ports.outbound import ITokenService, IRevokedTokenStore
from app.domain.exceptions import InvalidCredentialsException, ValidationException
from app.shared.utils.messages_utils import msg

logger = logging.getLogger(__name__)


class AsyncAuthService:
    """
    Application service for authentication-related operations.

    Responsibilities:
    - Register new users
    - Authenticate users and issue session tokens
    - Revoke tokens on logout
    """

    def __init__(self, db_session: AsyncSession, token_service: ITokenService):
        """Initialize with a database session and the token service."""
        self.db = db_session
        self.token_service = token_service

    async def register_user(self, user_input: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            ResourceAlreadyExistsException: Username already registered.
        """
        user = await user_repository.create_with_password(self.db, obj_in=user_input)
        logger.info(f"User registered successfully: id={user.id}")
        return user

    async def login_user(self, user_input: UserLogin) -> TokenData:
        """
        Authenticate user and issue a session token.

        The same error is raised for an unknown username and a wrong
        password.

        Raises:
            ValidationException: If username or password is missing.
            InvalidCredentialsException: If credentials are incorrect.
            SigningKeyMissingException: If no signing secret is configured.
        """
        if not user_input.username or not user_input.password:
            raise ValidationException(message=msg("login_fields_required"))

        user = await user_repository.authenticate(
            db=self.db,
            username=user_input.username,
            password=user_input.password,
        )

        if not user:
            logger.warning("Authentication failed for a login attempt")
            raise InvalidCredentialsException(message=msg("generic_invalid_credentials"))

        token = self.token_service.issue(user.id)

        logger.info(f"User logged in successfully: id={user.id}")
        return TokenData(token=token)

    @staticmethod
    def logout_user(token: str, revoked_tokens: IRevokedTokenStore) -> None:
        """Revoke the presented token; later requests carrying it are rejected."""
        revoked_tokens.revoke(token)
