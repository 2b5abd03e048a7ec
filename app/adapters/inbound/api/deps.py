# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication and database access.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.adapters.outbound.persistence.database import get_db
from app.application.ports.outbound import (
    IRevokedTokenStore,
    ITokenService,
    InvalidToken,
)
from app.domain.exceptions import (
    AuthenticationRequiredException,
    InvalidTokenException,
    TokenRevokedException,
)

# Configure logger
logger = logging.getLogger(__name__)

# auto_error=False: a missing header must be our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity attached to a request that passed the auth guard."""
    user_id: Any
    token: str


########################################################################
# Database Session Management
########################################################################

# Alias for get_db
get_session = get_db


########################################################################
# Token services (process-wide, held on app.state)
########################################################################

def get_token_service(request: Request) -> ITokenService:
    return request.app.state.token_service


def get_revoked_token_store(request: Request) -> IRevokedTokenStore:
    return request.app.state.revoked_tokens


########################################################################
# User Token Authentication
########################################################################

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    token_service: ITokenService = Depends(get_token_service),
    revoked_tokens: IRevokedTokenStore = Depends(get_revoked_token_store),
) -> AuthenticatedUser:
    """
    Require a valid, non-revoked bearer token.

    Checks run in this order:
    1. ``Authorization: Bearer <token>`` present, otherwise 401
    2. Token not revoked by a logout, otherwise 403
    3. Signature and expiry valid, otherwise 403

    Returns:
        AuthenticatedUser with the user id carried by the token

    Raises:
        AuthenticationRequiredException: No bearer token
        TokenRevokedException: Token was revoked
        InvalidTokenException: Token is forged, malformed or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredException()

    token = credentials.credentials

    if revoked_tokens.is_revoked(token):
        logger.info(f"Revoked token presented on {request.url.path}")
        raise TokenRevokedException()

    result = token_service.verify(token)
    if isinstance(result, InvalidToken):
        logger.info(f"Rejected token on {request.url.path}: {result.reason}")
        raise InvalidTokenException()

    request.state.user_id = result.user_id
    return AuthenticatedUser(user_id=result.user_id, token=token)
