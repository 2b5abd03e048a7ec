# app/adapters/outbound/security/token_service.py

"""
Emissão e verificação de tokens de sessão (JWT).

O serviço não guarda estado: a revogação fica a cargo do
RevokedTokenStore, consultado pelo guard de autenticação.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from app.application.ports.outbound.token_service_port import (
    ITokenService,
    InvalidToken,
    TokenClaims,
    VerificationResult,
)
from app.domain.exceptions import SigningKeyMissingException
from app.domain.services.auth_service import AuthService

# Configurar logger
logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_DELTA = timedelta(hours=1)


class TokenService(ITokenService):
    """
    JWT session tokens signed with a process-wide secret.

    Responsibilities:
    - Issue a token for a user id with an expiry
    - Verify signature, structure and expiry, returning ``InvalidToken``
      instead of raising
    """

    def __init__(
            self,
            secret_key: Optional[str],
            algorithm: str = "HS256",
            expires_delta: timedelta = DEFAULT_EXPIRES_DELTA,
    ):
        self.secret_key = secret_key or None
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @property
    def is_configured(self) -> bool:
        return self.secret_key is not None

    def issue(self, user_id: Any, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed session token.

        Raises:
            SigningKeyMissingException: If no signing secret is configured.
        """
        if not self.is_configured:
            logger.critical("Token signing secret (SECRET_KEY/JWT_SECRET) is not configured")
            raise SigningKeyMissingException()

        if expires_delta is None:
            expires_delta = self.expires_delta

        payload = AuthService.create_token_payload(user_id, expires_delta)
        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug("Session token issued for user_id=%s", user_id)
        return token

    def verify(self, token: str) -> VerificationResult:
        """
        Check signature and expiry of a token.

        Returns:
            TokenClaims when valid, otherwise InvalidToken with the reason.
        """
        if not self.is_configured:
            return InvalidToken(reason="signing secret not configured")
        if not token:
            return InvalidToken(reason="empty token")

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Expired session token presented")
            return InvalidToken(reason="expired")
        except JWTError as e:
            logger.warning("Invalid session token: %s", str(e))
            return InvalidToken(reason="invalid signature or malformed token")

        if not AuthService.has_required_claims(payload):
            logger.warning("Session token missing required claims")
            return InvalidToken(reason="missing claims")

        try:
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            return InvalidToken(reason="malformed timestamps")

        return TokenClaims(
            user_id=payload["userId"],
            issued_at=issued_at,
            expires_at=expires_at,
            token_id=payload.get("jti"),
        )
