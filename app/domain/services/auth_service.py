# app/domain/services/auth_service.py

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import uuid


class AuthService:
    """
    Domain service for session token claims.
    """

    REQUIRED_CLAIMS = ("sub", "userId", "iat", "exp")

    @staticmethod
    def create_token_payload(
            user_id: Any,
            expires_delta: timedelta,
            now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Create a session token payload.

        Args:
            user_id: Identifier of the authenticated user
            expires_delta: Token lifetime
            now: Issue instant (defaults to the current UTC time)

        Returns:
            Dict with ``sub``, ``userId``, ``iat``, ``exp`` and ``jti``
        """
        if now is None:
            now = datetime.now(timezone.utc)

        return {
            "sub": str(user_id),
            "userId": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + expires_delta).timestamp()),
            "jti": str(uuid.uuid4()),
        }

    @classmethod
    def has_required_claims(cls, token_payload: Dict[str, Any]) -> bool:
        """
        Check that a decoded payload carries every claim a session needs.
        """
        return all(claim in token_payload for claim in cls.REQUIRED_CLAIMS)
