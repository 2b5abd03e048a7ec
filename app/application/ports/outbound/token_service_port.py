# app/application/ports/outbound/token_service_port.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional, Union


@dataclass(frozen=True)
class TokenClaims:
    """Claims recovered from a valid session token."""
    user_id: Any
    issued_at: datetime
    expires_at: datetime
    token_id: Optional[str] = None


@dataclass(frozen=True)
class InvalidToken:
    """Result of verifying a token that is forged, malformed or expired."""
    reason: str

    def __bool__(self) -> bool:
        return False


VerificationResult = Union[TokenClaims, InvalidToken]


class ITokenService(ABC):
    """Token handling interface."""

    @abstractmethod
    def issue(self, user_id: Any, expires_delta: Optional[timedelta] = None) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> VerificationResult:
        pass


class IRevokedTokenStore(ABC):
    """Set of revoked token strings."""

    @abstractmethod
    def revoke(self, token: str) -> None:
        pass

    @abstractmethod
    def is_revoked(self, token: str) -> bool:
        pass
