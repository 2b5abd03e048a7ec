# app/application/ports/outbound/__init__.py

from app.application.ports.outbound.generic_repository import IRepository
from app.application.ports.outbound.user_repository_port import IUserRepository
from app.application.ports.outbound.pagamento_repository_port import IPagamentoRepository
from app.application.ports.outbound.token_service_port import (
    ITokenService,
    IRevokedTokenStore,
    TokenClaims,
    InvalidToken,
    VerificationResult,
)

__all__ = [
    "IRepository",
    "IUserRepository",
    "IPagamentoRepository",
    "ITokenService",
    "IRevokedTokenStore",
    "TokenClaims",
    "InvalidToken",
    "VerificationResult",
]
