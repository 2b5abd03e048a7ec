# app/shared/middleware/error_handler_middleware.py

from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.adapters.configuration.config import settings
from app.domain.exceptions import DatabaseOperationException, DomainException
from app.shared.utils.messages_utils import msg
import logging

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, code: str, details: Any = None) -> JSONResponse:
    """Corpo padrão de erro: ``{success, error, code, details}``."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "code": code,
            "details": jsonable_encoder(details),
        },
    )


def _domain_details(e: DomainException) -> Optional[Any]:
    # Detalhes do banco só aparecem em desenvolvimento
    if isinstance(e, DatabaseOperationException):
        if settings.is_development and e.original_error is not None:
            return str(e.original_error)
        return None
    return e.details


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        # 1. Exceções customizadas do domínio
        except DomainException as e:
            if e.status_code >= 500:
                logger.error(f"[{e.internal_code}] {request.method} {request.url.path}: {e.message}")
            else:
                logger.warning(f"[{e.internal_code}] DomainException: {e.message}")
            return error_response(e.status_code, e.message, e.internal_code, _domain_details(e))

        # 2. Erros inesperados
        except Exception:
            logger.exception(f"Erro inesperado em {request.url.path}")
            return error_response(500, msg("internal_error"), "INTERNAL_SERVER_ERROR")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de validação (Pydantic/FastAPI) viram 400 com a lista de erros."""
    logger.warning(f"RequestValidationError on {request.url.path}")
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(400, msg("validation_error"), "VALIDATION_ERROR", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Exceções HTTP padrão (404 de rota, 405, etc.)."""
    logger.warning(f"HTTPException {exc.status_code}: {exc.detail}")
    response = error_response(exc.status_code, str(exc.detail), "HTTP_EXCEPTION")
    if exc.headers:
        response.headers.update(exc.headers)
    return response
