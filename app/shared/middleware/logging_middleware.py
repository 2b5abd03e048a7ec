# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

One line per request once the response is ready: method, path, status,
elapsed time and, when the auth guard accepted a token, the user id.
Headers and bodies are never logged, so tokens and passwords stay out
of the logs.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

logger = logging.getLogger(__name__)


def describe_request(request: Request) -> str:
    """Método, caminho e, fora de produção, query e IP do cliente."""
    description = f"{request.method} {request.url.path}"
    if settings.ENVIRONMENT != "production":
        if request.query_params:
            description += f" ?{request.url.query}"
        if request.client:
            description += f" from {request.client.host}"
    return description


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # user_id é preenchido por get_current_user nas rotas protegidas
        user_id = getattr(request.state, "user_id", None)
        logger.info(
            f"{describe_request(request)} -> {response.status_code} "
            f"in {elapsed:.4f}s user={user_id if user_id is not None else '-'}"
        )
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response
