# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware
from app.shared.middleware.error_handler_middleware import (
    ErrorHandlerMiddleware,
    http_exception_handler,
    validation_exception_handler,
)

# Export all for easy imports
__all__ = [
    "AsyncRequestLoggingMiddleware",
    "ErrorHandlerMiddleware",
    "http_exception_handler",
    "validation_exception_handler",
]
