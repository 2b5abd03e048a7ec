# app/main.py

"""
Application entry point.

Builds the FastAPI app, wires middlewares and routers, and exposes
``run()`` for the uvicorn runner.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.adapters.configuration.config import Settings, settings
from app.adapters.inbound.api.v1.router import api_router
from app.adapters.outbound.persistence import database
from app.adapters.outbound.security.revoked_token_store import RevokedTokenStore
from app.adapters.outbound.security.token_service import TokenService
from app.shared.middleware import (
    AsyncRequestLoggingMiddleware,
    ErrorHandlerMiddleware,
    http_exception_handler,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: verify the database (fails fast if unreachable), optionally
    create the schema and warn when no signing secret is set.
    Shutdown: release pooled connections.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")

    await database.check_database_connection()
    if settings.DB_CREATE_TABLES:
        await database.create_tables()

    if not app.state.token_service.is_configured:
        logger.critical("SECRET_KEY/JWT_SECRET is not set: every login will fail with a configuration error")

    yield

    await database.engine.dispose()
    logger.info("Database connections closed")


def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config)

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        description="Cadastro de clientes e pagamentos com autenticação por token JWT.",
        lifespan=lifespan,
    )

    # Serviços de token compartilhados pelo processo
    app.state.token_service = TokenService(
        secret_key=config.signing_secret,
        algorithm=config.ALGORITHM,
        expires_delta=timedelta(seconds=config.JWT_EXPIRES_IN),
    )
    app.state.revoked_tokens = RevokedTokenStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # A ordem importa: o último adicionado é o mais externo
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
