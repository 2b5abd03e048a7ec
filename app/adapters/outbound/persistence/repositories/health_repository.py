# app/adapters/outbound/persistence/repositories/health_repository.py

import logging
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import DatabaseOperationException

logger = logging.getLogger(__name__)

POSTGRES_STATUS_QUERY = text(
    "SELECT current_database() AS database, current_user AS user, now() AS time"
)
GENERIC_STATUS_QUERY = text("SELECT CURRENT_TIMESTAMP AS time")


class HealthRepository:
    """Reads database name, connected role and server time."""

    async def get_status(self, db: AsyncSession) -> Dict[str, Any]:
        try:
            bind = db.get_bind()
            if bind.dialect.name == "postgresql":
                row = (await db.execute(POSTGRES_STATUS_QUERY)).mappings().one()
                return {"database": row["database"], "user": row["user"], "time": row["time"]}

            # Outros dialetos não expõem current_database()/current_user
            row = (await db.execute(GENERIC_STATUS_QUERY)).mappings().one()
            url = bind.url
            return {
                "database": url.database or bind.dialect.name,
                "user": url.username or "",
                "time": row["time"],
            }
        except SQLAlchemyError as e:
            logger.error(f"Health check query failed: {e}")
            raise DatabaseOperationException("Erro no banco de dados", original_error=e)


health_repository = HealthRepository()
