# app/shared/utils/sqlalchemy_utils.py

from typing import TypeVar, List, Optional, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

T = TypeVar('T')

# SQLSTATE do PostgreSQL para violação de unicidade
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class SQLAlchemyUtils:
    """Utilitário para operações comuns com SQLAlchemy."""

    @staticmethod
    async def execute_scalars_all(session: AsyncSession, statement: Any) -> List[T]:
        """Executa uma query e retorna todos os resultados como uma lista."""
        result = await session.execute(statement)
        return list(result.scalars().all())

    @staticmethod
    async def execute_scalar_one_or_none(session: AsyncSession, statement: Any) -> Optional[T]:
        """Executa uma query e retorna um único resultado ou None."""
        result = await session.execute(statement)
        return result.scalars().one_or_none()

    @staticmethod
    def sqlstate(error: IntegrityError) -> Optional[str]:
        """
        SQLSTATE reportado pelo driver, se houver.

        O asyncpg expõe ``sqlstate`` na exceção original; o SQLAlchemy
        repassa como ``sqlstate``/``pgcode`` no wrapper do DBAPI.
        """
        orig = getattr(error, "orig", None)
        for candidate in (orig, getattr(orig, "__cause__", None)):
            if candidate is None:
                continue
            code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
            if code:
                return str(code)
        return None

    @classmethod
    def is_unique_violation(cls, error: IntegrityError) -> bool:
        """
        Indica se o IntegrityError é uma violação de unicidade.

        Usa o SQLSTATE 23505 quando o driver informa; caso contrário
        (ex.: SQLite) recorre à mensagem do erro.
        """
        code = cls.sqlstate(error)
        if code is not None:
            return code == UNIQUE_VIOLATION
        error_msg = str(getattr(error, "orig", error)).lower()
        return "unique" in error_msg or "duplicate" in error_msg
