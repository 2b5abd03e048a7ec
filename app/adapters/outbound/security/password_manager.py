# app/adapters/outbound/security/password_manager.py

import logging
import re

import bcrypt
from fastapi.concurrency import run_in_threadpool

from app.adapters.configuration.config import settings

# Configurar logger
logger = logging.getLogger(__name__)


class PasswordManager:
    """
    Password hashing and verification (bcrypt).

    Hashes are salted per call, so hashing the same password twice gives
    two different strings that both verify.
    """

    rounds: int = settings.BCRYPT_ROUNDS

    BCRYPT_PATTERN = re.compile(r'^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$')

    # ---- SYNC ----

    @classmethod
    def hash_password_sync(cls, password: str) -> str:
        """Synchronously hash a password (for ORM hooks)."""
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=cls.rounds))
        return hashed.decode("utf-8")

    @classmethod
    def verify_password_sync(cls, plain_password: str, hashed_password: str) -> bool:
        if not plain_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # hash malformado ou senha acima do limite do bcrypt
            logger.warning("Password verification against a malformed hash")
            return False

    @classmethod
    def is_hashed(cls, value: str) -> bool:
        return bool(value) and cls.BCRYPT_PATTERN.match(value) is not None

    # ---- ASYNC ----

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Hash a password in the thread pool so the event loop keeps serving."""
        return await run_in_threadpool(cls.hash_password_sync, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        return await run_in_threadpool(cls.verify_password_sync, plain_password, hashed_password)
