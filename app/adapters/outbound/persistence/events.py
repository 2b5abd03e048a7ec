# app/adapters/outbound/persistence/events.py

"""
Event listeners for SQLAlchemy ORM lifecycle.

Guards the ``password_hash`` column: a value that is not already a bcrypt
hash is hashed before it reaches the database.
"""

import logging
from sqlalchemy import event

from app.adapters.outbound.security.password_manager import PasswordManager

logger = logging.getLogger(__name__)


class PasswordProtection:
    """
    Proteção de senha: evita salvar senha em texto plano no banco.
    Registrada nos eventos before_insert e before_update do ORM.
    """

    @staticmethod
    def before_insert_or_update(mapper, connection, target) -> None:
        """
        Hook ORM síncrono (SQLAlchemy): executado antes de insert/update.
        """
        value = getattr(target, "password_hash", None)
        if value and not PasswordManager.is_hashed(value):
            logger.warning(
                "[PasswordProtection] Detected plain text password in model %s. "
                "Automatically hashing before saving.",
                target.__class__.__name__,
            )
            target.password_hash = PasswordManager.hash_password_sync(value)


def register_password_protection():
    """
    Registra o PasswordProtection em todos os modelos que tenham o campo `password_hash`.
    """
    from app.adapters.outbound.persistence.models.base_model import Base

    for mapper in Base.registry.mappers:
        model = mapper.class_
        if hasattr(model, "password_hash") and not event.contains(
            model, "before_insert", PasswordProtection.before_insert_or_update
        ):
            event.listen(model, "before_insert", PasswordProtection.before_insert_or_update)
            event.listen(model, "before_update", PasswordProtection.before_insert_or_update)
            logger.debug("Password protection registered for %s", model.__name__)
