# app/adapters/outbound/persistence/repositories/user_repository.py

"""
Async repository for User entity (user_repository.py).

Handles signup and credential checks. Implements IUserRepository
following Clean Architecture principles.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.models import User
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.security.password_manager import PasswordManager
from app.application.dtos.user_dto import UserCreate
from app.application.ports.outbound import IUserRepository
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.messages_utils import msg


class AsyncUserCRUD(AsyncCRUDBase[User, UserCreate], IUserRepository):
    """
    Concrete repository for User entity, fully async.

    Extends AsyncCRUDBase and implements IUserRepository.
    """

    async def get_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error while fetching user by username: {e}")
            raise DatabaseOperationException("Error fetching user by username.", original_error=e)

    async def create_with_password(self, db: AsyncSession, *, obj_in: UserCreate) -> User:
        """
        Create a user storing only the bcrypt hash of the password.

        Uniqueness of the username is enforced by the store: a concurrent
        signup with the same name loses with a conflict, never a second row.

        Raises:
            ResourceAlreadyExistsException: If the username is taken
            DatabaseOperationException: For other database errors
        """
        password_hash = await PasswordManager.hash_password(obj_in.password)
        user_data = {
            "username": obj_in.username,
            "password_hash": password_hash,
            "email": obj_in.email,
        }
        return await self.create(db, obj_in=user_data, conflict_message=msg("user_already_exists"))

    async def authenticate(self, db: AsyncSession, username: str, password: str) -> Optional[User]:
        """Return the user when the password matches, otherwise None."""
        db_user = await self.get_by_username(db, username)

        if not db_user:
            return None

        if not await PasswordManager.verify_password(password, db_user.password_hash):
            return None

        return db_user


user_repository = AsyncUserCRUD(User)
