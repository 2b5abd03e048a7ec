# app/application/ports/outbound/user_repository_port.py

from abc import abstractmethod
from typing import Any, Optional

from app.application.ports.outbound.generic_repository import IRepository, T


class IUserRepository(IRepository[T]):
    """User repository interface."""

    @abstractmethod
    async def get_by_username(self, db: Any, username: str) -> Optional[T]:
        pass

    @abstractmethod
    async def create_with_password(self, db: Any, *, obj_in: Any) -> T:
        pass

    @abstractmethod
    async def authenticate(self, db: Any, username: str, password: str) -> Optional[T]:
        pass
