# app/application/ports/outbound/generic_repository.py

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Optional, Any

T = TypeVar("T")


class IRepository(Generic[T], ABC):
    """Generic read/create repository interface."""

    @abstractmethod
    async def get(self, db: Any, id: Any) -> Optional[T]:
        pass

    @abstractmethod
    async def get_multi(self, db: Any, *, limit: int = 100, order_by: Any = None) -> List[T]:
        pass

    @abstractmethod
    async def create(self, db: Any, *, obj_in: Any, conflict_message: Optional[str] = None) -> T:
        pass
