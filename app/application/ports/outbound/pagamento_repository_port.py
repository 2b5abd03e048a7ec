# app/application/ports/outbound/pagamento_repository_port.py

from abc import abstractmethod
from typing import Any, List, Optional

from app.application.ports.outbound.generic_repository import IRepository, T


class IPagamentoRepository(IRepository[T]):
    """Payment repository interface."""

    @abstractmethod
    async def list_by_cliente(self, db: Any, cliente_id: int, filters: Optional[Any] = None) -> List[T]:
        pass
