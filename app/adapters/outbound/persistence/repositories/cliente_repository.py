# app/adapters/outbound/persistence/repositories/cliente_repository.py

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.models import Cliente
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.application.dtos.cliente_dto import ClienteCreate
from app.shared.utils.messages_utils import msg


class AsyncClienteCRUD(AsyncCRUDBase[Cliente, ClienteCreate]):
    """Repository for customers."""

    async def list_recent(self, db: AsyncSession, limit: int = None) -> List[Cliente]:
        """Most recently created customers first, capped at ``CLIENTES_LIST_LIMIT``."""
        if limit is None:
            limit = settings.CLIENTES_LIST_LIMIT
        return await self.get_multi(db, limit=limit, order_by=Cliente.id.desc())

    async def create_cliente(self, db: AsyncSession, *, obj_in: ClienteCreate) -> Cliente:
        """
        Raises:
            ResourceAlreadyExistsException: If the WhatsApp number is already registered
        """
        return await self.create(db, obj_in=obj_in, conflict_message=msg("whatsapp_already_exists"))


cliente_repository = AsyncClienteCRUD(Cliente)
