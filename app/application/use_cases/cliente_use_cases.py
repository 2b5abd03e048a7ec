# app/application/use_cases/cliente_use_cases.py

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Cliente
from app.adapters.outbound.persistence.repositories.cliente_repository import cliente_repository
from app.application.dtos.cliente_dto import ClienteCreate
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.messages_utils import msg

logger = logging.getLogger(__name__)


class AsyncClienteService:
    """
    Application service for customers.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def list_clientes(self) -> List[Cliente]:
        return await cliente_repository.list_recent(self.db)

    async def get_cliente(self, cliente_id: int) -> Cliente:
        """
        Raises:
            ResourceNotFoundException: If no customer has this id.
        """
        cliente = await cliente_repository.get(self.db, id=cliente_id)
        if not cliente:
            logger.info(f"Cliente {cliente_id} not found")
            raise ResourceNotFoundException(message=msg("cliente_not_found"), resource_id=cliente_id)
        return cliente

    async def create_cliente(self, cliente_input: ClienteCreate) -> Cliente:
        """
        Raises:
            ResourceAlreadyExistsException: If the WhatsApp number is already registered.
        """
        cliente = await cliente_repository.create_cliente(self.db, obj_in=cliente_input)
        logger.info(f"Cliente created: id={cliente.id}")
        return cliente
