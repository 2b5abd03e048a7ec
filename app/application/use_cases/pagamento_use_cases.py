# app/application/use_cases/pagamento_use_cases.py

"""
Service for payments.

Listing is scoped to one customer and accepts optional status, year and
month filters. The customer must exist: an unknown id is a 404, never an
empty list.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Pagamento
from app.adapters.outbound.persistence.repositories.cliente_repository import cliente_repository
from app.adapters.outbound.persistence.repositories.pagamento_repository import pagamento_repository
from app.application.dtos.pagamento_dto import PagamentoCreate, PagamentoFilter
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.messages_utils import msg

logger = logging.getLogger(__name__)


class AsyncPagamentoService:

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def list_pagamentos(
            self,
            cliente_id: int,
            filters: Optional[PagamentoFilter] = None,
    ) -> List[Pagamento]:
        """
        Raises:
            ResourceNotFoundException: If the customer does not exist.
        """
        if not await cliente_repository.exists(self.db, id=cliente_id):
            raise ResourceNotFoundException(message=msg("cliente_not_found"), resource_id=cliente_id)

        pagamentos = await pagamento_repository.list_by_cliente(self.db, cliente_id, filters)
        logger.debug(f"{len(pagamentos)} pagamentos found for cliente {cliente_id}")
        return pagamentos

    async def create_pagamento(self, pagamento_input: PagamentoCreate) -> Pagamento:
        """
        Register a payment. An unknown ``cliente_id`` is rejected by the
        store's foreign key and surfaces as a database error.
        """
        pagamento = await pagamento_repository.create(self.db, obj_in=pagamento_input)
        logger.info(f"Pagamento created: id={pagamento.id} cliente={pagamento.cliente_id}")
        return pagamento
