# app/adapters/outbound/persistence/repositories/pagamento_repository.py

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.models import Pagamento
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.pagamento_query_builder import PagamentoQueryBuilder
from app.application.dtos.pagamento_dto import PagamentoCreate, PagamentoFilter
from app.application.ports.outbound import IPagamentoRepository
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.sqlalchemy_utils import SQLAlchemyUtils


class AsyncPagamentoCRUD(AsyncCRUDBase[Pagamento, PagamentoCreate], IPagamentoRepository):
    """Repository for payments."""

    async def list_by_cliente(
            self,
            db: AsyncSession,
            cliente_id: int,
            filters: Optional[PagamentoFilter] = None,
    ) -> List[Pagamento]:
        """
        Payments of one customer, newest due date first.

        Does not check that the customer exists; an unknown id simply
        yields an empty list here.
        """
        stmt = PagamentoQueryBuilder(cliente_id).apply(filters).build()
        try:
            return await SQLAlchemyUtils.execute_scalars_all(db, stmt)
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing payments of cliente {cliente_id}: {e}")
            raise DatabaseOperationException("Error listing Pagamentos", original_error=e)


pagamento_repository = AsyncPagamentoCRUD(Pagamento)
