# app/adapters/outbound/persistence/repositories/pagamento_query_builder.py

"""
Query builder for a customer's payment listing.

Filters are accumulated as SQLAlchemy expressions, so every value reaches
the driver as a bound parameter. Predicates are always appended in the
order status, year, month.
"""

from typing import Any, List, Optional

from sqlalchemy import and_, extract, select
from sqlalchemy.sql import Select

from app.adapters.outbound.persistence.models import Pagamento
from app.application.dtos.pagamento_dto import PagamentoFilter


class PagamentoQueryBuilder:
    """
    Builds ``SELECT ... FROM pagamentos WHERE cliente_id = :id [AND ...]``.

    Example:
        stmt = (
            PagamentoQueryBuilder(cliente_id)
            .apply(PagamentoFilter(status="pago", year=2025))
            .build()
        )
    """

    def __init__(self, cliente_id: int):
        self.cliente_id = cliente_id
        self._status: Optional[str] = None
        self._year: Optional[int] = None
        self._month: Optional[int] = None

    def with_status(self, status: Optional[str]) -> "PagamentoQueryBuilder":
        self._status = status or None
        return self

    def with_year(self, year: Optional[int]) -> "PagamentoQueryBuilder":
        self._year = year
        return self

    def with_month(self, month: Optional[int]) -> "PagamentoQueryBuilder":
        self._month = month
        return self

    def apply(self, filters: Optional[PagamentoFilter]) -> "PagamentoQueryBuilder":
        """Copy every present field of a PagamentoFilter into the builder."""
        if filters is None:
            return self
        return (
            self.with_status(filters.status)
            .with_year(filters.year)
            .with_month(filters.month)
        )

    @property
    def conditions(self) -> List[Any]:
        """Predicates in application order; the customer predicate is always first."""
        conditions = [Pagamento.cliente_id == self.cliente_id]
        if self._status is not None:
            conditions.append(Pagamento.status == self._status)
        if self._year is not None:
            conditions.append(extract("year", Pagamento.data_vencimento) == self._year)
        if self._month is not None:
            conditions.append(extract("month", Pagamento.data_vencimento) == self._month)
        return conditions

    def build(self) -> Select:
        return (
            select(Pagamento)
            .where(and_(*self.conditions))
            .order_by(Pagamento.data_vencimento.desc(), Pagamento.id.desc())
        )
