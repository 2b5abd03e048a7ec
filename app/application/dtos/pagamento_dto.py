# app/application/dtos/pagamento_dto.py

"""
Schemas for payments ("pagamentos") and the listing filters.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, constr, field_validator

from app.application.dtos.base_dto import MAX_INT_ID, CustomBaseModel

STATUS_PENDENTE = "pendente"


class PagamentoCreate(CustomBaseModel):
    """
    Schema for registering a payment.

    ``status`` is optional; the store defaults it to ``pendente``.
    """
    cliente_id: int = Field(..., ge=1, le=MAX_INT_ID, description="Customer the payment belongs to.")
    valor: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Amount.")
    data_vencimento: date = Field(..., description="Due date (YYYY-MM-DD).")
    referencia: constr(min_length=1, max_length=50) = Field(..., description="Reference label, e.g. '03/2025'.")
    status: Optional[constr(min_length=1, max_length=20)] = Field(None, description="Payment status.")

    @field_validator("referencia", "status")
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if isinstance(v, str) else v


class PagamentoOutput(CustomBaseModel):
    id: int
    cliente_id: int
    valor: Decimal
    data_vencimento: date
    referencia: str
    status: str
    created_at: Optional[datetime] = None


class PagamentoFilter(CustomBaseModel):
    """
    Optional narrowing for a customer's payment listing.

    Every field is independent; ``None`` means "do not filter".
    """
    status: Optional[str] = Field(None, max_length=20)
    year: Optional[int] = Field(None, ge=1, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)

    @field_validator("status")
    def empty_status_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None
