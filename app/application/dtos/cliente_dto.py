# app/application/dtos/cliente_dto.py

"""
Schemas for customers ("clientes").
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, constr, field_validator

from app.application.dtos.base_dto import CustomBaseModel
from app.shared.utils.input_validation import InputValidator
from app.shared.utils.messages_utils import get_message


class ClienteCreate(CustomBaseModel):
    """
    Schema for creating a customer.

    ``vencimento`` is the day of the month on which the customer's
    recurring payment is due.
    """
    nome: constr(min_length=1, max_length=255) = Field(..., description="Customer name.")
    whatsapp: constr(min_length=8, max_length=30) = Field(..., description="WhatsApp number, unique per customer.")
    vencimento: int = Field(..., ge=1, le=31, description="Due day of the month (1-31).")
    plano: constr(min_length=1, max_length=100) = Field(..., description="Subscribed plan.")
    endereco: Optional[constr(max_length=500)] = Field(None, description="Postal address.")

    @field_validator("nome")
    def validate_nome(cls, v: str) -> str:
        v = InputValidator.sanitize_name(v)
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("whatsapp")
    def validate_whatsapp(cls, v: str) -> str:
        v = InputValidator.normalize_whatsapp(v)
        is_valid, error_msg = InputValidator.validate_whatsapp(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("plano")
    def validate_plano(cls, v: str) -> str:
        v = InputValidator.sanitize_string(v)
        if not v:
            raise ValueError(get_message("field_required", field="plano"))
        return v

    @field_validator("endereco")
    def strip_endereco(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return InputValidator.sanitize_string(v) or None


class ClienteOutput(CustomBaseModel):
    id: int
    nome: str
    whatsapp: str
    vencimento: int
    plano: str
    endereco: Optional[str] = None
    created_at: Optional[datetime] = None


class ClienteListOutput(CustomBaseModel):
    """Envelope returned by GET /clientes."""
    success: bool = True
    count: int
    data: List[ClienteOutput]
