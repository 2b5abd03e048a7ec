# app/test/schemas/test_cliente_pagamento_dto.py

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.application.dtos.cliente_dto import ClienteCreate
from app.application.dtos.pagamento_dto import PagamentoCreate, PagamentoFilter


def _cliente(**overrides):
    data = {"nome": "  José   Álvares ", "whatsapp": "(11) 99999-0000", "vencimento": 15, "plano": "anual"}
    data.update(overrides)
    return ClienteCreate(**data)


def test_cliente_create_normalizes_fields():
    cliente = _cliente()
    assert cliente.nome == "José Álvares"
    assert cliente.whatsapp == "11999990000"
    assert cliente.endereco is None


@pytest.mark.parametrize("whatsapp", ["+5511999990001", "5511999990001", "+55 (11) 99999-0001"])
def test_cliente_whatsapp_single_form(whatsapp):
    assert _cliente(whatsapp=whatsapp).whatsapp == "5511999990001"


@pytest.mark.parametrize("vencimento", [0, 32, -1])
def test_cliente_vencimento_range(vencimento):
    with pytest.raises(ValidationError):
        _cliente(vencimento=vencimento)


@pytest.mark.parametrize("whatsapp", ["1234", "abc-defg-hij", "+55 11 9999 0000 0000 00", "++5511999990001"])
def test_cliente_invalid_whatsapp(whatsapp):
    with pytest.raises(ValidationError):
        _cliente(whatsapp=whatsapp)


def test_cliente_invalid_name():
    with pytest.raises(ValidationError):
        _cliente(nome="<script>")


def test_pagamento_create_status_optional():
    pagamento = PagamentoCreate(
        cliente_id=1, valor="49.90", data_vencimento="2025-05-01", referencia="05/2025"
    )
    assert pagamento.status is None
    assert pagamento.valor == Decimal("49.90")
    assert pagamento.data_vencimento == date(2025, 5, 1)
    assert "status" not in pagamento.model_dump(exclude_none=True)


@pytest.mark.parametrize("valor", ["0", "-1", "12345678901.00", "1.234"])
def test_pagamento_invalid_valor(valor):
    with pytest.raises(ValidationError):
        PagamentoCreate(cliente_id=1, valor=valor, data_vencimento="2025-05-01", referencia="x")


def test_pagamento_filter_empty_status_is_none():
    assert PagamentoFilter(status="  ").status is None


@pytest.mark.parametrize("kwargs", [{"month": 0}, {"month": 13}, {"year": 0}, {"year": 10000}])
def test_pagamento_filter_ranges(kwargs):
    with pytest.raises(ValidationError):
        PagamentoFilter(**kwargs)
