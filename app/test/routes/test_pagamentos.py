# app/test/routes/test_pagamentos.py

# pytest app/test/routes/test_pagamentos.py -v

import pytest

from app.adapters.configuration.config import settings


@pytest.mark.asyncio
async def test_list_without_filters_ordered_by_due_date(async_client, auth_headers, create_test_pagamentos):
    cliente, _ = create_test_pagamentos

    response = await async_client.get(f"/clientes/{cliente.id}/pagamentos", headers=auth_headers)

    assert response.status_code == 200
    datas = [p["data_vencimento"] for p in response.json()]
    assert datas == ["2025-03-10", "2025-02-10", "2025-01-10", "2024-03-10"]


@pytest.mark.asyncio
async def test_status_filter_returns_matching_subset(async_client, auth_headers, create_test_pagamentos):
    cliente, _ = create_test_pagamentos

    response = await async_client.get(
        f"/clientes/{cliente.id}/pagamentos", params={"status": "pago"}, headers=auth_headers
    )

    rows = response.json()
    assert len(rows) == 3
    assert all(p["status"] == "pago" for p in rows)


@pytest.mark.asyncio
async def test_filters_narrow_monotonically(async_client, auth_headers, create_test_pagamentos):
    cliente, _ = create_test_pagamentos
    url = f"/clientes/{cliente.id}/pagamentos"

    status_only = (await async_client.get(url, params={"status": "pago"}, headers=auth_headers)).json()
    with_year = (await async_client.get(url, params={"status": "pago", "year": 2025}, headers=auth_headers)).json()
    all_three = (
        await async_client.get(url, params={"status": "pago", "year": 2025, "month": 2}, headers=auth_headers)
    ).json()

    status_ids = {p["id"] for p in status_only}
    year_ids = {p["id"] for p in with_year}
    all_ids = {p["id"] for p in all_three}
    assert all_ids <= year_ids <= status_ids
    assert [p["referencia"] for p in all_three] == ["02/2025"]


@pytest.mark.asyncio
async def test_month_filter_alone(async_client, auth_headers, create_test_pagamentos):
    cliente, _ = create_test_pagamentos

    response = await async_client.get(
        f"/clientes/{cliente.id}/pagamentos", params={"month": 3}, headers=auth_headers
    )
    assert [p["referencia"] for p in response.json()] == ["03/2025", "03/2024"]


@pytest.mark.asyncio
async def test_empty_status_is_ignored(async_client, auth_headers, create_test_pagamentos):
    cliente, pagamentos = create_test_pagamentos

    response = await async_client.get(
        f"/clientes/{cliente.id}/pagamentos", params={"status": ""}, headers=auth_headers
    )
    assert len(response.json()) == len(pagamentos)


@pytest.mark.asyncio
async def test_unknown_cliente_is_not_found(async_client, auth_headers):
    response = await async_client.get("/clientes/424242/pagamentos", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Cliente não encontrado"


@pytest.mark.asyncio
async def test_cliente_without_pagamentos_returns_empty_list(async_client, auth_headers, create_test_cliente):
    response = await async_client.get(f"/clientes/{create_test_cliente.id}/pagamentos", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"month": 13}, {"month": 0}, {"year": "abc"}, {"year": 0}])
async def test_invalid_filters_rejected(async_client, auth_headers, create_test_cliente, params):
    response = await async_client.get(
        f"/clientes/{create_test_cliente.id}/pagamentos", params=params, headers=auth_headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_pagamento_defaults_to_pendente(async_client, auth_headers, create_test_cliente):
    payload = {
        "cliente_id": create_test_cliente.id,
        "valor": "150.00",
        "data_vencimento": "2025-04-10",
        "referencia": "04/2025",
    }
    response = await async_client.post("/pagamentos", json=payload, headers=auth_headers)

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["status"] == "pendente"
    assert body["cliente_id"] == create_test_cliente.id
    assert body["data_vencimento"] == "2025-04-10"


@pytest.mark.asyncio
async def test_create_pagamento_unknown_cliente(async_client, auth_headers):
    payload = {
        "cliente_id": 999,
        "valor": "10.00",
        "data_vencimento": "2025-04-10",
        "referencia": "04/2025",
        "status": "pago",
    }
    response = await async_client.post("/pagamentos", json=payload, headers=auth_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Erro ao registrar pagamento"
    # fora de development o erro do banco não é exposto
    assert body["details"] is None


@pytest.mark.asyncio
async def test_create_pagamento_unknown_cliente_details_in_development(async_client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    payload = {
        "cliente_id": 999,
        "valor": "10.00",
        "data_vencimento": "2025-04-10",
        "referencia": "04/2025",
    }
    response = await async_client.post("/pagamentos", json=payload, headers=auth_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Erro ao registrar pagamento"
    assert "FOREIGN KEY constraint failed" in body["details"]


@pytest.mark.asyncio
async def test_create_pagamento_cliente_id_out_of_range(async_client, auth_headers):
    payload = {
        "cliente_id": 2**31,
        "valor": "10.00",
        "data_vencimento": "2025-04-10",
        "referencia": "04/2025",
    }
    response = await async_client.post("/pagamentos", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_pagamento_requires_token(async_client):
    response = await async_client.post("/pagamentos", json={})
    assert response.status_code == 401
