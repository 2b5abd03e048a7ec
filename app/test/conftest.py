# app/test/conftest.py

import os

# Configuração de teste antes de importar a aplicação
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "testing"
os.environ["DB_CREATE_TABLES"] = "false"

from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.adapters.outbound.persistence.database import get_db
from app.adapters.outbound.persistence.models import Base, Cliente, Pagamento
from app.adapters.outbound.security.revoked_token_store import RevokedTokenStore
from app.adapters.outbound.security.token_service import TokenService
from app.test.utils.data_utils import generate_user_data


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite só aplica FOREIGN KEY com o pragma ligado
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def test_engine():
    """Banco SQLite em memória, recriado a cada teste."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(test_engine):
    """
    Cliente HTTP apontando para a aplicação com o banco de teste e um
    conjunto de tokens revogados limpo.
    """
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.token_service = TokenService(secret_key="test-secret-key")
    app.state.revoked_tokens = RevokedTokenStore()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user_and_token(async_client: AsyncClient):
    """
    Cria um novo usuário através da API e retorna (user_data, token)
    """
    user_data = generate_user_data()

    response_signup = await async_client.post("/signup", json=user_data)
    assert response_signup.status_code == 201, f"Erro ao registrar usuário: {response_signup.text}"

    response_login = await async_client.post("/login", json=user_data)
    assert response_login.status_code == 200, f"Erro ao fazer login: {response_login.text}"

    return user_data, response_login.json()["token"]


@pytest.fixture
def auth_headers(test_user_and_token):
    _, token = test_user_and_token
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def create_test_cliente(db_session: AsyncSession) -> Cliente:
    cliente = Cliente(
        nome="Maria Souza",
        whatsapp="5511999990000",
        vencimento=10,
        plano="mensal",
        endereco="Rua A, 100",
    )
    db_session.add(cliente)
    await db_session.commit()
    await db_session.refresh(cliente)
    return cliente


@pytest_asyncio.fixture
async def create_test_pagamentos(db_session: AsyncSession, create_test_cliente: Cliente):
    """
    Pagamentos do cliente de teste:
    2025-01 pago, 2025-02 pago, 2025-03 pendente, 2024-03 pago.
    """
    rows = [
        (date(2025, 1, 10), "pago", "01/2025"),
        (date(2025, 2, 10), "pago", "02/2025"),
        (date(2025, 3, 10), "pendente", "03/2025"),
        (date(2024, 3, 10), "pago", "03/2024"),
    ]
    pagamentos = []
    for data_vencimento, status, referencia in rows:
        pagamento = Pagamento(
            cliente_id=create_test_cliente.id,
            valor=Decimal("99.90"),
            data_vencimento=data_vencimento,
            referencia=referencia,
            status=status,
        )
        db_session.add(pagamento)
        pagamentos.append(pagamento)
    await db_session.commit()
    return create_test_cliente, pagamentos
