# app/test/integration/test_unique_constraints.py

# Para Rodar o Script:
# pytest app/test/integration/test_unique_constraints.py -v

# Testes de Restrições Únicas: garantem que duplicidades viram conflito e nunca uma segunda linha.

import pytest
from unittest.mock import MagicMock
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import User
from app.application.use_cases.auth_use_cases import AsyncAuthService
from app.application.dtos.user_dto import UserCreate
from app.domain.exceptions import ResourceAlreadyExistsException


@pytest.mark.asyncio
async def test_unique_username_on_create(db_session: AsyncSession):
    """
    Testa se a validação de username único funciona corretamente na criação.
    """
    auth_service = AsyncAuthService(db_session, token_service=MagicMock())

    user1 = await auth_service.register_user(UserCreate(username="carla", password="secret1"))
    assert user1.username == "carla"

    with pytest.raises(ResourceAlreadyExistsException) as exc_info:
        await auth_service.register_user(UserCreate(username="carla", password="outra-senha"))
    assert exc_info.value.internal_code == "CONFLICT"

    count = await db_session.scalar(select(func.count()).select_from(User).where(User.username == "carla"))
    assert count == 1


@pytest.mark.asyncio
async def test_session_usable_after_conflict(db_session: AsyncSession):
    auth_service = AsyncAuthService(db_session, token_service=MagicMock())
    await auth_service.register_user(UserCreate(username="davi", password="secret1"))

    with pytest.raises(ResourceAlreadyExistsException):
        await auth_service.register_user(UserCreate(username="davi", password="secret1"))

    other = await auth_service.register_user(UserCreate(username="eva", password="secret1"))
    assert other.id is not None
