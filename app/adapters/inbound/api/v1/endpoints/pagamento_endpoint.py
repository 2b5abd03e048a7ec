# app/adapters/inbound/api/v1/endpoints/pagamento_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.inbound.api.deps import get_current_user, get_session
from app.application.dtos.pagamento_dto import PagamentoCreate, PagamentoOutput
from app.application.use_cases.pagamento_use_cases import AsyncPagamentoService
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.error_responses import common_errors, guard_errors
from app.shared.utils.messages_utils import msg

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/pagamentos",
    tags=["Pagamentos"],
    dependencies=[Depends(get_current_user)],
    responses={**guard_errors, **common_errors},
)


@router.post(
    "",
    response_model=PagamentoOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register a payment",
    description="Status defaults to 'pendente'. The customer must exist.",
)
async def create_pagamento(pagamento_input: PagamentoCreate, db: AsyncSession = Depends(get_session)):
    try:
        return await AsyncPagamentoService(db).create_pagamento(pagamento_input)
    except DatabaseOperationException as e:
        logger.exception(f"Database error registering pagamento: {e}")
        raise DatabaseOperationException(msg("pagamento_create_error"), original_error=e.original_error)
