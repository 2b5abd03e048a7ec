# app/adapters/inbound/api/v1/endpoints/cliente_endpoint.py

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.inbound.api.deps import get_current_user, get_session
from app.application.dtos.base_dto import MAX_INT_ID
from app.application.dtos.cliente_dto import ClienteCreate, ClienteListOutput, ClienteOutput
from app.application.dtos.pagamento_dto import PagamentoFilter, PagamentoOutput
from app.application.use_cases.cliente_use_cases import AsyncClienteService
from app.application.use_cases.pagamento_use_cases import AsyncPagamentoService
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.error_responses import cliente_errors
from app.shared.utils.messages_utils import msg

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clientes",
    tags=["Clientes"],
    dependencies=[Depends(get_current_user)],
    responses=cliente_errors,
)

ClienteId = Annotated[int, Path(ge=1, le=MAX_INT_ID)]


@router.get(
    "",
    response_model=ClienteListOutput,
    summary="List customers",
    description="Most recent customers first, at most CLIENTES_LIST_LIMIT rows.",
)
async def list_clientes(db: AsyncSession = Depends(get_session)):
    try:
        clientes = await AsyncClienteService(db).list_clientes()
    except DatabaseOperationException as e:
        raise DatabaseOperationException(msg("cliente_list_error"), original_error=e.original_error)
    return ClienteListOutput(
        count=len(clientes),
        data=[ClienteOutput.model_validate(c) for c in clientes],
    )


@router.get(
    "/{cliente_id}",
    response_model=ClienteOutput,
    summary="Get a customer",
)
async def get_cliente(cliente_id: ClienteId, db: AsyncSession = Depends(get_session)):
    try:
        return await AsyncClienteService(db).get_cliente(cliente_id)
    except DatabaseOperationException as e:
        raise DatabaseOperationException(msg("cliente_fetch_error"), original_error=e.original_error)


@router.post(
    "",
    response_model=ClienteOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
    description="The WhatsApp number must be unique among customers.",
)
async def create_cliente(cliente_input: ClienteCreate, db: AsyncSession = Depends(get_session)):
    try:
        return await AsyncClienteService(db).create_cliente(cliente_input)
    except DatabaseOperationException as e:
        logger.exception(f"Database error creating cliente: {e}")
        raise DatabaseOperationException(msg("cliente_create_error"), original_error=e.original_error)


@router.get(
    "/{cliente_id}/pagamentos",
    response_model=List[PagamentoOutput],
    summary="List a customer's payments",
    description=(
        "Newest due date first. Optional filters: status (exact match), "
        "year and month of the due date."
    ),
)
async def list_pagamentos(
        cliente_id: ClienteId,
        filters: Annotated[PagamentoFilter, Query()],
        db: AsyncSession = Depends(get_session),
):
    try:
        return await AsyncPagamentoService(db).list_pagamentos(cliente_id, filters)
    except DatabaseOperationException as e:
        raise DatabaseOperationException(msg("pagamento_list_error"), original_error=e.original_error)
