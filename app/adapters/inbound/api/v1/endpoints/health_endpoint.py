# app/adapters/inbound/api/v1/endpoints/health_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.inbound.api.deps import get_session
from app.application.dtos.health_dto import HealthOutput
from app.application.use_cases.health_use_cases import AsyncHealthService
from app.shared.utils.error_responses import common_errors
from app.shared.utils.success_responses import health_success

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=HealthOutput,
    status_code=status.HTTP_200_OK,
    summary="Server status",
    description="Reports the database name, connected role and server time.",
    responses={**health_success, **common_errors}
)
async def health(db: AsyncSession = Depends(get_session)):
    return await AsyncHealthService(db).check()
