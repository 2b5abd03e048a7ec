# app/application/use_cases/health_use_cases.py

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.health_repository import health_repository
from app.application.dtos.health_dto import HealthOutput


class AsyncHealthService:
    """Reports whether the server can reach its database."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def check(self) -> HealthOutput:
        status = await health_repository.get_status(self.db)
        return HealthOutput(status="online", **status)
