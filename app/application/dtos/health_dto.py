# app/application/dtos/health_dto.py

from datetime import datetime

from app.application.dtos.base_dto import CustomBaseModel


class HealthOutput(CustomBaseModel):
    """Server and database status returned by GET /."""
    status: str
    database: str
    user: str
    time: datetime
