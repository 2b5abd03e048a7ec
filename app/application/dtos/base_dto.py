# app/application/dtos/base_dto.py

"""
Base class shared by every DTO.
"""

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """
    Base model for request and response schemas.

    Allows building output schemas straight from ORM objects.
    """
    model_config = ConfigDict(from_attributes=True)


# Maior valor aceito pelas colunas Integer (int4) de id
MAX_INT_ID = 2**31 - 1
