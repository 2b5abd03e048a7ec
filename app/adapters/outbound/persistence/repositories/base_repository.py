# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

"""
Async Base Repository

Generic read/create operations shared by the concrete repositories.

Handles:
- Get single or multiple records
- Create records
- Existence checks

Implements uniform logging and error handling for database operations.
Updates and deletes are not exposed: users, customers and payments are
append-only through the API.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
from pydantic import BaseModel
import logging

from app.adapters.outbound.persistence.models.base_model import Base
from app.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)
from app.shared.utils.sqlalchemy_utils import SQLAlchemyUtils

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic type for Pydantic DTOs
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType, CreateSchemaType]):
    """
    Generic asynchronous CRUD base class.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Retrieve an object by ID."""
        try:
            query = select(self.model).where(self.model.id == id)
            return await SQLAlchemyUtils.execute_scalar_one_or_none(db, query)
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error fetching {self.model.__name__}", original_error=e
            )

    async def get_by_field(self, db: AsyncSession, field_name: str, value: Any) -> Optional[ModelType]:
        """Retrieve an object by a specific field."""
        try:
            query = select(self.model).where(getattr(self.model, field_name) == value)
            return await SQLAlchemyUtils.execute_scalar_one_or_none(db, query)
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} by {field_name}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error fetching {self.model.__name__} by {field_name}", original_error=e
            )

    async def exists(self, db: AsyncSession, **filters) -> bool:
        """Check if a record exists matching the given filters."""
        try:
            query = select(self.model.id)
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

            result = await db.execute(query.limit(1))
            return result.first() is not None
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error checking existence of {self.model.__name__}", original_error=e
            )

    async def get_multi(self, db: AsyncSession, *, limit: int = 100, order_by: Any = None) -> List[ModelType]:
        """Retrieve up to ``limit`` records, optionally ordered."""
        try:
            query = select(self.model)
            if order_by is not None:
                query = query.order_by(order_by)
            return await SQLAlchemyUtils.execute_scalars_all(db, query.limit(limit))
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error listing {self.model.__name__}s", original_error=e
            )

    async def create(
            self,
            db: AsyncSession,
            *,
            obj_in: Union[CreateSchemaType, Dict[str, Any]],
            conflict_message: Optional[str] = None,
    ) -> ModelType:
        """
        Create a new record.

        Fields left as ``None`` are not sent, so server defaults apply.

        Raises:
            ResourceAlreadyExistsException: If a unique column would be duplicated
            DatabaseOperationException: For any other database error
        """
        try:
            obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_none=True)
            obj_in_data = {k: v for k, v in obj_in_data.items() if v is not None}

            db_obj = self.model(**obj_in_data)

            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            if SQLAlchemyUtils.is_unique_violation(e):
                self.logger.warning(f"Attempt to create duplicate {self.model.__name__}")
                raise ResourceAlreadyExistsException(
                    message=conflict_message or f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error creating {self.model.__name__}", original_error=e
            )

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error creating {self.model.__name__}", original_error=e
            )
