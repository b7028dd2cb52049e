"""Base CRUD operations for tunerec models"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel as SchemaModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tunerec.models import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=SchemaModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=SchemaModel)


class BaseCRUD(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Base CRUD class for common database operations"""

    def __init__(self, model: type[ModelType]):
        """Store the SQLAlchemy model class for CRUD operations."""
        self.model = model

    def get(self, db: Session, id: Any) -> ModelType | None:
        """Get a single record by ID"""
        try:
            return db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model.__name__} with id {id}: {e}")
            raise

    def get_all(self, db: Session, skip: int = 0, limit: int | None = None) -> list[ModelType]:
        """Get all records ordered by id, optionally paginated"""
        try:
            query = db.query(self.model).order_by(self.model.id.asc()).offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model.__name__}: {e}")
            raise

    def create(self, db: Session, obj_in: CreateSchemaType | dict[str, Any]) -> ModelType:
        """Create a new record"""
        try:
            if isinstance(obj_in, dict):
                obj_data = obj_in
            else:
                obj_data = obj_in.model_dump(exclude_unset=True)

            db_obj = self.model(**obj_data)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    def add_many(self, db: Session, db_objs: Sequence[ModelType]) -> list[ModelType]:
        """Insert already-built instances in a single transaction"""
        if not db_objs:
            return []
        try:
            db.add_all(db_objs)
            db.commit()
            for db_obj in db_objs:
                db.refresh(db_obj)
            return list(db_objs)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving {len(db_objs)} {self.model.__name__} rows: {e}")
            raise

    def update(self, db: Session, db_obj: ModelType, obj_in: UpdateSchemaType | dict[str, Any]) -> ModelType:
        """Update an existing record"""
        try:
            if isinstance(obj_in, dict):
                obj_data = obj_in
            else:
                obj_data = obj_in.model_dump(exclude_unset=True)

            for key, value in obj_data.items():
                if hasattr(db_obj, key):
                    setattr(db_obj, key, value)

            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    def count(self, db: Session) -> int:
        """Count total records"""
        try:
            return db.query(self.model).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise
