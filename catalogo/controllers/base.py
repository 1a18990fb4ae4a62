# catalogo/controllers/base.py

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from catalogo.core.database import Base

# Define TypeVar to link the SQLAlchemy model type to the Pydantic schemas
ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseController(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    A generic base class for all database controllers.
    It provides find-all, find-by-id, save and delete-by-id over one table.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initializes the controller with a specific SQLAlchemy model.
        """
        self._model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Retrieves a single record by its primary key.
        """
        return db.get(self._model, id)

    def get_all(self, db: Session) -> List[ModelType]:
        """
        Retrieves every record, in id order.
        """
        return db.query(self._model).order_by(self._model.id).all()

    def exists(self, db: Session, id: Any) -> bool:
        return self.get(db, id) is not None

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Creates a new record in the database.
        The primary key is always assigned by the database.
        """
        obj_in_data = obj_in.model_dump(exclude={"id"})
        db_obj = self._model(**obj_in_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Updates an existing record with the given fields.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field != "id" and hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: Any) -> Optional[ModelType]:
        """
        Removes a record from the database.
        Returns None when there was nothing to remove.
        """
        obj = self.get(db, id)
        if obj is None:
            return None
        db.delete(obj)
        db.commit()
        return obj
