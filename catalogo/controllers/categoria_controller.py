# catalogo/controllers/categoria_controller.py

from typing import Optional

from sqlalchemy.orm import Session

from catalogo.controllers.base import BaseController
from catalogo.models.categoria_models import Categoria
from catalogo.schemas.categoria_schemas import CategoriaCreate, CategoriaUpdate


class CategoriaController(BaseController[Categoria, CategoriaCreate, CategoriaUpdate]):
    """
    Controller for handling Categoria model operations.
    """

    def replace(
        self, db: Session, *, id: int, obj_in: CategoriaUpdate
    ) -> Optional[Categoria]:
        """
        Overwrites the mutable fields of an existing categoria.
        Returns None when no categoria has the given id.
        """
        db_obj = self.get(db, id)
        if db_obj is None:
            return None
        return self.update(db, db_obj=db_obj, obj_in={"nombre": obj_in.nombre})


categoria_controller = CategoriaController(Categoria)
