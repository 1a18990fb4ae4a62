# catalogo/controllers/producto_controller.py

from typing import Optional

from sqlalchemy.orm import Session

from catalogo.controllers.base import BaseController
from catalogo.models.producto_models import Producto
from catalogo.schemas.producto_schemas import ProductoCreate, ProductoUpdate


class ProductoController(BaseController[Producto, ProductoCreate, ProductoUpdate]):
    """
    Controller for handling Producto model operations.
    """

    def replace(
        self, db: Session, *, id: int, obj_in: ProductoUpdate
    ) -> Optional[Producto]:
        """
        Copies nombre, precio and categoria_id onto an existing producto,
        plus stock when the request carries it.
        Returns None when no producto has the given id.
        """
        db_obj = self.get(db, id)
        if db_obj is None:
            return None

        update_data = {
            "nombre": obj_in.nombre,
            "precio": obj_in.precio,
            "categoria_id": obj_in.categoria_id,
        }
        if obj_in.stock is not None:
            update_data["stock"] = obj_in.stock
        return self.update(db, db_obj=db_obj, obj_in=update_data)


producto_controller = ProductoController(Producto)
