# catalogo/services/producto_service.py

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from catalogo.controllers.producto_controller import producto_controller
from catalogo.core.exceptions import CategoriaNotFound, ProductoNotFound
from catalogo.models.producto_models import Producto
from catalogo.schemas.categoria_schemas import CategoriaSchema
from catalogo.schemas.producto_schemas import ProductoCreate, ProductoUpdate
from catalogo.services.categoria_client import CategoriaClient

log = logging.getLogger(__name__)


class ProductoService:
    """
    Producto store operations plus the lookup of a producto's categoria
    through the categoria service.
    """

    def __init__(self, categoria_client: CategoriaClient):
        self.categoria_client = categoria_client

    def list_productos(self, db: Session) -> List[Producto]:
        return producto_controller.get_all(db)

    def get_producto(self, db: Session, producto_id: int) -> Producto:
        producto = producto_controller.get(db, producto_id)
        if producto is None:
            raise ProductoNotFound(producto_id)
        return producto

    def create_producto(self, db: Session, producto_in: ProductoCreate) -> Producto:
        # categoria_id is stored as given; it is resolved only on read.
        return producto_controller.create(db, obj_in=producto_in)

    def update_producto(
        self, db: Session, producto_id: int, producto_in: ProductoUpdate
    ) -> Producto:
        producto = producto_controller.replace(db, id=producto_id, obj_in=producto_in)
        if producto is None:
            raise ProductoNotFound(producto_id)
        return producto

    def delete_producto(self, db: Session, producto_id: int) -> None:
        """Deleting an unknown id is a no-op."""
        if producto_controller.remove(db, id=producto_id) is None:
            log.info("Delete of absent producto id=%s ignored", producto_id)

    async def get_categoria_of_producto(
        self, db: Session, producto_id: int, deadline: Optional[float] = None
    ) -> CategoriaSchema:
        """
        Resolves the producto's categoria on the categoria service.
        An absent producto fails before any outbound call is made.
        """
        producto = self.get_producto(db, producto_id)
        if producto.categoria_id is None:
            raise CategoriaNotFound(None)
        return await self.categoria_client.get_categoria(
            producto.categoria_id, deadline=deadline
        )
