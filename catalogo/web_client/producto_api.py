# catalogo/web_client/producto_api.py

import logging
from typing import Any, Dict, List, Mapping

from catalogo.web_client.api_config import ApiClient
from catalogo.web_client.validation import validate_producto

log = logging.getLogger(__name__)


class ProductoApi:
    """
    Producto operations against the gateway.

    A producto looks like:
    {"id": 1, "nombre": "Laptop", "precio": 1200.5, "stock": 10, "categoriaId": 1}
    """

    path = "/api/productos"

    def __init__(self, api: ApiClient):
        self.api = api

    def list_productos(self) -> List[Dict[str, Any]]:
        productos = self.api.get(self.path)
        log.debug("Productos obtenidos: %s", productos)
        return productos

    def get_producto(self, producto_id: int) -> Dict[str, Any]:
        return self.api.get(f"{self.path}/{producto_id}")

    def create_producto(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = validate_producto(data)
        producto = self.api.post(self.path, payload)
        log.info("Producto creado: %s", producto)
        return producto

    def update_producto(self, producto_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = validate_producto(data)
        producto = self.api.put(f"{self.path}/{producto_id}", payload)
        log.info("Producto actualizado: %s", producto)
        return producto

    def delete_producto(self, producto_id: int) -> None:
        self.api.delete(f"{self.path}/{producto_id}")
        log.info("Producto con id %s eliminado", producto_id)

    def get_categoria_of_producto(self, producto_id: int) -> Dict[str, Any]:
        """
        The producto service resolves this by calling the categoria service.
        """
        return self.api.get(f"{self.path}/{producto_id}/categoria")
