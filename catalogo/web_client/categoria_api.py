# catalogo/web_client/categoria_api.py

import logging
from typing import Any, Dict, List, Mapping

from catalogo.web_client.api_config import ApiClient
from catalogo.web_client.validation import validate_categoria

log = logging.getLogger(__name__)


class CategoriaApi:
    """
    Categoria operations against the gateway.
    """

    path = "/api/categorias"

    def __init__(self, api: ApiClient):
        self.api = api

    def list_categorias(self) -> List[Dict[str, Any]]:
        categorias = self.api.get(self.path)
        log.debug("Categorias obtenidas: %s", categorias)
        return categorias

    def get_categoria(self, categoria_id: int) -> Dict[str, Any]:
        return self.api.get(f"{self.path}/{categoria_id}")

    def create_categoria(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = validate_categoria(data)
        categoria = self.api.post(self.path, payload)
        log.info("Categoria creada: %s", categoria)
        return categoria

    def update_categoria(self, categoria_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = validate_categoria(data)
        categoria = self.api.put(f"{self.path}/{categoria_id}", payload)
        log.info("Categoria actualizada: %s", categoria)
        return categoria

    def delete_categoria(self, categoria_id: int) -> None:
        self.api.delete(f"{self.path}/{categoria_id}")
        log.info("Categoria con id %s eliminada", categoria_id)
