# catalogo/services/categoria_client.py

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from catalogo.core.config import settings
from catalogo.core.exceptions import (
    CategoriaNotFound,
    CategoriaServiceError,
    CategoriaServiceTimeout,
    CategoriaServiceUnavailable,
)
from catalogo.schemas.categoria_schemas import CategoriaSchema

log = logging.getLogger(__name__)


def _error_code(resp: httpx.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    return body.get("code") if isinstance(body, dict) else None


class CategoriaClient:
    """
    Typed caller of the categoria service, used by the producto service.
    Every failure is translated into a tagged error so the boundary can tell
    a missing categoria apart from an unreachable or broken service.
    """

    def __init__(
        self,
        base_url: str = settings.CATEGORIA_SERVICE_URL,
        timeout: float = settings.CATEGORIA_CLIENT_TIMEOUT_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def effective_timeout(self, deadline: Optional[float] = None) -> float:
        """The configured timeout, shortened to the caller's remaining budget."""
        if deadline is None or deadline <= 0:
            return self.timeout
        return min(self.timeout, deadline)

    async def _get(self, path: str, timeout: float) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=self.transport
        ) as client:
            return await client.get(path, headers={"Accept": "application/json"})

    async def get_categoria(
        self, categoria_id: int, deadline: Optional[float] = None
    ) -> CategoriaSchema:
        """
        GET /api/categorias/{id} on the categoria service.
        """
        timeout = self.effective_timeout(deadline)
        try:
            resp = await self._get(f"/api/categorias/{categoria_id}", timeout)
        except httpx.TimeoutException as e:
            log.warning("Categoria service timed out after %ss: %s", timeout, e)
            raise CategoriaServiceTimeout(
                f"El servicio de categorias no respondio en {timeout}s"
            ) from e
        except httpx.RequestError as e:
            log.warning("Categoria service unreachable: %s", e)
            raise CategoriaServiceUnavailable(
                "El servicio de categorias no esta disponible"
            ) from e

        ok = resp.status_code == 200
        level = logging.INFO if ok else logging.WARNING
        log.log(level, "Categoria service reply for id=%s: %s", categoria_id, resp.status_code)

        if resp.status_code == 404:
            if _error_code(resp) == CategoriaNotFound.code:
                raise CategoriaNotFound(categoria_id)
            # A bare 404 means the route itself is missing, not the categoria.
            raise CategoriaServiceError(
                f"El servicio de categorias no reconoce la ruta {resp.request.url.path}"
            )
        if not ok:
            raise CategoriaServiceError(
                f"El servicio de categorias respondio {resp.status_code}"
            )

        try:
            return CategoriaSchema.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise CategoriaServiceError(
                "El servicio de categorias devolvio una respuesta invalida"
            ) from e
