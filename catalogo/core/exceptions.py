# catalogo/core/exceptions.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class CatalogoError(Exception):
    """
    Base class for errors that are translated into a specific HTTP status.
    `code` lets callers tell apart conditions that share a status.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(CatalogoError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class CategoriaNotFound(NotFoundError):
    code = "categoria_not_found"

    def __init__(self, categoria_id):
        super().__init__(f"Categoria no encontrada con id: {categoria_id}")
        self.categoria_id = categoria_id


class ProductoNotFound(NotFoundError):
    code = "producto_not_found"

    def __init__(self, producto_id):
        super().__init__(f"Producto no encontrado con id: {producto_id}")
        self.producto_id = producto_id


class RouteNotFound(NotFoundError):
    code = "route_not_found"


class UpstreamError(CatalogoError):
    """The downstream service answered, but not with something usable."""

    status_code = status.HTTP_502_BAD_GATEWAY
    code = "upstream_error"


class UpstreamUnavailable(CatalogoError):
    """The downstream service could not be reached."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "upstream_unavailable"


class UpstreamTimeout(UpstreamUnavailable):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    code = "upstream_timeout"


class CategoriaServiceError(UpstreamError):
    code = "categoria_service_error"


class CategoriaServiceUnavailable(UpstreamUnavailable):
    code = "categoria_service_unavailable"


class CategoriaServiceTimeout(CategoriaServiceUnavailable):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    code = "categoria_service_timeout"


async def catalogo_error_handler(request: Request, exc: CatalogoError) -> JSONResponse:
    level = logging.WARNING if exc.status_code >= 500 else logging.INFO
    log.log(
        level,
        "%s %s -> %s (%s): %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.code,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogoError, catalogo_error_handler)
