import os

# Must be set before catalogo.core.config is imported anywhere.
os.environ["CATEGORIA_DATABASE_URL"] = "sqlite://"
os.environ["PRODUCTO_DATABASE_URL"] = "sqlite://"

import httpx
import pytest
from fastapi.testclient import TestClient

from catalogo.api.endpoints.gateway import get_gateway_proxy
from catalogo.api.endpoints.productos import get_producto_service
from catalogo.categoria_main import app as categoria_app
from catalogo.core.database import categoria_db, producto_db
from catalogo.gateway_main import app as gateway_app
from catalogo.producto_main import app as producto_app
from catalogo.services.categoria_client import CategoriaClient
from catalogo.services.gateway_proxy import GatewayProxy
from catalogo.services.producto_service import ProductoService

CATEGORIA_URL = "http://categoria-service"
PRODUCTO_URL = "http://producto-service"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it was given."""

    def __init__(self, handler):
        self.requests = []

        def _record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture(autouse=True)
def fresh_databases():
    categoria_db.drop_tables()
    categoria_db.create_tables()
    producto_db.drop_tables()
    producto_db.create_tables()
    yield
    for app in (categoria_app, producto_app, gateway_app):
        app.dependency_overrides.clear()


@pytest.fixture
def categoria_client():
    return TestClient(categoria_app)


def wire_producto_service(transport: httpx.AsyncBaseTransport) -> ProductoService:
    service = ProductoService(CategoriaClient(base_url=CATEGORIA_URL, transport=transport))
    producto_app.dependency_overrides[get_producto_service] = lambda: service
    return service


@pytest.fixture
def producto_client():
    """Producto service talking to the real categoria app in-process."""
    wire_producto_service(httpx.ASGITransport(app=categoria_app))
    return TestClient(producto_app)


@pytest.fixture
def gateway_client(producto_client):
    proxy = GatewayProxy(
        routes={"/api/categorias": CATEGORIA_URL, "/api/productos": PRODUCTO_URL},
        transports={
            "/api/categorias": httpx.ASGITransport(app=categoria_app),
            "/api/productos": httpx.ASGITransport(app=producto_app),
        },
    )
    gateway_app.dependency_overrides[get_gateway_proxy] = lambda: proxy
    return TestClient(gateway_app)
