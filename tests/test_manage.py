import httpx
import pytest
from click.testing import CliRunner

from catalogo.core.database import categoria_db, producto_db
from catalogo.models.categoria_models import Categoria
from catalogo.models.producto_models import Producto
from catalogo.web_client.api_config import ApiClient
from conftest import RecordingTransport
from manage import cli

PRODUCTOS = [
    {"id": 1, "nombre": "Laptop", "precio": 1200.5, "stock": 10, "categoriaId": 1},
    {"id": 2, "nombre": "Camiseta", "precio": 15.0, "stock": 5, "categoriaId": 2},
]


@pytest.fixture
def runner():
    return CliRunner()


def _api(handler):
    transport = RecordingTransport(handler)
    return ApiClient(base_url="http://gateway", transport=transport), transport


def test_create_db_and_populate_data(runner):
    categoria_db.drop_tables()
    producto_db.drop_tables()

    result = runner.invoke(cli, ["create-db"])
    assert result.exit_code == 0
    result = runner.invoke(cli, ["populate-data"])
    assert result.exit_code == 0
    assert "Demo data added successfully!" in result.output

    with categoria_db.SessionLocal() as db:
        assert [c.nombre for c in db.query(Categoria).order_by(Categoria.id)] == [
            "Electrónica",
            "Ropa",
        ]
    with producto_db.SessionLocal() as db:
        camiseta = db.query(Producto).filter_by(nombre="Camiseta").one()
        assert camiseta.categoria_id == 2


def test_populate_fake_data(runner):
    result = runner.invoke(cli, ["populate-fake-data", "--count", "4"])
    assert result.exit_code == 0
    with producto_db.SessionLocal() as db:
        assert db.query(Producto).count() == 4
    with categoria_db.SessionLocal() as db:
        assert db.query(Categoria).count() == 3


def test_list_productos_flags_low_stock(runner):
    api, _ = _api(lambda request: httpx.Response(200, json=PRODUCTOS))
    result = runner.invoke(cli, ["productos", "list"], obj={"api": api})

    assert result.exit_code == 0
    lines = result.output.splitlines()
    laptop = next(line for line in lines if "Laptop" in line)
    camiseta = next(line for line in lines if "Camiseta" in line)
    assert "$1,200.50" in laptop
    assert "(bajo)" not in laptop
    assert "5 (bajo)" in camiseta
    assert "Total de productos: 2" in result.output


def test_list_empty(runner):
    api, _ = _api(lambda request: httpx.Response(200, json=[]))
    result = runner.invoke(cli, ["categorias", "list"], obj={"api": api})
    assert result.exit_code == 0
    assert "No hay categorías registradas." in result.output


def test_validation_error_is_reported_without_request(runner):
    api, transport = _api(lambda request: httpx.Response(201, json={}))
    result = runner.invoke(cli, ["categorias", "create", "--nombre", "ab"], obj={"api": api})
    assert result.exit_code == 1
    assert "al menos 3 caracteres" in result.output
    assert transport.requests == []


def test_bad_categoria_id_is_reported_without_request(runner):
    api, transport = _api(lambda request: httpx.Response(201, json={}))
    result = runner.invoke(
        cli,
        [
            "productos",
            "create",
            "--nombre", "Laptop",
            "--precio", "1200",
            "--stock", "3",
            "--categoria-id", "abc",
        ],
        obj={"api": api},
    )
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Debe seleccionar una categoría" in result.output
    assert transport.requests == []


def test_server_error_is_reported(runner):
    api, _ = _api(
        lambda request: httpx.Response(
            404, json={"detail": "Producto no encontrado con id: 9", "code": "producto_not_found"}
        )
    )
    result = runner.invoke(cli, ["productos", "categoria", "9"], obj={"api": api})
    assert result.exit_code == 1
    assert "Error 404: Producto no encontrado con id: 9" in result.output


def test_network_error_is_reported(runner):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api, _ = _api(refuse)
    result = runner.invoke(cli, ["productos", "list"], obj={"api": api})
    assert result.exit_code == 1
    assert "No se pudo contactar al servidor" in result.output


def test_frontend_commands_through_the_gateway(runner, gateway_client):
    obj = {"api": ApiClient(client=gateway_client)}

    result = runner.invoke(cli, ["categorias", "create", "--nombre", "Electronics"], obj=obj)
    assert result.exit_code == 0, result.output
    assert "Categoría creada con id 1." in result.output

    result = runner.invoke(
        cli,
        [
            "productos",
            "create",
            "--nombre", "Laptop",
            "--precio", "1200.50",
            "--stock", "3",
            "--categoria-id", "1",
        ],
        obj=obj,
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["productos", "categoria", "1"], obj=obj)
    assert "Producto 1: categoría 1 - Electronics" in result.output

    result = runner.invoke(cli, ["productos", "delete", "1", "--yes"], obj=obj)
    assert result.exit_code == 0
    result = runner.invoke(cli, ["categorias", "delete", "1", "--yes"], obj=obj)
    assert result.exit_code == 0
    result = runner.invoke(cli, ["categorias", "list"], obj=obj)
    assert "No hay categorías registradas." in result.output
