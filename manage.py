import functools
import random
from decimal import Decimal

import click
import httpx
from faker import Faker

from catalogo.core.database import categoria_db, producto_db
from catalogo.models.categoria_models import Categoria
from catalogo.models.producto_models import Producto
from catalogo.web_client.api_config import ApiClient
from catalogo.web_client.categoria_api import CategoriaApi
from catalogo.web_client.producto_api import ProductoApi
from catalogo.web_client.validation import FormValidationError

fake = Faker()

LOW_STOCK_THRESHOLD = 10

APPS = {
    "categoria": ("catalogo.categoria_main:app", 8081),
    "producto": ("catalogo.producto_main:app", 8082),
    "gateway": ("catalogo.gateway_main:app", 8080),
}


@click.group()
def cli():
    """Catalogo management script."""
    pass


@cli.command()
def create_db():
    """Creates the database tables."""
    categoria_db.create_tables()
    producto_db.create_tables()
    click.echo("Database tables created.")


@cli.command()
def drop_db():
    """Drops the database tables."""
    categoria_db.drop_tables()
    producto_db.drop_tables()
    click.echo("Database tables dropped.")


@cli.command()
def populate_data():
    """Populates both databases with demo data."""
    categoria_session = categoria_db.SessionLocal()
    producto_session = producto_db.SessionLocal()
    try:
        electronica = Categoria(nombre="Electrónica")
        ropa = Categoria(nombre="Ropa")
        categoria_session.add_all([electronica, ropa])
        categoria_session.commit()

        producto_session.add_all(
            [
                Producto(
                    nombre="Laptop",
                    precio=Decimal("1200.50"),
                    stock=10,
                    categoria_id=electronica.id,
                ),
                Producto(
                    nombre="Mouse",
                    precio=Decimal("25.99"),
                    stock=50,
                    categoria_id=electronica.id,
                ),
                Producto(
                    nombre="Camiseta",
                    precio=Decimal("15.00"),
                    stock=5,
                    categoria_id=ropa.id,
                ),
            ]
        )
        producto_session.commit()

        click.echo("Demo data added successfully!")

    except Exception as e:
        categoria_session.rollback()
        producto_session.rollback()
        click.echo(f"An error occurred: {e}")
    finally:
        categoria_session.close()
        producto_session.close()


@cli.command()
@click.option("--count", default=1, help="Number of fake productos to create.")
def populate_fake_data(count):
    """Populates the databases with fake data using Faker."""
    categoria_session = categoria_db.SessionLocal()
    producto_session = producto_db.SessionLocal()
    try:
        categorias = categoria_session.query(Categoria).all()
        if not categorias:
            categorias = [Categoria(nombre=fake.word().capitalize()) for _ in range(3)]
            categoria_session.add_all(categorias)
            categoria_session.commit()

        for _ in range(count):
            producto_session.add(
                Producto(
                    nombre=fake.word().capitalize(),
                    precio=Decimal(str(round(random.uniform(1, 2000), 2))),
                    stock=random.randint(0, 100),
                    categoria_id=random.choice(categorias).id,
                )
            )
        producto_session.commit()
        click.echo(f"{count} fake records added successfully!")
    except Exception as e:
        categoria_session.rollback()
        producto_session.rollback()
        click.echo(f"An error occurred: {e}")
    finally:
        categoria_session.close()
        producto_session.close()


@cli.command()
@click.argument("service", type=click.Choice(sorted(APPS)))
@click.option("--host", default="127.0.0.1", help="Interface to bind.")
@click.option("--port", type=int, default=None, help="Port to bind.")
def runserver(service, host, port):
    """Serves one of the apps with uvicorn."""
    import uvicorn

    target, default_port = APPS[service]
    uvicorn.run(target, host=host, port=port or default_port)


# ---------------------------
# Frontend commands (through the gateway)
# ---------------------------


def _api(ctx) -> ApiClient:
    return ctx.obj["api"]


def _report_errors(func):
    """Shows validation and server errors to the user instead of a traceback."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FormValidationError as e:
            raise click.ClickException(str(e))
        except httpx.HTTPStatusError as e:
            try:
                detail = e.response.json().get("detail", e.response.text)
            except ValueError:
                detail = e.response.text
            raise click.ClickException(f"Error {e.response.status_code}: {detail}")
        except httpx.RequestError as e:
            raise click.ClickException(f"No se pudo contactar al servidor: {e}")

    return wrapper


def _echo_table(headers, rows):
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(str(cell))) for w, cell in zip(widths, row)]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    click.echo(line)
    click.echo("-" * len(line))
    for row in rows:
        click.echo("  ".join(str(cell).ljust(w) for cell, w in zip(row, widths)))


@cli.group()
@click.option("--base-url", default=None, help="Gateway base URL.")
@click.pass_context
def categorias(ctx, base_url):
    """Manage categorias through the gateway."""
    ctx.ensure_object(dict)
    if "api" not in ctx.obj:
        ctx.obj["api"] = ApiClient(base_url) if base_url else ApiClient()


@categorias.command("list")
@click.pass_context
@_report_errors
def list_categorias(ctx):
    """Lists categorias."""
    items = CategoriaApi(_api(ctx)).list_categorias()
    if not items:
        click.echo("No hay categorías registradas.")
        return
    _echo_table(["ID", "Nombre"], [(c["id"], c["nombre"]) for c in items])
    click.echo(f"Total de categorías: {len(items)}")


@categorias.command("create")
@click.option("--nombre", prompt=True)
@click.pass_context
@_report_errors
def create_categoria(ctx, nombre):
    """Creates a categoria."""
    categoria = CategoriaApi(_api(ctx)).create_categoria({"nombre": nombre})
    click.echo(f"Categoría creada con id {categoria['id']}.")


@categorias.command("update")
@click.argument("categoria_id", type=int)
@click.option("--nombre", prompt=True)
@click.pass_context
@_report_errors
def update_categoria(ctx, categoria_id, nombre):
    """Renames a categoria."""
    CategoriaApi(_api(ctx)).update_categoria(categoria_id, {"nombre": nombre})
    click.echo(f"Categoría {categoria_id} actualizada.")


@categorias.command("delete")
@click.argument("categoria_id", type=int)
@click.confirmation_option(prompt="¿Eliminar la categoría?")
@click.pass_context
@_report_errors
def delete_categoria(ctx, categoria_id):
    """Deletes a categoria."""
    CategoriaApi(_api(ctx)).delete_categoria(categoria_id)
    click.echo(f"Categoría {categoria_id} eliminada.")


@cli.group()
@click.option("--base-url", default=None, help="Gateway base URL.")
@click.pass_context
def productos(ctx, base_url):
    """Manage productos through the gateway."""
    ctx.ensure_object(dict)
    if "api" not in ctx.obj:
        ctx.obj["api"] = ApiClient(base_url) if base_url else ApiClient()


@productos.command("list")
@click.pass_context
@_report_errors
def list_productos(ctx):
    """Lists productos, flagging low stock."""
    items = ProductoApi(_api(ctx)).list_productos()
    if not items:
        click.echo("No hay productos registrados.")
        return
    rows = []
    for p in items:
        stock = p["stock"]
        flag = " (bajo)" if stock < LOW_STOCK_THRESHOLD else ""
        rows.append(
            (p["id"], p["nombre"], f"${p['precio']:,.2f}", f"{stock}{flag}", p["categoriaId"])
        )
    _echo_table(["ID", "Nombre", "Precio", "Stock", "Categoría"], rows)
    click.echo(f"Total de productos: {len(items)}")


def _producto_options(func):
    for option in reversed(
        [
            click.option("--nombre", prompt=True),
            click.option("--precio", prompt=True),
            click.option("--stock", prompt=True),
            click.option("--categoria-id", prompt=True),
        ]
    ):
        func = option(func)
    return func


@productos.command("create")
@_producto_options
@click.pass_context
@_report_errors
def create_producto(ctx, nombre, precio, stock, categoria_id):
    """Creates a producto."""
    producto = ProductoApi(_api(ctx)).create_producto(
        {"nombre": nombre, "precio": precio, "stock": stock, "categoriaId": categoria_id}
    )
    click.echo(f"Producto creado con id {producto['id']}.")


@productos.command("update")
@click.argument("producto_id", type=int)
@_producto_options
@click.pass_context
@_report_errors
def update_producto(ctx, producto_id, nombre, precio, stock, categoria_id):
    """Updates a producto."""
    ProductoApi(_api(ctx)).update_producto(
        producto_id,
        {"nombre": nombre, "precio": precio, "stock": stock, "categoriaId": categoria_id},
    )
    click.echo(f"Producto {producto_id} actualizado.")


@productos.command("delete")
@click.argument("producto_id", type=int)
@click.confirmation_option(prompt="¿Eliminar el producto?")
@click.pass_context
@_report_errors
def delete_producto(ctx, producto_id):
    """Deletes a producto."""
    ProductoApi(_api(ctx)).delete_producto(producto_id)
    click.echo(f"Producto {producto_id} eliminado.")


@productos.command("categoria")
@click.argument("producto_id", type=int)
@click.pass_context
@_report_errors
def categoria_of_producto(ctx, producto_id):
    """Shows the categoria of a producto."""
    categoria = ProductoApi(_api(ctx)).get_categoria_of_producto(producto_id)
    click.echo(f"Producto {producto_id}: categoría {categoria['id']} - {categoria['nombre']}")


if __name__ == "__main__":
    cli()
