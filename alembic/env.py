# alembic/env.py

import sys
import os
from logging.config import fileConfig

from sqlalchemy import create_engine

from alembic import context

# Add the project root to the system path so `catalogo` is importable
sys.path.append(os.getcwd())

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from catalogo.core.config import settings
from catalogo.core.database import Base
from catalogo.models.categoria_models import Categoria
from catalogo.models.producto_models import Producto

# Each service owns one database and one table; pick it with
#   alembic -x service=categoria upgrade head
#   alembic -x service=producto upgrade head
SERVICES = {
    "categoria": (settings.CATEGORIA_DATABASE_URL, {Categoria.__tablename__}),
    "producto": (settings.PRODUCTO_DATABASE_URL, {Producto.__tablename__}),
}

service = context.get_x_argument(as_dictionary=True).get("service", "categoria")
if service not in SERVICES:
    raise ValueError(f"Unknown service '{service}', expected one of {sorted(SERVICES)}")

database_url, owned_tables = SERVICES[service]

# this is the metadata object for 'autogenerate' support
target_metadata = Base.metadata


def include_object(object, name, type_, reflected, compare_to):
    # Only the tables owned by the selected service
    if type_ == "table":
        return name in owned_tables
    return True


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to stdout."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        include_object=include_object,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against the selected service's database."""
    connectable = create_engine(database_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_object=include_object,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
