# catalogo/core/database.py

from typing import Generator, Iterable, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from catalogo.core.config import settings

# All models inherit from this Base class.
# Each service only creates the tables it owns, on its own engine.
Base = declarative_base()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Builds an engine for the given URL.
    SQLite needs `check_same_thread` disabled because FastAPI may use the
    session from a worker thread; in-memory SQLite also needs a single
    shared connection, otherwise every checkout sees an empty database.
    """
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


class Database:
    """
    Engine plus session factory for one service's database.
    """

    def __init__(
        self, url: str, table_names: Optional[Iterable[str]] = None, echo: bool = False
    ):
        self.url = url
        self.engine = create_db_engine(url, echo=echo)
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)
        self.table_names = list(table_names) if table_names is not None else None

    @property
    def tables(self):
        if self.table_names is None:
            return None
        return [Base.metadata.tables[name] for name in self.table_names]

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine, tables=self.tables)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine, tables=self.tables)

    def get_db(self) -> Generator:
        """
        Dependency to get a database session.
        The session is created and then closed after the request is finished.
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()


categoria_db = Database(
    settings.CATEGORIA_DATABASE_URL, table_names=["categorias"], echo=settings.DB_ECHO
)
producto_db = Database(
    settings.PRODUCTO_DATABASE_URL, table_names=["productos"], echo=settings.DB_ECHO
)


def get_categoria_db() -> Generator:
    yield from categoria_db.get_db()


def get_producto_db() -> Generator:
    yield from producto_db.get_db()
