# catalogo/categoria_main.py
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from catalogo.api.endpoints import categorias
from catalogo.core.config import settings
from catalogo.core.database import categoria_db, get_categoria_db
from catalogo.core.exceptions import register_exception_handlers
from catalogo.core.logging_config import configure_logging
from catalogo.models.categoria_models import Categoria  # noqa: F401  registers the table

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Creates the categorias table on startup if it does not exist yet.
    """
    configure_logging()
    log.info("Categoria service starting up...")
    try:
        categoria_db.create_tables()
        log.info("Categoria database ready.")
    except Exception:
        log.exception("Failed to prepare the categoria database on startup")
        raise
    yield
    log.info("Categoria service shutting down.")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} - categorias",
    description="CRUD over categorias.",
    version=settings.VERSION,
    lifespan=lifespan,
)
register_exception_handlers(app)

api_router = APIRouter(prefix="/api")
api_router.include_router(categorias.router, tags=["Categorias"])
app.include_router(api_router)


# Root endpoint for a simple health check
@app.get("/", tags=["Health"])
async def read_root():
    return {"message": "Categoria service is up and running!"}


@app.get("/db-test", tags=["Health"])
async def db_test(db: Session = Depends(get_categoria_db)):
    """
    Tests the database connection by executing a simple query.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"message": "Database connection is live."}
    except Exception as e:
        return {"message": f"Database connection failed: {e}"}
