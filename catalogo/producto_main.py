# catalogo/producto_main.py
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from catalogo.api.endpoints import productos
from catalogo.core.config import settings
from catalogo.core.database import get_producto_db, producto_db
from catalogo.core.exceptions import register_exception_handlers
from catalogo.core.logging_config import configure_logging
from catalogo.models.producto_models import Producto  # noqa: F401  registers the table

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Creates the productos table on startup if it does not exist yet.
    """
    configure_logging()
    log.info("Producto service starting up...")
    try:
        producto_db.create_tables()
        log.info("Producto database ready.")
    except Exception:
        log.exception("Failed to prepare the producto database on startup")
        raise
    log.info("Categorias resolved through %s", settings.CATEGORIA_SERVICE_URL)
    yield
    log.info("Producto service shutting down.")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} - productos",
    description="CRUD over productos and lookup of a producto's categoria.",
    version=settings.VERSION,
    lifespan=lifespan,
)
register_exception_handlers(app)

api_router = APIRouter(prefix="/api")
api_router.include_router(productos.router, tags=["Productos"])
app.include_router(api_router)


# Root endpoint for a simple health check
@app.get("/", tags=["Health"])
async def read_root():
    return {"message": "Producto service is up and running!"}


@app.get("/db-test", tags=["Health"])
async def db_test(db: Session = Depends(get_producto_db)):
    """
    Tests the database connection by executing a simple query.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"message": "Database connection is live."}
    except Exception as e:
        return {"message": f"Database connection failed: {e}"}
