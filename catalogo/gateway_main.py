# catalogo/gateway_main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalogo.api.endpoints import gateway
from catalogo.core.config import settings
from catalogo.core.exceptions import register_exception_handlers
from catalogo.core.logging_config import configure_logging

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    for prefix, upstream in gateway.gateway_proxy.routes.items():
        log.info("Routing %s -> %s", prefix, upstream)
    yield
    log.info("Gateway shutting down.")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} - gateway",
    description="Single entry point for the categoria and producto services.",
    version=settings.VERSION,
    lifespan=lifespan,
)
register_exception_handlers(app)

# CORS is answered here only, so the services behind the gateway send none.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=settings.CORS_ALLOWED_METHODS,
    allow_headers=["*"],
    max_age=settings.CORS_MAX_AGE,
)

app.include_router(gateway.router)


# Root endpoint for a simple health check
@app.get("/", tags=["Health"])
async def read_root():
    return {"message": "Gateway is up and running!"}
