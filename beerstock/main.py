# beerstock/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from beerstock.api.error_handlers import register_exception_handlers
from beerstock.api.routers import beers
from beerstock.core.config import settings
from beerstock.core.logging import get_logger, setup_logging
from beerstock.core.metrics import export_metrics
from beerstock.db.session_async import async_engine
from beerstock.middleware import ObservabilityMiddleware

# --- Models registration (necesario para que Alembic los detecte) ---
import beerstock.models.beer  # noqa: F401

TAGS_METADATA = [
    {"name": "beers", "description": "Alta, consulta, baja y movimientos de stock de cervezas."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    get_logger("beerstock").info(
        "Starting %s", settings.PROJECT_NAME, extra={"min_stock": settings.BEER_MIN_STOCK}
    )
    yield
    await async_engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description=(
        "API de stock de cervezas.\n\n"
        "- **Beers**: alta, consulta por nombre, listado y baja.\n"
        "- **Stock**: incremento hasta la capacidad máxima y decremento "
        "respetando el stock mínimo configurado (`BEER_MIN_STOCK`)."
    ),
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# --- Middlewares ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware, log_success=settings.LOG_REQUESTS)

# --- Errores de dominio -> HTTP ---
register_exception_handlers(app)

# --- Routers ---
app.include_router(beers.router, prefix=settings.API_V1_STR)


# --- Endpoint raíz ---
@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "docs_url": "/docs", "redoc_url": "/redoc"}


@app.get("/metrics", include_in_schema=False)
def metrics():
    payload, content_type = export_metrics()
    return Response(content=payload, media_type=content_type)
