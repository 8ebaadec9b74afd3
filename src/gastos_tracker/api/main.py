"""FastAPI Application - Gastos Tracker.

API REST para convertir mensajes de gastos en lenguaje natural en gastos
estructurados: monto, descripción, subcategoría y medio de pago.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gastos_tracker import __version__
from gastos_tracker.api.errors import setup_exception_handlers
from gastos_tracker.api.middleware import setup_middlewares
from gastos_tracker.api.routers import categories, expenses, payment_methods
from gastos_tracker.config.settings import settings
from gastos_tracker.core.logging import get_logger
from gastos_tracker.services.synonym_catalog import get_synonym_catalog


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifecycle manager para startup/shutdown."""
    logger.info("🚀 Iniciando Gastos Tracker API...")
    # Carga el catálogo antes del primer request
    get_synonym_catalog()
    yield
    logger.info("🛑 Gastos Tracker API detenida")


app = FastAPI(
    title="Gastos Tracker API",
    description="""
## 💸 Registro de gastos en lenguaje natural

Escribí `50 almuerzo en restaurante` o `25,50 uber a casa. Tarjeta` y la API
devuelve el monto, la descripción, la subcategoría y el medio de pago.

### Clasificación
1. **Local**: catálogo de sinónimos con matching exacto, parcial y fuzzy
2. **Base de datos**: keywords de las subcategorías guardadas
3. **Por defecto**: "Otros no clasificados"

Sin modelos de lenguaje: todo es determinístico.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)
setup_middlewares(app)

app.include_router(expenses.router, prefix="/api/v1", tags=["Gastos"])
app.include_router(categories.router, prefix="/api/v1", tags=["Categorías"])
app.include_router(payment_methods.router, prefix="/api/v1", tags=["Medios de Pago"])


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint con información del API."""
    return {
        "name": "Gastos Tracker API",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
    }
