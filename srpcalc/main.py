"""SRP Calculator API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CalculatorError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured and output directory created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from srpcalc.api.error_handlers import register_error_handlers
from srpcalc.api.routes import calculations, health, results
from srpcalc.config import get_settings
from srpcalc.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    Path(settings.output_dir).mkdir(parents=True, exist_ok=True)
    logger.info(
        "SRP Calculator API started", extra={"path": settings.output_dir},
    )
    yield
    logger.info("SRP Calculator API shutting down")


app = FastAPI(
    title="SRP Calculator API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(calculations.router)
app.include_router(results.router)

register_error_handlers(app)
