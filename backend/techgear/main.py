"""TechGear WebShop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WebShopError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager is built in the lifespan hook and kept on
      app.state; nothing opens a database at import time
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techgear.api.error_handlers import register_error_handlers
from techgear.api.routes import health, products, customers, reviews, categories
from techgear.config import get_settings
from techgear.infrastructure.database import DatabaseSessionManager
from techgear.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_schema_on_startup:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info("TechGear WebShop API started")
    yield
    logger.info("TechGear WebShop API shutting down")
    await db_manager.dispose()


app = FastAPI(
    title="TechGear WebShop API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(products.router)
app.include_router(customers.router)
app.include_router(reviews.router)
app.include_router(categories.router)


@app.get("/")
async def root():
    return {"message": "Welcome to the TechGear WebShop API"}
