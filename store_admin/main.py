import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from store_admin.config import get_settings
from store_admin.database import engine, Base
from store_admin.error_handlers import register_error_handlers
from store_admin.observability import setup_logging
from store_admin.routes import store, billboard, category, subcategory, size, color, product

# Import all models to ensure they are registered with SQLAlchemy
from store_admin.db.models import Store, Billboard, Category, Subcategory, Size, Color, Product, Image  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    # Only create tables automatically in dev, not production
    if settings.env != "production":
        logger.info("Development mode: creating tables if they don't exist")
        Base.metadata.create_all(bind=engine)
    logger.info("Store admin API started")
    yield
    logger.info("Store admin API shutting down")


app = FastAPI(
    title="Store Admin API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(store.router)
app.include_router(billboard.router)
app.include_router(category.router)
app.include_router(subcategory.router)
app.include_router(size.router)
app.include_router(color.router)
app.include_router(product.router)


@app.get("/health")
def health():
    """Health check endpoint for Docker health checks"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.warning(f"Health check failed: {e}")
        return {"status": "unhealthy", "database": "disconnected"}
