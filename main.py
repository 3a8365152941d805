"""
Customer Service - Customer Profile Microservice
FastAPI Application Entry Point
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from sqlalchemy.orm import sessionmaker

from app.core import settings, engine, session_scope, Base
from app.core.logging import setup_logging
from app.api.router import api_router
from app.api.errors import register_exception_handlers
from app.services import seed_customers
from app import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger("app.main")

def init_database(bind=None, seed: bool = True) -> None:
    """Create tables and load fixture customers"""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    if seed:
        with session_scope(sessionmaker(autocommit=False, autoflush=False, bind=bind)) as db:
            seed_customers(db)

# Lifespan for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    init_database(seed=settings.SEED_DATA)
    logger.info(f"{settings.APP_NAME} starting on port {settings.APP_PORT}")

    yield

    engine.dispose()
    logger.info(f"{settings.APP_NAME} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Microservice for managing customer information",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

register_exception_handlers(app)

# Include routers
app.include_router(api_router, prefix="/api")

# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.APP_NAME}

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
