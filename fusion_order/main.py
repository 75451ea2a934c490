"""
FastAPI application entry point
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fusion_order.api.errors import register_exception_handlers
from fusion_order.api.middleware import jwt_gate
from fusion_order.api.router import api_router
from fusion_order.core.config import settings
from fusion_order.core.logging_config import configure_logging
from fusion_order.core.security import token_service
from fusion_order.db.database import SessionLocal, create_tables

# Import all ORM models to ensure relationships are resolved
import fusion_order.infrastructure.orm  # noqa: F401


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    configure_logging()
    if settings.AUTO_CREATE_TABLES:
        create_tables()
    logger.info("Starting %s %s (%s)", settings.PROJECT_NAME, settings.VERSION, settings.ENVIRONMENT)
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan,
)
app.state.token_service = token_service

# Gate first so CORS wraps it
app.middleware("http")(jwt_gate)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


@app.get("/health")
async def health_check():
    """Health check endpoint that verifies database connectivity"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.error("Database health check failed: %s", e)
        db_status = "unhealthy"
    finally:
        db.close()

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "version": settings.VERSION,
    }


if __name__ == "__main__":
    uvicorn.run(
        "fusion_order.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
