"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acemarket.config import get_settings
from acemarket.infrastructure.database import database
from acemarket.core.logging import configure_logging
from acemarket.core.middleware import setup_middleware
from acemarket.core.exceptions import setup_exception_handlers

# Import all models so SQLAlchemy knows about them
from acemarket.domain.models.user import User
from acemarket.domain.models.post import Post

# Import routers
from acemarket.interfaces.api.auth import router as auth_router
from acemarket.interfaces.api.posts import router as posts_router
from acemarket.interfaces.api.feed import router as feed_router
from acemarket.interfaces.api.users import router as users_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting ACE Marketplace API...", env=settings.ENVIRONMENT)

    database.create_all()
    logger.info("Database tables created/verified")

    yield

    database.dispose()
    logger.info("ACE Marketplace API stopped")


app = FastAPI(
    title="ACE — Deal Marketplace",
    description="API Backend — NEED/HAVE real-estate listings, profiles and feed search",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (OPTIONS, Logging, Correlation ID)
setup_middleware(app)

# Exception Handling
setup_exception_handlers(app)

# CORS is added last so it runs first and answers preflights itself
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(posts_router)
app.include_router(feed_router)
app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": "ACE Marketplace",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/api/health")
def health():
    return {"status": "ok"}
