# src/microblog/main.py
"""Main entry point for the Microblog application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from microblog.api.v1 import (
    auth_router,
    posts_router,
    site_settings_router,
    system_router,
)
from microblog.core.errors import StoreError
from microblog.core.settings import settings
from microblog.db.session import SessionLocal, create_tables
from microblog.services.seed import seed_defaults

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Single-admin microblog API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(posts_router, prefix=settings.api_prefix)
app.include_router(site_settings_router, prefix=settings.api_prefix)
app.include_router(system_router, prefix=settings.api_prefix)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Return a generic 500; the underlying error was logged where it was raised."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


def init_db() -> None:
    """Create tables and seed the admin account and default settings."""
    create_tables()
    db = SessionLocal()
    try:
        seed_defaults(db, settings.admin_username, settings.admin_password)
    finally:
        db.close()


@app.on_event("startup")
async def on_startup() -> None:
    if settings.init_db_on_startup:
        init_db()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "api": settings.api_prefix,
        "docs": "/docs",
        "redoc": "/redoc",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("microblog.main:app", host="0.0.0.0", port=8000, reload=settings.debug)


if __name__ == "__main__":
    run()
