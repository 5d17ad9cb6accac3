"""
FastAPI application entry point.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fintrack import __version__
from fintrack.config import settings
from fintrack.api.router import api_router


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Personal finance tracker with recurring expense reconciliation",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }
