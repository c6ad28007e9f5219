"""
FastAPI application for DateIO.

Provides REST API endpoints for:
- Calendar week grids, month arrays and year ranges
- Weekday headers per locale
- Format tables, rendering and strict parsing
"""

import os
import logging
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dateio import __version__
from dateio.api.routes import calendar, formats

logger = logging.getLogger("dateio")


# Create FastAPI application
app = FastAPI(
    title="DateIO API",
    description="Date abstraction layer - calendar grids, ranges and formatting for picker UIs",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS configuration for picker frontends
_default_origins = "http://localhost:3000,http://localhost:5173"
_cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _default_origins).split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        },
    )


# Health check endpoint
@app.get("/health")
async def health_check() -> Dict[str, str]:
    """API health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "dateio-api",
    }


# Include routers
app.include_router(calendar.router, prefix="/api/calendar", tags=["Calendar"])
app.include_router(formats.router, prefix="/api/formats", tags=["Formats"])


# Root endpoint
@app.get("/")
async def root() -> Dict[str, Any]:
    """API root endpoint with service information."""
    return {
        "service": "DateIO API",
        "version": __version__,
        "docs": "/api/docs",
    }
