"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes (mounted under settings.SERVICE_ROOT)
- Middleware (logging, CORS)
- Error rendering (HTTPException detail is returned as a bare JSON string)
- The shortening service shared by all requests

Run with:
    uvicorn shortener.main:app
or through the ``url-shortener`` console script.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener import __version__
from shortener.api import endpoints
from shortener.core.logging_config import setup_logging
from shortener.core.setting import settings
from shortener.db import InMemoryUrlRepository, get_repository
from shortener.middleware.logging import add_logging_middleware
from shortener.services.url_service import URLShorteningService, UrlShortenerService


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an HTTPException as its detail string instead of {"detail": ...}."""
    return JSONResponse(
        content=exc.detail,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(service: Optional[UrlShortenerService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Shortening service to serve requests with. A service over a
            new in-memory repository is created when omitted.

    Returns:
        Configured FastAPI instance
    """
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="URL Shortener Service",
        description="Shortens http/https URLs into 22-character tokens and resolves them back",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if service is None:
        service = URLShorteningService(get_repository())
    app.state.url_shortener_service = service

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    add_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Health"])
    async def root():
        """
        Root endpoint for health checks.

        Returns:
            Simple JSON response indicating service is running
        """
        return {
            "message": "URL Shortener Service",
            "version": __version__,
            "docs": "/docs"
        }

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """
        Health check endpoint for monitoring.

        Returns:
            Health status of the service, plus the number of stored
            mappings when the in-memory repository is in use
        """
        payload = {"status": "healthy"}
        repository = getattr(request.app.state.url_shortener_service, "repository", None)
        if isinstance(repository, InMemoryUrlRepository):
            payload["stored_urls"] = len(repository)
        return payload

    app.include_router(endpoints.router, prefix=settings.SERVICE_ROOT, tags=["URL Shortener"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    uvicorn.run(
        "shortener.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
