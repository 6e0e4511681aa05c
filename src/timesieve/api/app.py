"""
FastAPI application factory.

`create_app` builds a fresh application per call so tests can spin up
isolated instances. It wires:

1. **Middleware**: permissive CORS for local tooling.
2. **Exception handling**: ``ValueError`` (e.g. unknown sieve names) becomes
   HTTP 400; anything else becomes a structured HTTP 500.
3. **Routing**: the annotation router plus ``GET /health``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from timesieve import __version__
from timesieve.api.routers import annotate
from timesieve.core.settings import get_logger, load_settings

log = get_logger("timesieve.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    log.info("TimeSieve API starting (env=%s)", load_settings().environment)
    yield
    log.info("TimeSieve API shutting down")


def create_app() -> FastAPI:
    """Construct and configure the TimeSieve FastAPI application."""
    app = FastAPI(
        title="TimeSieve API",
        description="Rule-based temporal link sieves",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={"error": "Bad Request", "detail": str(exc)},
        )

    app.include_router(annotate.router)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Liveness check."""
        return {
            "status": "ok",
            "environment": load_settings().environment,
            "version": __version__,
        }

    return app


__all__ = ["create_app"]
