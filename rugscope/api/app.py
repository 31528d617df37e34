"""FastAPI application factory for the contract checker."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.middleware.cors import CORSMiddleware

from config.settings import Settings, settings
from rugscope.api.middleware import SecurityHeadersMiddleware
from rugscope.api.version import API_VERSION
from rugscope.parsers.exceptions import InvalidAddressError, RugscopeError


def create_app(cfg: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    cfg = cfg or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        from rugscope.parsers.checker import ContractChecker

        checker = ContractChecker.from_settings(cfg)
        app.state.checker = checker
        try:
            yield
        finally:
            await checker.close()

    app = FastAPI(
        title="Rugscope API",
        version=API_VERSION,
        docs_url="/api/docs" if os.getenv("RUGSCOPE_DEBUG") else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if os.getenv("RUGSCOPE_DEBUG") else None,
        lifespan=lifespan,
    )

    _register_error_handlers(app)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS, only when a UI on another origin is configured
    if cfg.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cfg.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    from rugscope.api.routers.contracts import router as contracts_router
    from rugscope.api.routers.health import router as health_router

    app.include_router(health_router)
    app.include_router(contracts_router)

    # Browser UI (static files), mounted last so /api routes win
    static_dir = Path(cfg.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}``."""

    @app.exception_handler(InvalidAddressError)
    async def invalid_address(request: Request, exc: InvalidAddressError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(RugscopeError)
    async def upstream_failure(request: Request, exc: RugscopeError) -> JSONResponse:
        logger.error(f"[API] {request.url.path} failed: {type(exc).__name__}: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_failure(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"[API] {request.url.path} crashed: {exc}")
        message = str(exc) or "An error occurred while checking the contract"
        return JSONResponse(status_code=500, content={"error": message})
