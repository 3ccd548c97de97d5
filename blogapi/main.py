"""FastAPI application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogapi import __version__
from blogapi.api.health import router as health_router
from blogapi.api.posts import router as posts_router
from blogapi.api.tags import router as tags_router
from blogapi.config import Settings
from blogapi.exceptions import InternalServerError
from blogapi.filesystem.content_manager import ContentManager
from blogapi.services.catalog_service import Catalog, build_catalog

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def load_catalog(settings: Settings) -> Catalog:
    """Build the catalog from ``settings.content_dir`` and log the outcome."""
    content_manager = ContentManager(content_dir=settings.content_dir)
    catalog = build_catalog(
        content_manager,
        default_lang=settings.default_lang,
        tz=settings.timezone,
    )
    logger.info(
        "Indexed %d posts and %d tags from %s",
        len(catalog.posts),
        len(catalog.tags),
        settings.content_dir,
    )
    if catalog.skipped:
        logger.warning("Skipped %d content files during ingestion", len(catalog.skipped))
    return catalog


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan: build the catalog before serving requests."""
    settings: Settings = app.state.settings
    _configure_logging(settings.debug)
    logger.info("Starting blog content API (debug=%s)", settings.debug)

    try:
        app.state.catalog = load_catalog(settings)
    except InternalServerError as exc:
        logger.critical(
            "Failed to load content directory at %s: %s.", settings.content_dir, exc
        )
        raise

    yield

    logger.info("Blog content API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    docs_enabled = settings.debug or settings.expose_docs

    app = FastAPI(
        title="Blog Content API",
        description="Read-only JSON-API for markdown blog posts and tags",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(posts_router)
    app.include_router(tags_router)

    # Global exception handlers

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = []
        for err in exc.errors():
            loc = err.get("loc", ())
            field = str(loc[-1]) if loc else "unknown"
            errors.append({"field": field, "message": err.get("msg", "Invalid value")})
        logger.warning(
            "RequestValidationError in %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return JSONResponse(status_code=422, content={"detail": errors})

    @app.exception_handler(InternalServerError)
    async def internal_server_error_handler(
        request: Request, exc: InternalServerError
    ) -> JSONResponse:
        logger.error(
            "InternalServerError in %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.error("ValueError in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        message = str(exc) or "Invalid value"
        return JSONResponse(
            status_code=422,
            content={"detail": message},
        )

    return app


app = create_app()


def cli_entry(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for running the server.

    ``blogapi [CONTENT_DIR]`` serves the given directory; without an argument
    the ``CONTENT_DIR`` setting is used.
    """
    import uvicorn

    parser = argparse.ArgumentParser(prog="blogapi", description="Serve a markdown blog as JSON-API")
    parser.add_argument("content_dir", nargs="?", type=Path, help="directory of post files")
    args = parser.parse_args(argv)

    settings: Settings = app.state.settings
    if args.content_dir is not None:
        # The reloader re-imports the app in a child process, which reads the env.
        os.environ["CONTENT_DIR"] = str(args.content_dir)
        settings = settings.model_copy(update={"content_dir": args.content_dir})
        app.state.settings = settings

    uvicorn.run(
        "blogapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
