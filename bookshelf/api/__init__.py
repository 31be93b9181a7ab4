"""Bookshelf REST API — FastAPI application factory."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from bookshelf.api.deps import dispose_engine, init_storage
from bookshelf.api.errors import register_error_handlers
from bookshelf.api.middleware.request_id import RequestIDMiddleware
from bookshelf.api.routers import books
from bookshelf.core.database import create_schema
from bookshelf.core.logging import setup_logging

log = structlog.get_logger("bookshelf.api")


def _create_schema_enabled() -> bool:
    return os.environ.get("BOOKSHELF_CREATE_SCHEMA", "1").strip().lower() not in ("0", "false", "no")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: pick storage, create the books table. Shutdown: dispose engine."""
    engine = init_storage()
    if engine is not None and _create_schema_enabled():
        await create_schema(engine)
    log.info("bookshelf started")
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()

    app = FastAPI(title="Bookshelf", lifespan=_lifespan)

    register_error_handlers(app)

    cors_origins = os.environ.get("BOOKSHELF_CORS_ORIGINS", "http://localhost:3000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.get("/hello", response_class=PlainTextResponse, tags=["ops"])
    async def hello() -> str:
        return "Hello, World"

    app.include_router(books.router, prefix="/books", tags=["books"])

    return app
