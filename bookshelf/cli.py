"""CLI entry point: bookshelf.

Subcommands:
    bookshelf serve                 # Run the API under uvicorn
    bookshelf init-db               # Create the books table if missing
"""

from __future__ import annotations

import asyncio
import os

import click

from bookshelf.core.database import create_engine, create_schema, database_url
from bookshelf.core.logging import setup_logging

_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8080


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Bookshelf: REST API for a collection of books."""
    setup_logging(level="DEBUG" if verbose else None)


@main.command()
@click.option("--host", default=None, help="Bind address (default: $BOOKSHELF_HOST or 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Bind port (default: $BOOKSHELF_PORT or 8080)")
@click.option("--reload", is_flag=True, help="Reload on code changes (development only)")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    import uvicorn

    host = host or os.environ.get("BOOKSHELF_HOST", _DEFAULT_HOST)
    port = port or int(os.environ.get("BOOKSHELF_PORT", str(_DEFAULT_PORT)))
    click.echo(f"Serving bookshelf on http://{host}:{port}")
    uvicorn.run(
        "bookshelf.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@main.command("init-db")
@click.option(
    "--database-url",
    "url",
    default=None,
    help="SQLAlchemy async URL (default: $BOOKSHELF_DATABASE_URL)",
)
def init_db(url: str | None) -> None:
    """Create the books table. Existing tables are left untouched."""
    url = database_url(url)

    async def _run() -> None:
        engine = create_engine(url)
        try:
            await create_schema(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    click.echo(f"Schema ready at {url}")
