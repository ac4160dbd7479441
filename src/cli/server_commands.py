"""Server and database CLI commands."""

import typer
import uvicorn
from rich.panel import Panel

from src.users_api.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the Users API server.

    Host and port default to the values in config.yaml.
    """
    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Users API on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )

    uvicorn.run(
        "src.users_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=config.logging.level.lower(),
    )


def init_db() -> None:
    """🗄️  Create the database tables for the configured database."""
    from src.users_api.runtime.init_db import init_db as create_tables

    create_tables()
    console.print(f"[green]✅ Database initialized: {get_config().database.url}[/green]")
