"""Database CLI commands."""

import typer

from src.catalog.core.services import DbSessionService
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command(name="init")
def init() -> None:
    """Create all database tables."""
    config = get_config()
    init_db()
    console.print(
        f"[green]✅ Tables created on {config.database.backend} database[/green]"
    )


@db_app.command(name="check")
def check() -> None:
    """Check that the database answers."""
    database_service = DbSessionService(get_config())
    try:
        healthy = database_service.health_check()
    finally:
        database_service.dispose()

    if not healthy:
        console.print("[red]❌ Database is unreachable[/red]")
        raise typer.Exit(1)
    console.print("[green]✅ Database is reachable[/green]")
