"""Main CLI application module."""

import typer

from src.catalog.runtime.context import get_config

from .db_commands import db_app
from .product_commands import products_app
from .utils import console

app = typer.Typer(
    help="🛠️  Product Catalog CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(
        None, help="Host to bind the server to (defaults to app.host in config)"
    ),
    port: int | None = typer.Option(
        None, help="Port to bind the server to (defaults to app.port in config)"
    ),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """🚀 Start the API server with uvicorn."""
    import uvicorn

    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        log_config=None,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
