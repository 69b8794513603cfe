"""Product CLI commands."""

import typer
from rich.table import Table

from src.catalog.entities.product import Product

from .utils import console, product_service_scope

products_app = typer.Typer(help="📦 Product catalog commands")


@products_app.command(name="list")
def list_products() -> None:
    """List every product in the catalog."""
    with product_service_scope() as service:
        products = service.get_all()

    table = Table(title="Products")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Stock", justify="right", style="green")
    for product in products:
        table.add_row(str(product.id), product.name or "", str(product.stock))
    console.print(table)


@products_app.command(name="add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    stock: int = typer.Option(0, "--stock", "-s", help="Quantity on hand"),
) -> None:
    """Add a product to the catalog."""
    with product_service_scope() as service:
        created = service.add(Product(name=name, stock=stock))
    console.print(f"[green]✅ Created product {created.id}: {created.name}[/green]")


@products_app.command(name="show")
def show_product(product_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Show a single product."""
    with product_service_scope() as service:
        product = service.get_by_id(product_id)

    if product is None:
        console.print(f"[red]❌ Product {product_id} not found[/red]")
        raise typer.Exit(1)
    console.print_json(product.model_dump_json())


@products_app.command(name="delete")
def delete_product(product_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Delete a product; unknown ids are ignored."""
    with product_service_scope() as service:
        service.delete(product_id)
    console.print(f"[green]✅ Product {product_id} deleted[/green]")
