"""Catalogue database CLI commands."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from pymongo.errors import PyMongoError
from rich.console import Console
from rich.table import Table

from storefront.core.services import MongoConnectionService
from storefront.entities.service.product import Product, ProductRepository
from storefront.runtime.context import get_config

console = Console()

_product_list = TypeAdapter(list[Product])


@contextmanager
def product_repository() -> Iterator[ProductRepository]:
    """Repository over the configured products collection, closed on exit."""
    database = MongoConnectionService(get_config().database)
    try:
        yield ProductRepository(database.get_products_collection())
    finally:
        database.close()


def init_db() -> None:
    """Create the indexes the catalogue queries rely on."""
    try:
        with product_repository() as repository:
            names = repository.ensure_indexes()
    except PyMongoError as e:
        console.print(f"[red]❌ Failed to create indexes: {e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Product indexes")
    table.add_column("Name", style="cyan")
    for name in names:
        table.add_row(name)
    console.print(table)
    console.print(f"[green]✅ Ensured {len(names)} indexes[/green]")


def seed(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON file holding an array of products",
    ),
) -> None:
    """Replace every stored product with the contents of PATH."""
    try:
        products = _product_list.validate_python(json.loads(path.read_text()))
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(code=1) from e
    except ValidationError as e:
        console.print(f"[red]❌ Invalid product data in {path}:[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(code=1) from e

    try:
        with product_repository() as repository:
            inserted = repository.replace_all(products)
    except PyMongoError as e:
        console.print(f"[red]❌ Failed to seed products: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Seeded {inserted} products from {path}[/green]")
