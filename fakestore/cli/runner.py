# fakestore/cli/runner.py

"""Headless CLI commands built on the request executor."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from fakestore.models.product import Product
from fakestore.network.endpoints import ProductEndpoints
from fakestore.network.errors import NetworkError
from fakestore.network.resource import Get, QueryItem, Resource
from fakestore.network.web_service import WebService

logger = logging.getLogger("fakestore.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def parse_query_item(raw: str) -> QueryItem:
    """Parse a ``key=value`` command-line item into a query pair.

    Raises ``ValueError`` when there is no ``=`` or the key is empty.
    """
    name, sep, value = raw.partition("=")
    if not sep or not name:
        msg = f"expected key=value, got {raw!r}"
        raise ValueError(msg)
    return name, value


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Category", style="magenta")
    table.add_column("Image", overflow="fold", style="dim")

    for p in products:
        table.add_row(
            "-" if p.id is None else str(p.id),
            p.title[:60],
            f"{p.price:,.2f}",
            p.category,
            p.image,
        )

    Console().print(table)


def _emit(products: list[Product], output_format: str) -> None:
    if output_format == "table":
        _print_table(products)
        return
    json.dump(
        [p.to_dict() for p in products],
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")


async def cli_list(
    query_items: list[QueryItem],
    output_format: str,
    service: WebService | None = None,
) -> int:
    """List products and return an exit code (0=ok, 1=fail)."""
    url = ProductEndpoints.all_products()
    if url is None:
        _err.print("[red]Invalid Url[/red]")
        return 1

    resource = Resource(url, Get(tuple(query_items)))
    try:
        products = await (service or WebService()).load(
            resource, Product.list_from_json
        )
    except NetworkError as exc:
        logger.error("Listing products failed: %s", exc.description)
        _err.print(f"[red]Error: {exc.description}[/red]")
        return 1

    if products:
        _err.print(f"[green]✓ {len(products)} products[/green]")
    else:
        _err.print("[yellow]No products found.[/yellow]")
    _emit(products, output_format)
    return 0


async def cli_get(
    product_id: int,
    output_format: str,
    service: WebService | None = None,
) -> int:
    """Fetch one product and return an exit code (0=ok, 1=fail)."""
    url = ProductEndpoints.for_product_id(product_id)
    if url is None:
        _err.print("[red]Invalid Url[/red]")
        return 1

    try:
        product = await (service or WebService()).load(
            Resource(url), Product.from_dict
        )
    except NetworkError as exc:
        logger.error(
            "Fetching product %d failed: %s", product_id, exc.description
        )
        _err.print(f"[red]Error: {exc.description}[/red]")
        return 1

    _emit([product], output_format)
    return 0
