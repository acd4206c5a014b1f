"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio

import click

from gamehub.application.list_products import ListProductsHandler
from gamehub.domain.exceptions import DomainException
from gamehub.domain.model.product import Product
from gamehub.infrastructure.bootstrap import api_client
from gamehub.infrastructure.cli.helpers import fail
from gamehub.infrastructure.http.result import Ok, capture


async def _load_products(category: str | None):
    async with api_client() as api:
        return await capture(ListProductsHandler(api.products).handle(category))


@click.command("list")
@click.option("--category", default=None, help="Only show this category (e.g. consolas).")
def product_list(category: str | None) -> None:
    """List the products in the catalog."""
    try:
        result = asyncio.run(_load_products(category))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not isinstance(result, Ok):
        raise fail(result, "loading products")

    products: list[Product] = result.body
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Category':<12} {'Price':>14}")
    click.echo("-" * 65)
    for p in products:
        click.echo(f"{str(p.id):<6} {p.name:<30} {p.category or '':<12} {str(p.price):>14}")
