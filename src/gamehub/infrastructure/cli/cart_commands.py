"""CLI commands for the shopping cart."""

from __future__ import annotations

import asyncio

import click

from gamehub.application.add_to_cart import AddToCartHandler
from gamehub.application.cart_store import CartStore
from gamehub.application.show_cart import ShowCartHandler
from gamehub.domain.exceptions import DomainException
from gamehub.infrastructure.bootstrap import api_client, cart_store
from gamehub.infrastructure.cli.helpers import fail, parse_id, resolve_cart_id
from gamehub.infrastructure.http.result import Ok, capture


def _display_cart(store: CartStore) -> None:
    dto = ShowCartHandler(store).handle()
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*73}")
    for item in dto.items:
        click.echo(
            f"  {str(item.product_id):<6} {item.name:<30} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*73}")
    click.echo(f"  {'Items: ' + str(dto.total_items):<43} {'Total':>14} {dto.total:>14}")


@click.command("show")
def cart_show() -> None:
    """Show what is in the cart."""
    _display_cart(cart_store())


async def _add(store: CartStore, product_id):
    async with api_client() as api:
        return await capture(AddToCartHandler(store, api.products).handle(product_id))


@click.command("add")
@click.option("--id", "product_id", required=True, help="Catalog product ID.")
def cart_add(product_id: str) -> None:
    """Add one unit of a catalog product to the cart."""
    store = cart_store()
    try:
        result = asyncio.run(_add(store, parse_id(product_id)))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not isinstance(result, Ok):
        raise fail(result, f"fetching product {product_id}")

    click.echo(f"Product #{product_id} added (quantity in cart: {result.body}).")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Take one unit of a product out of the cart."""
    store = cart_store()
    store.remove_item(resolve_cart_id(store, product_id))
    _display_cart(store)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_delete(product_id: str) -> None:
    """Remove a product from the cart regardless of quantity."""
    store = cart_store()
    store.delete_item(resolve_cart_id(store, product_id))
    _display_cart(store)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    cart_store().clear_cart()
    click.echo("Cart cleared.")
