"""CLI commands for checkout and backend status."""

from __future__ import annotations

import asyncio

import click

from gamehub.application.cart_store import CartStore
from gamehub.application.checkout import CheckoutHandler
from gamehub.domain.exceptions import DomainException
from gamehub.infrastructure.bootstrap import api_base_url, api_client, cart_store
from gamehub.infrastructure.cli.helpers import fail
from gamehub.infrastructure.http.result import ApiResult, Ok


async def _checkout(store: CartStore) -> ApiResult:
    async with api_client() as api:
        return await CheckoutHandler(store, api.orders).handle()


@click.command("checkout")
def checkout() -> None:
    """Place an order for everything in the cart."""
    store = cart_store()
    total = store.get_total()

    try:
        result = asyncio.run(_checkout(store))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not isinstance(result, Ok):
        raise fail(result, "placing the order")

    click.echo(f"Order #{result.body.get('id')} placed, total {total}. Thank you!")


async def _health() -> bool:
    async with api_client() as api:
        return await api.check_server_health()


@click.command("health")
def health() -> None:
    """Check whether the backend is reachable."""
    if asyncio.run(_health()):
        click.echo(f"Server at {api_base_url()} is up.")
    else:
        raise click.ClickException(f"Server at {api_base_url()} is not responding.")
