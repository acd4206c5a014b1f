import logging

import click

from gamehub.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_delete,
    cart_remove,
    cart_show,
)
from gamehub.infrastructure.cli.checkout_commands import checkout, health
from gamehub.infrastructure.cli.product_commands import product_list


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Also log informational messages.")
def cli(verbose: bool) -> None:
    """GameHub: storefront cart and checkout"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def products() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
products.add_command(product_list)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_delete)
cart.add_command(cart_clear)
cli.add_command(checkout)
cli.add_command(health)
