"""Formatting and error translation shared by the CLI commands."""

from __future__ import annotations

import click

from gamehub.application.cart_store import CartStore
from gamehub.domain.model.product import ProductId
from gamehub.infrastructure.http.result import HttpFailure, NetworkFailure


def parse_id(raw: str) -> ProductId:
    """json-server ids are usually ints; keep anything else as a string."""
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw


def resolve_cart_id(store: CartStore, raw: str) -> ProductId:
    """Match *raw* against the ids already in the cart, whatever their type.

    json-server may hand out ``1`` or ``"1"``; the command line only ever
    sees the text.
    """
    wanted = raw.strip()
    for line in store.items:
        if str(line.product_id) == wanted:
            return line.product_id
    return parse_id(wanted)


def failure_message(failure: HttpFailure | NetworkFailure, action: str) -> str:
    if isinstance(failure, NetworkFailure):
        return (
            f"Could not reach the server while {action}. "
            "Is the backend running? Try again."
        )
    if failure.is_client_error:
        return f"The server rejected the request while {action} (status {failure.status_code})."
    return f"Server error while {action} (status {failure.status_code}). Try again later."


def fail(failure: HttpFailure | NetworkFailure, action: str) -> click.ClickException:
    return click.ClickException(failure_message(failure, action))
