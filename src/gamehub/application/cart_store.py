"""Cart Store: the single owner and mutator of the shopper's cart.

The store is built once by the composition root and handed to whatever
needs the cart. It restores saved lines on construction and writes them
back through its ``CartRepository`` after every change to the lines.
Drawer visibility (``is_open``) is never written and always starts closed.

Writes are fire-and-forget from the caller's point of view: a failed save,
whether the disk refuses it or the stored file is unreadable, is logged and
the in-memory change stands.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone

from gamehub.application.dto import OrderLinePayload, OrderPayload
from gamehub.domain.model.cart import Cart, CartLine
from gamehub.domain.model.product import Product, ProductId
from gamehub.domain.model.value_objects import Money
from gamehub.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


def _iso_timestamp(moment: datetime) -> str:
    """Millisecond-precision UTC timestamp with a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class CartStore:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo
        self._cart = Cart(items=cart_repo.load())

    # --- State accessors ------------------------------------------------------

    @property
    def items(self) -> tuple[CartLine, ...]:
        """Snapshots of the lines; changing them does not change the cart."""
        return tuple(replace(line) for line in self._cart.items)

    @property
    def is_open(self) -> bool:
        return self._cart.is_open

    # --- Item mutations (persisted) -------------------------------------------

    def add_item(self, product: Product) -> None:
        self._cart.add(product)
        self._persist()

    def remove_item(self, product_id: ProductId) -> None:
        """Take one unit of *product_id* out; no-op if it isn't in the cart."""
        self._cart.remove_one(product_id)
        self._persist()

    def delete_item(self, product_id: ProductId) -> None:
        """Drop the whole line for *product_id*; no-op if it isn't in the cart."""
        self._cart.delete(product_id)
        self._persist()

    def clear_cart(self) -> None:
        self._cart.clear()
        self._persist()

    # --- Visibility (not persisted) -------------------------------------------

    def open_cart(self) -> None:
        self._cart.open()

    def close_cart(self) -> None:
        self._cart.close()

    def toggle_cart(self) -> None:
        self._cart.toggle()

    # --- Derived reads --------------------------------------------------------

    def get_total(self) -> Money:
        return self._cart.total

    def get_total_items(self) -> int:
        return self._cart.total_items

    def get_order_data(self, now: datetime | None = None) -> OrderPayload:
        """Snapshot the cart as an order payload. Does not touch the cart."""
        lines = tuple(
            OrderLinePayload(
                product_id=line.product.id,
                name=line.product.name,
                unit_price=line.product.price,
                quantity=line.quantity.value,
            )
            for line in self._cart.items
        )
        return OrderPayload(
            lines=lines,
            total=self.get_total(),
            placed_at=_iso_timestamp(now or datetime.now(timezone.utc)),
        )

    # --- Internal helpers -----------------------------------------------------

    def _persist(self) -> None:
        try:
            self._cart_repo.save(list(self._cart.items))
        except (OSError, ValueError):
            logger.warning("Could not save cart; changes kept in memory only", exc_info=True)
