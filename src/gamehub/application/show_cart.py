"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from gamehub.application.cart_store import CartStore
from gamehub.application.dto import CartDTO, CartLineDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=line.product_id,
                    name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in self._cart_store.items
            ],
            total_items=self._cart_store.get_total_items(),
            total=str(self._cart_store.get_total()),
        )
