"""Application service: Add To Cart use case.

Looks the product up in the catalog by id and puts one unit of it in the
cart, so the cart always holds the catalog's current name and price.
"""

from __future__ import annotations

from gamehub.application.cart_store import CartStore
from gamehub.domain.exceptions import EntityNotFoundError
from gamehub.domain.model.product import Product, ProductId
from gamehub.infrastructure.http.api_client import ResourceAPI
from gamehub.infrastructure.http.exceptions import HttpError


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, products_api: ResourceAPI) -> None:
        self._cart_store = cart_store
        self._products_api = products_api

    async def handle(self, product_id: ProductId) -> int:
        """Add one unit and return the product's new quantity in the cart."""
        try:
            raw = await self._products_api.get_by_id(product_id)
        except HttpError as exc:
            if exc.status_code == 404:
                raise EntityNotFoundError(f"Product #{product_id} not found") from exc
            raise

        product = Product.from_dict(raw)
        self._cart_store.add_item(product)

        line = next(
            entry for entry in self._cart_store.items if entry.product_id == product.id
        )
        return line.quantity.value
