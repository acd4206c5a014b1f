"""Application service: Checkout use case.

Sends the cart's order payload to the orders API and empties the cart
only once the server has accepted the order. Any failure leaves the cart
exactly as it was, so the shopper can retry.
"""

from __future__ import annotations

import logging

from gamehub.application.cart_store import CartStore
from gamehub.domain.exceptions import ValidationError
from gamehub.infrastructure.http.api_client import ResourceAPI
from gamehub.infrastructure.http.result import ApiResult, Ok, capture

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart_store: CartStore, orders_api: ResourceAPI) -> None:
        self._cart_store = cart_store
        self._orders_api = orders_api

    async def handle(self) -> ApiResult:
        """Place an order for the current cart contents.

        Raises ValidationError for an empty cart (nothing is sent).
        Otherwise returns the tagged outcome of the order request; on
        ``Ok`` the body is the created order, server-assigned id included.
        """
        if self._cart_store.get_total_items() == 0:
            raise ValidationError("Cart is empty")

        payload = self._cart_store.get_order_data()
        result = await capture(self._orders_api.create(payload.to_dict()))

        if isinstance(result, Ok):
            self._cart_store.clear_cart()
            self._cart_store.close_cart()
            logger.info("Order %s placed, total %s", result.body.get("id"), payload.total)
        return result
