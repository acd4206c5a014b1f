"""Application service: List Products use case (query)."""

from __future__ import annotations

from gamehub.domain.model.product import Product
from gamehub.infrastructure.http.api_client import ResourceAPI


class ListProductsHandler:

    def __init__(self, products_api: ResourceAPI) -> None:
        self._products_api = products_api

    async def handle(self, category: str | None = None) -> list[Product]:
        """Fetch the catalog, optionally keeping one category (case-insensitive)."""
        products = [Product.from_dict(raw) for raw in await self._products_api.get_all()]
        if category is None:
            return products
        wanted = category.lower()
        return [p for p in products if (p.category or "").lower() == wanted]
