"""Data Transfer Objects: plain containers that cross layer boundaries.

``OrderPayload`` is what checkout posts to the orders API; the ``Cart*DTO``
classes are what the CLI displays. None of them expose domain objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gamehub.domain.model.product import ProductId
from gamehub.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderLinePayload:
    """A product snapshot plus how many units were ordered."""

    product_id: ProductId
    name: str
    unit_price: Money
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.product_id,
            "nombre": self.name,
            "precio": self.unit_price.to_number(),
            "cantidad": self.quantity,
        }


@dataclass(frozen=True)
class OrderPayload:
    """Priced snapshot of the cart, built on demand at checkout."""

    lines: tuple[OrderLinePayload, ...]
    total: Money
    placed_at: str  # ISO-8601, UTC, e.g. "2024-01-15T10:30:00.000Z"

    def to_dict(self) -> dict[str, Any]:
        return {
            "productos": [line.to_dict() for line in self.lines],
            "total": self.total.to_number(),
            "fecha": self.placed_at,
        }


@dataclass(frozen=True)
class CartLineDTO:
    product_id: ProductId
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$75,000.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_items: int
    total: str
