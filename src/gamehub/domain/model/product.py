"""Product as published by the catalog API.

The catalog owns the product shape; the storefront only relies on ``id``,
``nombre`` and ``precio``. Any other field the API sends (image, category,
description...) is carried along untouched in ``attributes`` so that a
product survives a persist/restore round trip unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gamehub.domain.exceptions import ValidationError
from gamehub.domain.model.value_objects import Money

ProductId = int | str

_ID_KEY = "id"
_NAME_KEY = "nombre"
_PRICE_KEY = "precio"
_CATEGORY_KEY = "categoria"


@dataclass(frozen=True)
class Product:
    """A catalog product. Never mutated by the cart."""

    id: ProductId
    name: str
    price: Money
    attributes: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def category(self) -> str | None:
        return self.attributes.get(_CATEGORY_KEY)

    # --- Wire mapping ---------------------------------------------------------

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Product:
        """Build a Product from its JSON representation.

        Only the presence of ``id`` and a non-negative ``precio`` is
        checked; names and extra fields are accepted as given.
        """
        if raw.get(_ID_KEY) is None:
            raise ValidationError("Product id is required")
        extra = {
            k: v
            for k, v in raw.items()
            if k not in (_ID_KEY, _NAME_KEY, _PRICE_KEY)
        }
        return Product(
            id=raw[_ID_KEY],
            name=raw.get(_NAME_KEY, ""),
            price=Money.of(raw.get(_PRICE_KEY)),
            attributes=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            _ID_KEY: self.id,
            _NAME_KEY: self.name,
            _PRICE_KEY: self.price.to_number(),
            **self.attributes,
        }
