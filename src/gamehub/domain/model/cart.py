"""Cart aggregate: the shopper's line items and drawer visibility.

The Cart is an aggregate root that owns its lines. It enforces the two
cart invariants:

- at most one line per product id
- every line holds a positive quantity; a line that would drop to zero
  is removed instead
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gamehub.domain.model.product import Product, ProductId
from gamehub.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """One product in the cart and how many units of it."""

    product: Product
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    ``items`` keeps insertion order; it is the order lines appear in at
    checkout. ``is_open`` is view state only and has no bearing on items.
    """

    items: list[CartLine] = field(default_factory=list)
    is_open: bool = False

    # --- Item mutations -------------------------------------------------------

    def add(self, product: Product) -> CartLine:
        """Add one unit of *product*, creating its line if needed."""
        line = self._find_line(product.id)
        if line is None:
            line = CartLine(product=product)
            self.items.append(line)
        else:
            line.quantity = line.quantity.increment()
        return line

    def remove_one(self, product_id: ProductId) -> bool:
        """Take one unit away. Returns False if the product isn't in the cart."""
        line = self._find_line(product_id)
        if line is None:
            return False
        if line.quantity.is_one:
            self.items.remove(line)
        else:
            line.quantity = line.quantity.decrement()
        return True

    def delete(self, product_id: ProductId) -> bool:
        """Drop the whole line. Returns False if the product isn't in the cart."""
        line = self._find_line(product_id)
        if line is None:
            return False
        self.items.remove(line)
        return True

    def clear(self) -> None:
        self.items = []

    # --- Visibility -----------------------------------------------------------

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> None:
        self.is_open = not self.is_open

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.items:
            result = result + line.line_total
        return result

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: ProductId) -> CartLine | None:
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None
