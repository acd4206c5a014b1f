"""Abstract repository for the Cart aggregate's line items.

Only the lines are stored. Drawer visibility is session state and is
never handed to a repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gamehub.domain.model.cart import CartLine


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the previously saved lines, or an empty list."""

    @abstractmethod
    def save(self, items: list[CartLine]) -> None:
        """Replace the saved lines with *items*."""
