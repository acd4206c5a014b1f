"""JSON-file-backed implementation of CartRepository.

The file is a small key-value store: a JSON object whose top-level keys
are namespaces. The cart lives under ``cart-storage`` as
``{"items": [{"producto": {...}, "cantidad": n}, ...]}``. Other
namespaces in the same file are left untouched on save.
"""

from __future__ import annotations

import json
from pathlib import Path

from gamehub.domain.model.cart import CartLine
from gamehub.domain.model.product import Product
from gamehub.domain.model.value_objects import Quantity
from gamehub.domain.repository.cart_repository import CartRepository

CART_STORAGE_KEY = "cart-storage"


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, storage_key: str = CART_STORAGE_KEY) -> None:
        self._file_path = file_path
        self._storage_key = storage_key
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLine]:
        record = self._load_raw().get(self._storage_key) or {}
        return [self._to_domain(raw) for raw in record.get("items", [])]

    def save(self, items: list[CartLine]) -> None:
        records = self._load_raw()
        records[self._storage_key] = {"items": [self._to_raw(line) for line in items]}
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "producto": line.product.to_dict(),
            "cantidad": line.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        return CartLine(
            product=Product.from_dict(raw["producto"]),
            quantity=Quantity(raw["cantidad"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
