"""Tests for the JSON-file cart repository (uses pytest's tmp_path)."""

import json
import logging

from gamehub.application.cart_store import CartStore
from gamehub.domain.model.cart import CartLine
from gamehub.domain.model.product import Product
from gamehub.domain.model.value_objects import Quantity
from gamehub.infrastructure.persistence.json_cart_repository import (
    CART_STORAGE_KEY,
    JsonCartRepository,
)

PS5_RAW = {"id": 1, "nombre": "PlayStation 5", "precio": 75000, "imagen": "ps5.jpg"}


class TestJsonCartRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        repo = JsonCartRepository(path)
        assert path.exists()
        assert repo.load() == []

    def test_saved_layout(self, tmp_path):
        path = tmp_path / "storage.json"
        repo = JsonCartRepository(path)
        repo.save([CartLine(Product.from_dict(PS5_RAW), Quantity(2))])

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored == {
            CART_STORAGE_KEY: {"items": [{"producto": PS5_RAW, "cantidad": 2}]}
        }

    def test_round_trip(self, tmp_path):
        path = tmp_path / "storage.json"
        JsonCartRepository(path).save([CartLine(Product.from_dict(PS5_RAW), Quantity(3))])

        lines = JsonCartRepository(path).load()

        assert len(lines) == 1
        assert lines[0].product.to_dict() == PS5_RAW
        assert lines[0].quantity == Quantity(3)

    def test_leaves_other_namespaces_alone(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"theme": {"dark": True}}), encoding="utf-8")

        JsonCartRepository(path).save([])

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored["theme"] == {"dark": True}
        assert stored[CART_STORAGE_KEY] == {"items": []}


class TestCartStoreRestart:

    def test_items_survive_restart_but_drawer_state_does_not(self, tmp_path):
        path = tmp_path / "storage.json"
        store = CartStore(JsonCartRepository(path))
        store.add_item(Product.from_dict(PS5_RAW))
        store.add_item(Product.from_dict(PS5_RAW))
        store.open_cart()

        restarted = CartStore(JsonCartRepository(path))

        assert restarted.get_total_items() == 2
        assert restarted.is_open is False
        assert "isOpen" not in path.read_text(encoding="utf-8")
        assert "is_open" not in path.read_text(encoding="utf-8")

    def test_unreadable_file_at_save_time_is_logged_not_raised(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="gamehub.application.cart_store")
        path = tmp_path / "storage.json"
        store = CartStore(JsonCartRepository(path))
        path.write_text("{not json", encoding="utf-8")

        store.add_item(Product.from_dict(PS5_RAW))

        assert store.get_total_items() == 1
        assert "Could not save cart" in caplog.text
