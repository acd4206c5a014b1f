"""Unit tests for the Product wire mapping."""

import pytest

from gamehub.domain.exceptions import ValidationError
from gamehub.domain.model.product import Product
from gamehub.domain.model.value_objects import Money

PS5 = {
    "id": 1,
    "nombre": "PlayStation 5",
    "precio": 75000,
    "imagen": "ps5.jpg",
    "categoria": "consolas",
}


class TestProductFromDict:

    def test_maps_core_fields(self):
        product = Product.from_dict(PS5)
        assert product.id == 1
        assert product.name == "PlayStation 5"
        assert product.price == Money.of(75000)

    def test_keeps_extra_fields(self):
        product = Product.from_dict(PS5)
        assert product.attributes == {"imagen": "ps5.jpg", "categoria": "consolas"}
        assert product.category == "consolas"

    def test_round_trip_preserves_wire_shape(self):
        assert Product.from_dict(PS5).to_dict() == PS5

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            Product.from_dict({"nombre": "Sin ID", "precio": 100})

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.from_dict({"id": 9, "nombre": "Oferta", "precio": -5})

    def test_missing_name_is_not_validated(self):
        # Only id and price are guarded; the name is display-only.
        product = Product.from_dict({"id": 9, "precio": 100})
        assert product.name == ""


class TestProductEquality:

    def test_equal_by_id_name_and_price_only(self):
        a = Product.from_dict(PS5)
        b = Product.from_dict({**PS5, "imagen": "other.jpg"})
        assert a == b
