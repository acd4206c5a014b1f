"""Unit tests for the Cart aggregate and its invariants."""

from gamehub.domain.model.cart import Cart, CartLine
from gamehub.domain.model.product import Product
from gamehub.domain.model.value_objects import Money, Quantity


def _make_product(product_id: int = 1, price: int = 75000, name: str = "PlayStation 5") -> Product:
    """Helper to build a valid product."""
    return Product(id=product_id, name=name, price=Money.of(price))


class TestCartAdd:

    def test_first_add_creates_line_with_quantity_one(self):
        cart = Cart()
        cart.add(_make_product())
        assert len(cart.items) == 1
        assert cart.items[0].quantity == Quantity(1)

    def test_repeated_add_increments_single_line(self):
        cart = Cart()
        for _ in range(5):
            cart.add(_make_product())
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 5

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        cart.add(_make_product(2, name="Xbox Series X"))
        cart.add(_make_product(1))
        cart.add(_make_product(2, name="Xbox Series X"))
        assert [line.product_id for line in cart.items] == [2, 1]


class TestCartRemoveOne:

    def test_decrements_when_more_than_one(self):
        cart = Cart()
        cart.add(_make_product())
        cart.add(_make_product())
        assert cart.remove_one(1) is True
        assert cart.items[0].quantity.value == 1

    def test_removes_line_at_one(self):
        cart = Cart()
        cart.add(_make_product())
        cart.remove_one(1)
        assert cart.is_empty

    def test_absent_id_is_noop(self):
        cart = Cart()
        cart.add(_make_product())
        assert cart.remove_one(99) is False
        assert cart.items[0].quantity.value == 1


class TestCartDelete:

    def test_removes_line_regardless_of_quantity(self):
        cart = Cart(items=[CartLine(_make_product(), Quantity(7))])
        assert cart.delete(1) is True
        assert cart.is_empty

    def test_absent_id_is_noop(self):
        cart = Cart(items=[CartLine(_make_product(), Quantity(7))])
        assert cart.delete(2) is False
        assert len(cart.items) == 1


class TestCartTotals:

    def test_empty_cart(self):
        cart = Cart()
        assert cart.total == Money.zero()
        assert cart.total_items == 0

    def test_totals_over_several_lines(self):
        cart = Cart(items=[
            CartLine(_make_product(1, 75000), Quantity(2)),
            CartLine(_make_product(2, 65000), Quantity(1)),
        ])
        assert cart.total == Money.of(215000)
        assert cart.total_items == 3

    def test_line_total(self):
        line = CartLine(_make_product(price=1500), Quantity(4))
        assert line.line_total == Money.of(6000)


class TestCartVisibility:

    def test_starts_closed(self):
        assert Cart().is_open is False

    def test_open_close_toggle(self):
        cart = Cart()
        cart.open()
        assert cart.is_open
        cart.toggle()
        assert not cart.is_open
        cart.toggle()
        assert cart.is_open
        cart.close()
        assert not cart.is_open

    def test_visibility_does_not_touch_items(self):
        cart = Cart()
        cart.add(_make_product())
        cart.toggle()
        cart.clear()
        assert cart.is_open
        assert cart.is_empty
