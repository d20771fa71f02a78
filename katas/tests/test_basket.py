import pytest

from katas.entities.basket import Item, ShoppingBasket


def build_basket_with_items(*items):
    return ShoppingBasket(items)


@pytest.mark.parametrize("items, total", [
    ([], 0.0),
    ([Item(100.0, 1)], 100.0),
    ([Item(100.0, 1), Item(200.0, 1)], 300.0),
    ([Item(100.0, 2)], 200.0),
])
def test_basket_total(items, total):
    assert build_basket_with_items(*items).get_total() == total


def test_item_subtotal():
    assert Item(2.5, 4).get_subtotal() == 10.0


def test_default_basket_is_empty():
    assert ShoppingBasket().get_total() == 0.0
