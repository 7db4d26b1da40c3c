import pytest

from bistro.menu_item import MenuItem
from bistro.ordered import OrderedBag


def test_insert_sorted_keeps_order():
    bag = OrderedBag()
    for value in [5, 1, 4, 1, 3, 9]:
        bag.insert_sorted(value)
    assert list(bag) == sorted([5, 1, 4, 1, 3, 9])
    assert len(bag) == 6


def test_insert_sorted_places_before_equal_elements():
    bag = OrderedBag()
    first = MenuItem(101, "A", 3.0, "v", "a", [])
    second = MenuItem(102, "B", 3.0, "v", "a", [])
    bag.insert_sorted(first)
    bag.insert_sorted(second)
    assert [item.id for item in bag] == [102, 101]


def test_insert_sorted_orders_menu_items_by_price():
    bag = OrderedBag()
    prices = {101: 7.0, 102: 2.0, 103: 5.0}
    for item_id, price in prices.items():
        bag.insert_sorted(MenuItem(item_id, "x", price, "o", "a", []))
    assert [item.price for item in bag] == sorted(prices.values())


def test_insert_at_and_get():
    bag = OrderedBag()
    bag.insert_at(0, "b")
    bag.insert_at(0, "a")
    bag.insert_at(2, "c")
    assert [bag.get(i) for i in range(3)] == ["a", "b", "c"]


def test_insert_at_invalid_position():
    bag = OrderedBag([1])
    with pytest.raises(IndexError):
        bag.insert_at(3, 2)
    assert list(bag) == [1]


def test_remove_at():
    bag = OrderedBag(["a", "b", "c"])
    assert bag.remove_at(1) == "b"
    assert list(bag) == ["a", "c"]


def test_remove_at_empty_raises():
    with pytest.raises(IndexError):
        OrderedBag().remove_at(0)


def test_remove_at_out_of_range_raises():
    bag = OrderedBag([1, 2])
    with pytest.raises(IndexError):
        bag.remove_at(2)


def test_get_out_of_range_raises():
    with pytest.raises(IndexError):
        OrderedBag([1]).get(1)


def test_count_and_remove_all():
    bag = OrderedBag([3, 1, 3, 2, 3])
    assert bag.count(3) == 3
    assert bag.remove_all(3) == 3
    assert bag.count(3) == 0
    assert list(bag) == [1, 2]


def test_remove_all_missing_value_leaves_bag():
    bag = OrderedBag([1, 2])
    assert bag.remove_all(7) == 0
    assert list(bag) == [1, 2]


def test_find_returns_stored_element():
    stored = MenuItem(201, "Stew", 9.0, "o", "m", ["beef"])
    bag = OrderedBag([stored])
    probe = MenuItem(201, "probe", 0.1, "v", "m", [])
    assert bag.find(probe) is stored
    assert probe in bag


def test_find_missing_returns_none():
    assert OrderedBag([1, 2]).find(3) is None
    assert 3 not in OrderedBag([1, 2])


def test_str_lists_each_element_on_a_line():
    assert str(OrderedBag([1, 2])) == "1\n2\n"