import pytest

from bistro.menu_item import MenuItem


def make_item(**overrides):
    values = dict(
        id=101,
        name="Soup",
        price=4.5,
        type="v",
        category="a",
        ingredients=["tomato", "basil"],
    )
    values.update(overrides)
    return MenuItem(**values)


def test_describe_format():
    item = make_item()
    assert item.describe() == (
        "ID: 101\n Name: Soup\nPrice: $4.5\nType: v\n"
        "Category: a\nIngredients: tomato, basil, "
    )


def test_str_matches_describe():
    item = make_item()
    assert str(item) == item.describe()


def test_describe_without_ingredients_ends_with_label():
    item = make_item(ingredients=[])
    assert item.describe().endswith("Ingredients: ")


def test_equality_uses_id_only():
    assert make_item() == make_item(name="Other", price=99.0)
    assert not make_item() == make_item(id=102)


def test_hash_consistent_with_equality():
    assert len({make_item(), make_item(name="Other")}) == 1


def test_ge_compares_price():
    cheap = make_item(id=101, price=2.0)
    dear = make_item(id=102, price=9.0)
    assert dear >= cheap
    assert not cheap >= dear
    assert cheap >= make_item(id=103, price=2.0)


def test_update_sets_all_valid_fields():
    item = make_item()
    item.update(205, "Steak", 18.0, "o", "m", ["beef"])
    assert (item.id, item.name, item.price, item.type, item.category) == (
        205,
        "Steak",
        18.0,
        "o",
        "m",
    )
    assert item.ingredients == ["beef"]


@pytest.mark.parametrize("bad_id", [99, 500, 0])
def test_update_rejects_out_of_range_id(bad_id):
    item = make_item()
    with pytest.raises(ValueError):
        item.update(bad_id, "Steak", 18.0, "o", "m", ["beef"])
    assert item.id == 101
    assert item.name == "Soup"


def test_update_keeps_price_when_negative():
    item = make_item()
    item.update(101, "Soup", -1.0, "v", "a", ["tomato"])
    assert item.price == 4.5


def test_update_keeps_invalid_type_and_category():
    item = make_item()
    item.update(101, "Soup", 4.5, "x", "z", ["tomato"])
    assert item.type == "v"
    assert item.category == "a"


def test_update_keeps_ingredients_when_empty():
    item = make_item()
    item.update(101, "Soup", 4.5, "v", "a", [])
    assert item.ingredients == ["tomato", "basil"]


def test_update_sets_empty_name():
    item = make_item()
    item.update(101, "", 4.5, "v", "a", ["tomato"])
    assert item.name == ""