"""The restaurant menu: categories, the data file and the rotating special offer."""

from __future__ import annotations

import dataclasses
import os
import random
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .menu_item import MenuItem
from .ordered import OrderedBag

DATA_FILE = "modified_menuItems.txt"
CATEGORY_ORDER = "amdb"
OFFER_SLOTS = len(CATEGORY_ORDER) * 2
OFFER_DISCOUNT = 0.7
_ID_BASES = {"a": 100, "m": 200, "d": 300, "b": 400}


class MenuError(Exception):
    """Raised when the menu, its data file or an id is not usable."""


@dataclass
class OfferSlot:
    """One entry of the special offer: the item and how many are left."""

    id: int = 0
    quantity: int = 0


def parse_item_line(line: str) -> MenuItem:
    """Parse a data-file line such as ``Burger, o m 12.5 beef,bun. 200``."""
    text = line.rstrip("\r\n")
    comma = text.find(",")
    if comma < 0 or len(text) <= comma + 6:
        raise MenuError(f"Malformed menu line: {line!r}")
    name = text[:comma]
    type_char = text[comma + 2]
    category = text[comma + 4]
    price_text, space, rest = text[comma + 6:].partition(" ")
    if not space:
        raise MenuError(f"Missing ingredients after price: {line!r}")
    try:
        price = float(price_text.rstrip(","))
    except ValueError as exc:
        raise MenuError(f"Invalid price {price_text!r} in {line!r}") from exc

    first_digit = next(
        (index for index, char in enumerate(rest) if char in string.digits), None
    )
    if first_digit is None:
        raise MenuError(f"Missing id in menu line: {line!r}")
    id_text = ""
    for char in rest[first_digit:]:
        if char not in string.digits:
            break
        id_text += char

    ingredients = [
        part.strip().rstrip(".").strip() for part in rest[:first_digit].split(",")
    ]
    return MenuItem(
        int(id_text),
        name,
        price,
        type_char,
        category,
        [ingredient for ingredient in ingredients if ingredient],
    )


def add_ids(lines: Iterable[str]) -> list[str]:
    """Append ``. <id>`` to each line, numbering items per category from 100, 200, 300, 400.

    The category is the character four places after the first comma. A line
    with an unknown category reuses the previously assigned id.
    """
    counters = dict.fromkeys(_ID_BASES, 0)
    current_id = 0
    result = []
    for line in lines:
        comma = line.find(",")
        if comma < 0 or len(line) <= comma + 4:
            raise MenuError(f"Malformed menu line: {line!r}")
        category = line[comma + 4]
        if category in _ID_BASES:
            current_id = _ID_BASES[category] + counters[category]
            counters[category] += 1
        result.append(f"{line}. {current_id}")
    return result


def add_ids_to_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> None:
    """Read menu lines from source and write them, with ids, to destination."""
    lines = Path(source).read_text().splitlines()
    Path(destination).write_text("".join(f"{line}\n" for line in add_ids(lines)))


def _item_line(item: MenuItem) -> str:
    ingredients = ",".join(item.ingredients)
    return f"{item.name}, {item.type} {item.category} {item.price:g} {ingredients}. {item.id}"


def _category_index(item_id: int) -> int:
    index = item_id // 100 - 1
    if not 0 <= index < len(CATEGORY_ORDER):
        raise MenuError(f"Id {item_id} belongs to no category")
    return index


class Menu:
    """Menu items grouped by category, each category kept sorted by price."""

    def __init__(
        self,
        data_file: str | os.PathLike[str] = DATA_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self.data_file = Path(data_file)
        self._rng = rng if rng is not None else random.Random()
        self._categories = [OrderedBag() for _ in CATEGORY_ORDER]
        self.special_offer = [OfferSlot() for _ in range(OFFER_SLOTS)]

    def __iter__(self) -> Iterator[MenuItem]:
        for bag in self._categories:
            yield from bag

    def __len__(self) -> int:
        return sum(len(bag) for bag in self._categories)

    def load(self, source: str | os.PathLike[str]) -> None:
        """Number the items of source into the data file, load them and draw an offer."""
        add_ids_to_file(source, self.data_file)
        with self.data_file.open() as handle:
            for raw in handle:
                if not raw.strip():
                    continue
                item = parse_item_line(raw)
                index = CATEGORY_ORDER.find(item.category)
                if index >= 0:
                    self._categories[index].insert_sorted(item)
        self.set_offer()

    def add_item(self, item: MenuItem) -> None:
        """Add a copy of item to the category its id names and append it to the data file."""
        index = _category_index(item.id)
        self._categories[index].insert_sorted(
            dataclasses.replace(item, ingredients=list(item.ingredients))
        )
        with self.data_file.open("a") as handle:
            handle.write(_item_line(item) + "\n")

    def get_item(self, item_id: int) -> MenuItem | None:
        """Return the item with this id, or None."""
        return next((item for item in self if item.id == item_id), None)

    def modify_item(self, item: MenuItem) -> None:
        """Replace the item that has the same id."""
        self.remove_item(item.id)
        self.add_item(item)

    def remove_item(self, item_id: int) -> None:
        """Remove the item from the menu and its line from the data file."""
        item = self.get_item(item_id)
        if item is None:
            raise MenuError(f"No item with id {item_id}")
        for bag in self._categories:
            bag.remove_all(item)

        if not self.data_file.exists():
            return
        kept = []
        for line in self.data_file.read_text().splitlines():
            _, space, tail = line.rpartition(" ")
            if not space:
                continue
            try:
                current = int(tail)
            except ValueError as exc:
                raise MenuError(f"Invalid id in data file line: {line!r}") from exc
            if current != item_id:
                kept.append(line)
        temporary = self.data_file.with_name(self.data_file.name + ".tmp")
        temporary.write_text("".join(f"{line}\n" for line in kept))
        os.replace(temporary, self.data_file)

    def format_menu(self) -> str:
        """Return every item, category by category."""
        return "".join(f"{item}\n" for item in self) + "\n"

    def format_special_offer(self) -> str:
        """Return the items currently on special offer."""
        lines = ["Special Offer:\n"]
        for slot in self.special_offer:
            item = self.get_item(slot.id)
            if item is None:
                raise MenuError(f"Special offer refers to missing item {slot.id}")
            lines.append(f"The items with the special offer are {item}     \n")
        return "".join(lines)

    def format_vegan_vegetarian(self) -> str:
        """Return the items that are not of type 'o', ordered by id within each category."""
        parts = []
        for bag in self._categories:
            ids = OrderedBag()
            for item in bag:
                if item.type != "o":
                    ids.insert_sorted(item.id)
            parts.extend(f"{self.get_item(item_id)}\n" for item_id in ids)
        return "".join(parts)

    def set_offer(self) -> None:
        """Pick two items per category id range, discount them and give each a stock of 3 to 10."""
        chosen = []
        previous = None
        for index in range(OFFER_SLOTS):
            base = (index // 2 + 1) * 100
            candidates = sorted(
                {item.id for item in self if base <= item.id < base + 100 and item.id != previous}
            )
            if not candidates:
                raise MenuError(
                    f"Not enough items with ids {base}-{base + 99} for the special offer"
                )
            previous = self._rng.choice(candidates)
            chosen.append(previous)

        for index, item_id in enumerate(chosen):
            item = self.get_item(item_id)
            item.price *= OFFER_DISCOUNT
            self.special_offer[index] = OfferSlot(item_id, self._rng.randint(3, 10))

    def order_item(self, item_id: int) -> None:
        """Record an order; when an offer's stock runs out, restore prices and draw a new offer."""
        if self.get_item(item_id) is None:
            raise MenuError(f"Item {item_id} is not in the list")
        for index in range(len(self.special_offer)):
            slot = self.special_offer[index]
            if slot.id != item_id:
                continue
            slot.quantity -= 1
            if slot.quantity == 0:
                for offered in self.special_offer:
                    item = self.get_item(offered.id)
                    if item is not None:
                        item.price /= OFFER_DISCOUNT
                self.set_offer()