"""A single dish or drink offered on the menu."""

from __future__ import annotations

from dataclasses import dataclass, field

VALID_TYPES = frozenset("vgo")
VALID_CATEGORIES = frozenset("amdb")
MIN_ID = 100
MAX_ID = 500


@dataclass(eq=False)
class MenuItem:
    """A menu entry.

    Items compare equal when their ids match. Ordering with ``>=`` compares
    prices, which is what keeps a category sorted by price.
    """

    id: int
    name: str
    price: float
    type: str
    category: str
    ingredients: list[str] = field(default_factory=list)

    def update(self, id, name, price, type, category, ingredients):
        """Replace the item's details, keeping old values where new ones are invalid.

        Raises ValueError, changing nothing, if the id is outside 100..499.
        A negative price, an unknown type or category, or an empty ingredient
        list leaves the corresponding field unchanged.
        """
        if not MIN_ID <= id < MAX_ID:
            raise ValueError(f"ID outside of range: {id}")
        self.id = id
        self.name = name
        if price >= 0.0:
            self.price = float(price)
        if type in VALID_TYPES:
            self.type = type
        if category in VALID_CATEGORIES:
            self.category = category
        if ingredients:
            self.ingredients = list(ingredients)

    def describe(self) -> str:
        """Return the multi-line description shown to users."""
        lines = (
            f"ID: {self.id}\n"
            f" Name: {self.name}\n"
            f"Price: ${self.price:g}\n"
            f"Type: {self.type}\n"
            f"Category: {self.category}\n"
            "Ingredients: "
        )
        return lines + "".join(f"{ingredient}, " for ingredient in self.ingredients)

    def __str__(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MenuItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MenuItem):
            return NotImplemented
        return self.price >= other.price