"""People who use the menu: administrators who edit it and clients who order from it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .menu import Menu, MenuError
from .menu_item import MenuItem
from .ordered import OrderedBag

ADMIN_USERNAME = "Admin"
PASSWORD = "password"

_ADMIN_COMMANDS = (
    "The following are the commands that the user can use:",
    "1-Display Menu",
    "2-Display Vegiterian/Vegan Menu",
    "3-Display Special Offer",
    "4-Add Food Item to menu",
    "5-Remove Food Item from menu",
    "6-Modify Food Item from menu",
)

_CLIENT_COMMANDS = (
    "The following are the commands that the user can use:",
    "1-Display Menu",
    "2-Display Vegiterian/Vegan Menu",
    "3-Display Special Offer",
    "4-Add Food Item to Cart",
    "5-Remove Food Item from Cart",
    "6-View Cart",
    "7-Get Reciept and Close the Cart",
)


class User(ABC):
    """Someone working with a menu."""

    def __init__(self, name: str, menu: Menu) -> None:
        self.name = name
        self.menu = menu

    @abstractmethod
    def login(self, username: str, password: str) -> bool:
        """Return True if the credentials are accepted."""

    @abstractmethod
    def command_help(self) -> str:
        """Return the list of commands available to this user."""

    def menu_text(self) -> str:
        """Return the whole menu."""
        return self.menu.format_menu()

    def vegetarian_text(self) -> str:
        """Return the vegan and vegetarian part of the menu."""
        return self.menu.format_vegan_vegetarian()

    def special_offer_text(self) -> str:
        """Return the current special offer."""
        return self.menu.format_special_offer()


class Admin(User):
    """A user who may add, remove and change menu items."""

    def __init__(
        self,
        name: str,
        menu: Menu,
        username: str = ADMIN_USERNAME,
        password: str = PASSWORD,
    ) -> None:
        super().__init__(name, menu)
        self._username = username
        self._password = password

    def login(self, username: str, password: str) -> bool:
        """Accept only the administrator's username and password."""
        return username == self._username and password == self._password

    def command_help(self) -> str:
        return "".join(f"{line}\n" for line in _ADMIN_COMMANDS)

    def add_menu_item(self, item: MenuItem) -> None:
        """Add item; raise MenuError if its id is already taken."""
        if self.menu.get_item(item.id) is not None:
            raise MenuError("Id is taken")
        self.menu.add_item(item)

    def delete_menu_item(self, item_id: int) -> None:
        """Delete the item; raise MenuError if there is none with that id."""
        if self.menu.get_item(item_id) is None:
            raise MenuError("Id is not valid")
        self.menu.remove_item(item_id)

    def modify_menu_item(self, item: MenuItem) -> None:
        """Replace the item with the same id; raise MenuError if there is none."""
        if self.menu.get_item(item.id) is None:
            raise MenuError("Not Valid Input")
        self.menu.modify_item(item)


@dataclass(frozen=True)
class Receipt:
    """The cart summary and the amount due."""

    cart_text: str
    total: float

    def __str__(self) -> str:
        return f"{self.cart_text}Your final bill is {self.total:g} $\n"


class Client(User):
    """A user who fills a cart with menu item ids and pays for it."""

    def __init__(self, name: str, menu: Menu) -> None:
        super().__init__(name, menu)
        self._cart = OrderedBag()

    @property
    def cart(self) -> tuple[int, ...]:
        """The ids in the cart, in ascending order."""
        return tuple(self._cart)

    def login(self, username: str, password: str) -> bool:
        """Clients are always let in."""
        return True

    def command_help(self) -> str:
        return "".join(f"{line}\n" for line in _CLIENT_COMMANDS)

    def add_to_cart(self, item_id: int) -> None:
        """Put one of the item into the cart; raise MenuError for an unknown id."""
        item = self.menu.get_item(item_id)
        if item is None:
            raise MenuError("The Id is not valid")
        self._cart.insert_sorted(item.id)

    def remove_from_cart(self, item_id: int) -> int:
        """Remove every unit of the item from the cart and return how many went."""
        if self.menu.get_item(item_id) is None:
            raise MenuError("Item not found.")
        return self._cart.remove_all(item_id)

    def view_cart(self) -> str:
        """Return each distinct id in the cart with how many of it there are."""
        lines = ["Cart:\n"]
        for item_id in sorted(set(self._cart)):
            label = "Number of each item : "
            lines.append(f"Id: {item_id}{label:>50}{self._cart.count(item_id)}\n")
            lines.append("-" * 25 + "\n")
        return "".join(lines)

    def finalize_bill(self) -> Receipt:
        """Total the cart, record each unit as ordered and return the receipt."""
        cart_text = self.view_cart()
        total = 0.0
        for item_id in list(self._cart):
            item = self.menu.get_item(item_id)
            if item is None:
                raise MenuError(f"Item {item_id} is no longer on the menu")
            total += item.price
            self.menu.order_item(item.id)
        return Receipt(cart_text, total)