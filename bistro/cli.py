"""Interactive command-line front end for the restaurant menu."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from typing import TextIO

from .menu import DATA_FILE, Menu, MenuError
from .menu_item import MenuItem
from .users import Admin, Client

DEFAULT_MENU_FILE = "menuItems.txt"
_STOP_WORD = "x"


class _Console:
    """Reads whole lines or whitespace-separated tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def _readline(self) -> str:
        raw = self._stream.readline()
        if not raw:
            raise EOFError
        return raw

    def line(self) -> str:
        if self._pending:
            text = " ".join(self._pending)
            self._pending.clear()
            return text
        return self._readline().rstrip("\r\n")

    def token(self) -> str:
        while not self._pending:
            self._pending.extend(self._readline().split())
        return self._pending.popleft()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bistro", description="Browse, edit and order from a restaurant menu."
    )
    parser.add_argument(
        "--menu-file",
        default=DEFAULT_MENU_FILE,
        help="menu source file without ids (default: %(default)s)",
    )
    parser.add_argument(
        "--data-file",
        default=DATA_FILE,
        help="working file the numbered menu is kept in (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the special-offer draw"
    )
    return parser.parse_args(argv)


def _error(message: object) -> None:
    print(f"[!] {message}", file=sys.stderr)


def _ask_user_type(console: _Console) -> str:
    while True:
        print(
            "Do you want to log in as an Admin or a Client? "
            "(Enter 'Admin' or 'Client'): ",
            end="",
        )
        user_type = console.line().strip()
        if user_type in ("Admin", "Client"):
            return user_type
        print("Invalid input. Please start over and enter 'Admin' or 'Client'.")


def _ask_credentials(console: _Console) -> tuple[str, str]:
    print("Please log in to continue.")
    print("Username: ", end="")
    username = console.token()
    print("Password: ", end="")
    secret = console.token()
    return username, secret


def _read_choice(console: _Console, highest: int) -> int | None:
    print(f"Enter your choice: (1-{highest})")
    text = console.token()
    try:
        return int(text)
    except ValueError:
        return None


def _read_item(console: _Console, with_spaces_hint: bool) -> MenuItem:
    """Prompt for an item's details; raise ValueError on unusable input."""
    print("Enter item id (100->499)")
    id_text = console.token()
    print("\nEnter item name (no spaces)" if with_spaces_hint else "\nEnter item name")
    name = console.token()
    print("\nEnter item category (a, m, d, b)")
    category = console.token()[0]
    print("\nEnter item type (o, v, g)")
    item_type = console.token()[0]
    print("\nEnter item price")
    price_text = console.token()
    print("\nEnter item ingredients one by one (type x to stop adding ingredients):")
    ingredients = []
    while (word := console.token()) != _STOP_WORD:
        ingredients.append(word)
        print()

    try:
        item_id = int(id_text)
    except ValueError as exc:
        raise ValueError(f"Invalid id: {id_text!r}") from exc
    try:
        price = float(price_text)
    except ValueError as exc:
        raise ValueError(f"Invalid price: {price_text!r}") from exc

    item = MenuItem(0, "", 0.0, "o", "m", [])
    item.update(item_id, name, price, item_type, category, ingredients)
    return item


def _run_admin(console: _Console, menu: Menu) -> int:
    admin = Admin("ahmad", menu)
    username, secret = _ask_credentials(console)
    if not admin.login(username, secret):
        print("Login failed! Incorrect username or password.")
        return 1
    print(f"Login successful! Welcome, {username}!")
    print(admin.command_help(), end="")

    while True:
        choice = _read_choice(console, 6)
        try:
            if choice == 0:
                return 0
            if choice == 1:
                print(admin.menu_text(), end="")
            elif choice == 2:
                print(admin.vegetarian_text(), end="")
            elif choice == 3:
                print(admin.special_offer_text(), end="")
            elif choice == 4:
                print("Please enter the item details for the newly added item")
                admin.add_menu_item(_read_item(console, with_spaces_hint=True))
            elif choice == 5:
                print("Enter item id (100->499) for the item to be deleted")
                id_text = console.token()
                try:
                    item_id = int(id_text)
                except ValueError as exc:
                    raise ValueError(f"Invalid id: {id_text!r}") from exc
                admin.delete_menu_item(item_id)
            elif choice == 6:
                print("Please enter the new item details for the modified item")
                admin.modify_menu_item(_read_item(console, with_spaces_hint=False))
            else:
                print("Invalid choice. Please enter a number between 1 and 6.")
        except (MenuError, ValueError) as exc:
            _error(exc)


def _run_client(console: _Console, menu: Menu) -> int:
    client = Client("ahmad", menu)
    username, secret = _ask_credentials(console)
    client.login(username, secret)
    print(client.command_help(), end="")

    while True:
        choice = _read_choice(console, 7)
        try:
            if choice == 0:
                return 0
            if choice == 1:
                print(client.menu_text(), end="")
            elif choice == 2:
                print(client.vegetarian_text(), end="")
            elif choice == 3:
                print(client.special_offer_text(), end="")
            elif choice == 4:
                print("Please choose the item ID you want to add in your cart")
                id_text = console.token()
                try:
                    item_id = int(id_text)
                except ValueError:
                    _error("The Id is not valid")
                    continue
                client.add_to_cart(item_id)
            elif choice == 5:
                print("Please choose the item ID you want to remove from your cart")
                print("#" * 100)
                print("-" * 100)
                print("Enter the ID of the item to be removed: ", end="")
                id_text = console.token()
                print("-" * 100)
                try:
                    item_id = int(id_text)
                except ValueError:
                    _error("Invalid ID input.")
                    continue
                client.remove_from_cart(item_id)
                print("Item removed from cart.")
            elif choice == 6:
                print(client.view_cart(), end="")
            elif choice == 7:
                print(client.finalize_bill(), end="")
            else:
                print("Invalid choice. Please enter a number between 1 and 7.")
        except (MenuError, ValueError) as exc:
            _error(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session; return the process exit status."""
    args = _parse_args(argv)
    menu = Menu(args.data_file, rng=random.Random(args.seed))
    try:
        menu.load(args.menu_file)
    except (OSError, MenuError) as exc:
        _error(f"error: {exc}")
        return 1

    console = _Console(sys.stdin)
    try:
        if _ask_user_type(console) == "Admin":
            return _run_admin(console, menu)
        return _run_client(console, menu)
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())