# bistro

A small console system for running a restaurant menu. Menu items are
grouped into four categories (appetizers, main dishes, desserts and
beverages), kept ordered by price, and a rotating special offer takes 30%
off two items per category for a limited number of orders.

Two roles are available:

- **Admin** – view the menu, the vegetarian/vegan selection and the
  special offer; add, remove and modify menu items.
- **Client** – view the same listings, add items to a cart, remove them,
  view the cart and close it with a receipt.

## Installation

```
pip install .
```

## Running

```
bistro
```

The program loads the menu from a menu file, asks whether you want to log
in as `Admin` or `Client`, and then shows the numbered commands available
to that role. Enter `0` to leave the command loop.

## The menu file

Each line of the menu file describes one item:

```
Name, t, c, price ingredient,ingredient,...
```

- `t` is the item type: `v` (vegetarian), `g` (vegan) or `o` (other).
- `c` is the category: `a` (appetizer), `m` (main dish), `d` (dessert)
  or `b` (beverage).

When the menu is loaded every item is given an id from its category:
appetizers start at 100, main dishes at 200, desserts at 300 and
beverages at 400. The numbered copy of the file is written alongside and
kept up to date as an admin adds, modifies or removes items.

## Using it as a library

```python
from bistro.menu import Menu
from bistro.menu_item import MenuItem
from bistro.users import Admin, Client

menu = Menu()
menu.load("menuItems.txt")

print(menu.format_menu())
print(menu.format_special_offer())

client = Client("guest", menu)
client.add_to_cart(100)
print(client.view_cart())
print(client.finalize_bill())
```

## Tests

```
pip install .[test]
pytest
```