"""Restaurant order builder: compose categorized orders and price them."""

from .builder import OrderBuilder
from .director import OrderDirector
from .enums import Category
from .errors import MenuItemNotFoundError, NoOrderInProgressError, OrderBuilderError
from .models import LineItem, Menu, MenuEntry, MenuItem, Order

__all__ = [
    "Category",
    "LineItem",
    "Menu",
    "MenuEntry",
    "MenuItem",
    "MenuItemNotFoundError",
    "NoOrderInProgressError",
    "Order",
    "OrderBuilder",
    "OrderBuilderError",
    "OrderDirector",
]
