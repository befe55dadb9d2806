from collections.abc import Iterable

from loguru import logger

from .builder import OrderBuilder
from .models import Menu, Order


class OrderDirector:
    """Drives an OrderBuilder from a list of menu item names."""

    def __init__(self, builder: OrderBuilder, menu: Menu) -> None:
        self.builder = builder
        self.menu = menu

    def compose(self, names: Iterable[str]) -> Order | None:
        """Build a fresh order with one unit per name.

        Each name is resolved against the menu and filed under the entry's
        category. Raises MenuItemNotFoundError for unknown names.
        """
        self.builder.reset()
        for name in names:
            entry = self.menu.get(name)
            self.builder.add_item(entry.item, entry.category)
        order = self.builder.get_result()
        if order is not None:
            logger.info(
                "Composed order {}: {} items, total {}",
                order.order_id,
                order.item_count(),
                order.total_price(),
            )
        return order
