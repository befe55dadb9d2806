"""Incremental order composition (the Builder half of the Builder pattern).

Typical use:

    builder = OrderBuilder()
    builder.reset()
    builder.add_item(steak, Category.MAIN_COURSE)
    builder.add_item(steak, Category.MAIN_COURSE)  # quantity becomes 2
    order = builder.get_result()

A builder is not thread-safe; use one per order in progress.
"""

from loguru import logger

from .config import get_settings
from .enums import Category
from .errors import NoOrderInProgressError
from .models import LineItem, MenuItem, Order


class OrderBuilder:
    """Accumulates line items into a categorized Order.

    Before the first reset() there is no order in progress. In lenient mode
    (the default) add_item() then does nothing and get_result() returns None.
    In strict mode both raise NoOrderInProgressError.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self.strict = get_settings().strict if strict is None else strict
        self._order: Order | None = None

    def reset(self) -> None:
        """Discard any in-progress order and start a new, empty one."""
        if self._order is not None and not self._order.is_empty():
            logger.debug(
                "Discarding order {} ({} items)",
                self._order.order_id,
                self._order.item_count(),
            )
        self._order = Order()
        logger.debug("Started order {}", self._order.order_id)

    def add_item(self, item: MenuItem, category: Category) -> None:
        """Add one unit of item to the category's line items.

        An entry with the same name in that category is incremented in place;
        otherwise a new line item with quantity 1 is appended.
        """
        if self._order is None:
            if self.strict:
                raise NoOrderInProgressError("add_item")
            logger.warning("Ignoring add_item({!r}): no order in progress", item.name)
            return

        existing = self._order.find(item.name, category)
        if existing is not None:
            existing.increment()
            logger.debug(
                "{} x{} ({})", existing.name, existing.quantity, category.value
            )
            return

        self._order.line_items(category).append(LineItem(item=item))
        logger.debug("{} x1 ({})", item.name, category.value)

    def get_result(self) -> Order | None:
        """Return the in-progress order without resetting the builder."""
        if self._order is None and self.strict:
            raise NoOrderInProgressError("get_result")
        return self._order
