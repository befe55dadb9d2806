"""Plain-text rendering of orders and menus for the CLI."""

from decimal import Decimal

from .enums import Category
from .models import Menu, Order

WIDTH = 40

CATEGORY_TITLES: dict[Category, str] = {
    Category.STARTERS: "Starters",
    Category.MAIN_COURSE: "Main Course",
    Category.SIDE_DISHES: "Side Dishes",
    Category.BEVERAGES: "Beverages",
}


def format_price(amount: Decimal, currency: str = "EUR") -> str:
    return f"{amount:.2f} {currency}"


def _row(left: str, right: str) -> str:
    gap = max(WIDTH - len(left) - len(right), 1)
    return f"{left}{' ' * gap}{right}"


def format_order(order: Order, currency: str = "EUR") -> str:
    """Render an order as a receipt: one block per non-empty category, then the total."""
    lines: list[str] = []
    for category in Category:
        line_items = order.line_items(category)
        if not line_items:
            continue
        lines.append(CATEGORY_TITLES[category])
        for line_item in line_items:
            lines.append(
                _row(
                    f"  {line_item.quantity} x {line_item.name}",
                    format_price(line_item.subtotal(), currency),
                )
            )
    if not lines:
        lines.append("(empty order)")
    lines.append("-" * WIDTH)
    lines.append(_row("Total", format_price(order.total_price(), currency)))
    return "\n".join(lines)


def format_menu(menu: Menu) -> str:
    lines = [menu.menu_name, "=" * WIDTH]
    for category in Category:
        entries = menu.by_category(category)
        if not entries:
            continue
        lines.append(CATEGORY_TITLES[category])
        for entry in entries:
            lines.append(
                _row(f"  {entry.name}", format_price(entry.item.price, menu.currency))
            )
    return "\n".join(lines)
