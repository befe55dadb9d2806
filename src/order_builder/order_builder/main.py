"""CLI entry point for building a restaurant order interactively.

Usage:
    order-builder [--menu PATH] [--strict]
    python -m order_builder.main
"""

import argparse

from loguru import logger

from .builder import OrderBuilder
from .config import get_settings
from .errors import MenuItemNotFoundError
from .logging import setup_logging
from .models import Menu
from .receipt import format_menu, format_order

HELP_TEXT = (
    "Type a menu item name to add it, 'order' to show the current order, "
    "'new' to start over, 'quit' to finish."
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build a restaurant order")
    parser.add_argument(
        "--menu",
        default=settings.menu_json_path,
        help="Path to the menu JSON file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict,
        help="Fail loudly when the builder is used without an order in progress",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the order builder CLI."""
    settings = get_settings()
    args = _parse_args(argv)

    setup_logging(level=settings.log_level)
    logger.info("Starting order builder CLI")

    menu = Menu.from_json_file(args.menu)
    logger.info("Menu loaded: {} ({} items)", menu.menu_name, len(menu.items))
    print(format_menu(menu))
    print()

    builder = OrderBuilder(strict=args.strict)
    builder.reset()

    print("-" * 50)
    print(HELP_TEXT)
    print("-" * 50)
    print()

    while True:
        try:
            user_input = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not user_input:
            continue
        command = user_input.lower()
        if command in ("quit", "exit", "q"):
            break
        if command == "order":
            print(format_order(builder.get_result(), menu.currency))
            continue
        if command == "new":
            builder.reset()
            print("Started a new order.")
            continue

        try:
            entry = menu.get(user_input)
        except MenuItemNotFoundError as e:
            logger.debug("Unknown item: {}", user_input)
            print(e)
            continue

        builder.add_item(entry.item, entry.category)
        print(f"Added {entry.name}.")

    order = builder.get_result()
    print("-" * 50)
    print(format_order(order, menu.currency))
    print("-" * 50)
    logger.info(
        "Order {} finished: {} items, total {}",
        order.order_id,
        order.item_count(),
        order.total_price(),
    )


if __name__ == "__main__":
    main()
