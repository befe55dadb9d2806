"""Shared pytest fixtures for order builder tests."""

from decimal import Decimal
from pathlib import Path

import pytest

from order_builder.builder import OrderBuilder
from order_builder.config import get_settings
from order_builder.models import Menu, MenuItem

MENU_JSON_PATH = (
    Path(__file__).resolve().parents[2] / "menus" / "restaurant" / "menu.json"
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env changes in one test don't leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def menu() -> Menu:
    """Load the sample restaurant menu from JSON."""
    return Menu.from_json_file(MENU_JSON_PATH)


@pytest.fixture
def builder() -> OrderBuilder:
    """A lenient builder with no order started yet."""
    return OrderBuilder(strict=False)


@pytest.fixture
def steak() -> MenuItem:
    return MenuItem(name="Steak", price=Decimal("12.30"))


@pytest.fixture
def fries() -> MenuItem:
    return MenuItem(name="Fries", price=Decimal("4.20"))


@pytest.fixture
def beer() -> MenuItem:
    return MenuItem(name="Beer", price=Decimal("3.50"))
