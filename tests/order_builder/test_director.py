"""Tests for composing whole orders from menu item names."""

from decimal import Decimal

import pytest

from order_builder.builder import OrderBuilder
from order_builder.director import OrderDirector
from order_builder.errors import MenuItemNotFoundError
from order_builder.models import Menu


class TestOrderDirector:
    def test_compose_files_items_under_menu_categories(self, builder, menu: Menu):
        order = OrderDirector(builder, menu).compose(["Steak", "Fries", "Beer"])
        assert [li.name for li in order.main_course] == ["Steak"]
        assert [li.name for li in order.side_dishes] == ["Fries"]
        assert [li.name for li in order.beverages] == ["Beer"]
        assert order.starters == []
        assert order.total_price() == Decimal("20.00")

    def test_compose_aggregates_repeats(self, builder, menu: Menu):
        order = OrderDirector(builder, menu).compose(
            ["steak", "Fries", "STEAK", "Beer"]
        )
        assert order.main_course[0].quantity == 2
        assert order.total_price() == Decimal("32.30")

    def test_compose_starts_a_fresh_order(self, builder, menu: Menu):
        director = OrderDirector(builder, menu)
        first = director.compose(["Beer"])
        second = director.compose(["Fries"])
        assert second is not first
        assert second.beverages == []

    def test_compose_empty_names(self, builder, menu: Menu):
        order = OrderDirector(builder, menu).compose([])
        assert order is not None
        assert order.is_empty()

    def test_unknown_name_raises(self, builder, menu: Menu):
        with pytest.raises(MenuItemNotFoundError):
            OrderDirector(builder, menu).compose(["Steak", "Lobster Thermidor"])

    def test_works_with_strict_builder(self, menu: Menu):
        order = OrderDirector(OrderBuilder(strict=True), menu).compose(["Beer"])
        assert order.item_count() == 1
