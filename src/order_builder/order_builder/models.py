import difflib
import json
import uuid
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path
from typing import assert_never

from pydantic import BaseModel, ConfigDict, Field

from .enums import Category
from .errors import MenuItemNotFoundError


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)


class LineItem(BaseModel):
    """N units of one menu item. Only the quantity may change."""

    model_config = ConfigDict(validate_assignment=True)

    item: MenuItem
    quantity: int = Field(default=1, ge=1)

    @property
    def name(self) -> str:
        return self.item.name

    def increment(self, by: int = 1) -> None:
        self.quantity += by

    def subtotal(self) -> Decimal:
        return self.item.price * self.quantity


class Order(BaseModel):
    order_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    starters: list[LineItem] = Field(default_factory=list)
    main_course: list[LineItem] = Field(default_factory=list)
    side_dishes: list[LineItem] = Field(default_factory=list)
    beverages: list[LineItem] = Field(default_factory=list)

    def line_items(self, category: Category) -> list[LineItem]:
        """Return the (mutable) line item list for a category."""
        match category:
            case Category.STARTERS:
                return self.starters
            case Category.MAIN_COURSE:
                return self.main_course
            case Category.SIDE_DISHES:
                return self.side_dishes
            case Category.BEVERAGES:
                return self.beverages
            case _:
                assert_never(category)

    def all_line_items(self) -> Iterator[tuple[Category, LineItem]]:
        for category in Category:
            for line_item in self.line_items(category):
                yield category, line_item

    def find(self, name: str, category: Category) -> LineItem | None:
        for line_item in self.line_items(category):
            if line_item.name == name:
                return line_item
        return None

    def total_price(self) -> Decimal:
        return sum(
            (line_item.subtotal() for _, line_item in self.all_line_items()),
            Decimal("0"),
        )

    def item_count(self) -> int:
        return sum(line_item.quantity for _, line_item in self.all_line_items())

    def is_empty(self) -> bool:
        return not any(self.line_items(category) for category in Category)


class MenuEntry(BaseModel):
    """A menu item together with the category it is served under."""

    item: MenuItem
    category: Category

    @property
    def name(self) -> str:
        return self.item.name


class Menu(BaseModel):
    menu_id: str
    menu_name: str
    currency: str = "EUR"
    items: list[MenuEntry]

    def get(self, name: str) -> MenuEntry:
        """Look up an entry by name, ignoring case and surrounding whitespace.

        Raises MenuItemNotFoundError with up to three close matches when
        nothing matches.
        """
        wanted = name.strip().casefold()
        for entry in self.items:
            if entry.name.casefold() == wanted:
                return entry
        suggestions = difflib.get_close_matches(
            name.strip(), [entry.name for entry in self.items], n=3, cutoff=0.5
        )
        raise MenuItemNotFoundError(name, suggestions)

    def by_category(self, category: Category) -> list[MenuEntry]:
        return [entry for entry in self.items if entry.category == category]

    @classmethod
    def from_dict(cls, data: dict) -> "Menu":
        """Load Menu from a dictionary (matching JSON structure)."""
        metadata = data["metadata"]
        return cls(
            menu_id=metadata["menu_id"],
            menu_name=metadata["menu_name"],
            currency=metadata.get("currency", "EUR"),
            items=[
                MenuEntry(
                    item=MenuItem(name=item["name"], price=item["price"]),
                    category=item["category"],
                )
                for item in data["items"]
            ],
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "Menu":
        """Load Menu from a JSON file path. Prices are parsed as Decimal."""
        with open(path, "r") as f:
            data = json.load(f, parse_float=Decimal)
        return cls.from_dict(data)
