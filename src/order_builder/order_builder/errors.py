"""Exceptions raised by the order builder and the menu catalogue."""


class OrderBuilderError(Exception):
    """Base class for all order builder errors."""


class NoOrderInProgressError(OrderBuilderError):
    """Raised in strict mode when the builder is used before reset()."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called with no order in progress; call reset() first")


class MenuItemNotFoundError(OrderBuilderError, LookupError):
    """Raised when a name does not match any item on the menu."""

    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.name = name
        self.suggestions = suggestions or []
        message = f"No menu item named {name!r}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)
