"""Error hierarchy for selector building."""

from __future__ import annotations

from selectorkit.model.category import Category

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(category.value for category in Category)
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector rule violations."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class OrderViolation(SelectorError):
    """A fragment arrived after a category that must come later."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(ORDER_MESSAGE, category=category)


class DuplicateViolation(SelectorError):
    """An element, id or pseudo-element was supplied a second time."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)
