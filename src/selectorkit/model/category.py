"""Selector fragment categories in CSS grammar order."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """One kind of compound-selector fragment.

    Members are declared in the order the CSS grammar requires them to
    appear: ``element#id.class[attr]:pseudo-class::pseudo-element``.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def position(self) -> int:
        """Zero-based index of this category in grammar order."""
        return list(Category).index(self)

    @property
    def is_singleton(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in SINGLETON_CATEGORIES

    def follows(self, other: Category) -> bool:
        return self.position > other.position


SINGLETON_CATEGORIES = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)
