"""Ordering and cardinality rules for adding a fragment to a selector."""

from __future__ import annotations

from selectorkit.errors import DuplicateViolation, OrderViolation, SelectorError
from selectorkit.model.category import Category
from selectorkit.model.selector import Selector

__all__ = ["check_fragment"]


def check_fragment(selector: Selector, category: Category) -> SelectorError | None:
    """Return the violation adding a *category* fragment would cause, if any.

    The order rule is checked first: no category later in grammar order may
    already be populated. Then singleton categories must still be empty.
    The selector is not modified.
    """
    for populated in selector.populated():
        if populated.follows(category):
            return OrderViolation(category)
    if category.is_singleton and selector.has(category):
        return DuplicateViolation(category)
    return None
