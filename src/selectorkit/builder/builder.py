"""Fluent, single-use CSS compound selector builder."""

from __future__ import annotations

import logging

from selectorkit.builder.validation import check_fragment
from selectorkit.model.category import Category
from selectorkit.model.selector import Selector

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates fragments of one compound selector through chained calls.

    Every fragment method validates the ordering and singleton rules before
    storing anything. A rejected fragment clears the whole builder before
    the error is raised, so a failed chain never leaves partial state.

    The builder is single use: :meth:`stringify` renders the selector and
    then clears it, so a second call without new fragments returns ``""``.

    Example::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'
    """

    def __init__(self) -> None:
        self._selector = Selector()

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class name; the same class may be added more than once."""
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute condition, given as the text inside ``[...]``."""
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Add a fragment by category; same rules as the named methods."""
        return self._add(Category(category), value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector, then clear the builder."""
        result = self._selector.render()
        self._reset()
        return result

    # --- internals ------------------------------------------------------------

    def _add(self, category: Category, value: str) -> SelectorBuilder:
        error = check_fragment(self._selector, category)
        if error is not None:
            logger.debug(
                "Rejected %s fragment %r after %s: %s",
                category.value,
                value,
                [c.value for c in self._selector.populated()],
                type(error).__name__,
            )
            self._reset()
            raise error
        self._selector.add(category, value)
        return self

    def _reset(self) -> None:
        logger.debug("Builder reset (was %r)", self._selector.render())
        self._selector.reset()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._selector.render()!r})"
