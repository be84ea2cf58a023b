"""Entry points that start a new builder from any category."""

from __future__ import annotations

from selectorkit.builder.builder import SelectorBuilder
from selectorkit.builder.combinator import CompositeSelector, combine
from selectorkit.model.stringifiable import Stringifiable

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Factory for selector builders.

    Each method returns a fresh :class:`SelectorBuilder` already holding one
    fragment, so a chain can begin with whichever category comes first::

        css_selector_builder.id("main").class_("container").stringify()
        # '#main.container'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CompositeSelector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
