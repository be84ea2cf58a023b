"""Mutable fragment store behind a single selector builder."""

from __future__ import annotations

from dataclasses import dataclass, field

from selectorkit.model.category import Category


@dataclass
class Selector:
    """Fragments of one compound selector, grouped by category.

    A singleton is set only when it holds a non-empty token; ``""`` behaves
    like ``None`` for both the rules and the output. Repeating categories
    keep insertion order, which is also the output order.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attrs: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    # --- inspection -----------------------------------------------------------

    def has(self, category: Category) -> bool:
        """Return True if at least one fragment of *category* is present."""
        if category is Category.ELEMENT:
            return bool(self.element)
        if category is Category.ID:
            return bool(self.id)
        if category is Category.CLASS:
            return bool(self.classes)
        if category is Category.ATTRIBUTE:
            return bool(self.attrs)
        if category is Category.PSEUDO_CLASS:
            return bool(self.pseudo_classes)
        return bool(self.pseudo_element)

    def populated(self) -> list[Category]:
        """Categories holding at least one fragment, in grammar order."""
        return [category for category in Category if self.has(category)]

    @property
    def is_empty(self) -> bool:
        return not self.populated()

    # --- mutation -------------------------------------------------------------

    def add(self, category: Category, value: str) -> None:
        """Store *value* under *category* without any rule checks."""
        if category is Category.ELEMENT:
            self.element = value
        elif category is Category.ID:
            self.id = value
        elif category is Category.CLASS:
            self.classes.append(value)
        elif category is Category.ATTRIBUTE:
            self.attrs.append(value)
        elif category is Category.PSEUDO_CLASS:
            self.pseudo_classes.append(value)
        else:
            self.pseudo_element = value

    def reset(self) -> None:
        """Drop every fragment."""
        self.element = None
        self.id = None
        self.classes = []
        self.attrs = []
        self.pseudo_classes = []
        self.pseudo_element = None

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Concatenate the fragments in grammar order, with CSS prefixes."""
        parts: list[str] = []
        if self.element:
            parts.append(self.element)
        if self.id:
            parts.append(f"#{self.id}")
        if self.classes:
            parts.append("." + ".".join(self.classes))
        parts.extend(f"[{attr}]" for attr in self.attrs)
        if self.pseudo_classes:
            parts.append(":" + ":".join(self.pseudo_classes))
        if self.pseudo_element:
            parts.append(f"::{self.pseudo_element}")
        return "".join(parts)
