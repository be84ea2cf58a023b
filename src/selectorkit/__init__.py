"""selectorkit: build CSS selectors from ordered, validated fragments."""

__version__ = "0.1.0"

from selectorkit.builder import (  # noqa: E402
    Combinator,
    CompositeSelector,
    CssSelectorBuilder,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from selectorkit.errors import DuplicateViolation, OrderViolation, SelectorError  # noqa: E402
from selectorkit.model import Category, Stringifiable  # noqa: E402
from selectorkit.objects import Rectangle, from_json, get_json  # noqa: E402

__all__ = [
    "__version__",
    "Category",
    "Combinator",
    "CompositeSelector",
    "CssSelectorBuilder",
    "DuplicateViolation",
    "OrderViolation",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "Stringifiable",
    "combine",
    "css_selector_builder",
    "from_json",
    "get_json",
]
