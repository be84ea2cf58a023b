from selectorkit.builder.builder import SelectorBuilder
from selectorkit.builder.combinator import Combinator, CompositeSelector, combine
from selectorkit.builder.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.builder.validation import check_fragment

__all__ = [
    "SelectorBuilder",
    "Combinator",
    "CompositeSelector",
    "combine",
    "CssSelectorBuilder",
    "css_selector_builder",
    "check_fragment",
]
