"""Joining selectors with CSS combinators."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from selectorkit.model.stringifiable import Stringifiable

__all__ = ["Combinator", "CompositeSelector", "combine"]

logger = logging.getLogger(__name__)


class Combinator(StrEnum):
    """The four CSS combinator symbols."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


@dataclass(frozen=True)
class CompositeSelector:
    """Two rendered selectors joined by a combinator.

    The operands are stored as text, so rendering is repeatable and has no
    side effects. Exactly one space pads each side of the combinator, even
    when the combinator is itself a space.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


def combine(
    left: Stringifiable, combinator: str, right: Stringifiable
) -> CompositeSelector:
    """Join *left* and *right* with *combinator*.

    Both operands are stringified here, left first. Builders passed in are
    therefore consumed and come back empty. The combinator is not checked
    against the known CSS symbols.
    """
    composite = CompositeSelector(
        left=left.stringify(),
        combinator=str(combinator),
        right=right.stringify(),
    )
    logger.debug("Combined selector: %r", composite.stringify())
    return composite
