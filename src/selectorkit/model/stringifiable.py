"""The one capability shared by builders and composite selectors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that can render itself as selector text."""

    def stringify(self) -> str: ...
