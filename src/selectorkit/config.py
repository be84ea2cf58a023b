from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    descendant_keyword: str = "descendant"  # CLI word for the " " combinator
