"""JSON text helpers that keep behaviour out of the payload.

``get_json`` writes data only: dataclasses as their fields, plain objects
as their instance attributes. ``from_json`` reverses it by attaching a
class to decoded data without running that class's constructor.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _to_data(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    return json.dumps(obj, separators=(",", ":"), default=_to_data)


def from_json(cls: type[T], text: str) -> T:
    """Decode a JSON object into an instance of *cls*.

    The decoded keys become instance attributes; ``cls.__init__`` is not
    called, so the result has the class's methods over exactly the decoded
    data. Classes using ``__slots__`` are supported; a key with no matching
    slot raises ``AttributeError``.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in data.items():
        object.__setattr__(obj, key, value)
    return obj
