"""JSON helpers: dump values to compact JSON and load JSON onto a class."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are converted with :func:`dataclasses.asdict` at any
    nesting depth.
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode_default)


def from_json(cls: type[T], text: str) -> T:
    """Build a *cls* instance from a JSON object without calling ``__init__``.

    Every key of the object becomes an attribute of the instance, frozen
    dataclasses included. Raises ``TypeError`` when the document is not a
    JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
