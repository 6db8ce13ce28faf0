"""Error types raised while building a selector."""

from __future__ import annotations

from enum import Enum

from objects_tasks.css.model import Part

UNIQUENESS_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ErrorKind(Enum):
    """Which selector rule was broken."""

    UNIQUENESS = "uniqueness"
    ORDER = "order"


class SelectorError(Exception):
    """Base error for rejected selector parts."""

    kind: ErrorKind

    def __init__(self, message: str, *, parts: tuple[Part, ...] = ()) -> None:
        super().__init__(message)
        self.parts = parts


class UniquenessError(SelectorError):
    """Element, id or pseudo-element appended twice to one selector."""

    kind = ErrorKind.UNIQUENESS

    def __init__(self, *, parts: tuple[Part, ...] = ()) -> None:
        super().__init__(UNIQUENESS_MESSAGE, parts=parts)


class OrderError(SelectorError):
    """A part appended out of canonical order."""

    kind = ErrorKind.ORDER

    def __init__(self, *, parts: tuple[Part, ...] = ()) -> None:
        super().__init__(ORDER_MESSAGE, parts=parts)
