"""Selector part model: PartType and Part."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartType(Enum):
    """Kinds of fragment a selector can be built from."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINE = "combine"


@dataclass(frozen=True)
class Part:
    """A single selector fragment.

    Attributes:
        type: Which kind of fragment this is.
        text: The literal text to emit, punctuation included (``#main``,
            ``.editable``, ``::before``).
    """

    type: PartType
    text: str

    def __str__(self) -> str:
        return self.text
