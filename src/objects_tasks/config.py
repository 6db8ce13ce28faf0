"""Selector rule configuration: canonical part order and unique part types."""

from __future__ import annotations

from dataclasses import dataclass

from objects_tasks.css.model import PartType


@dataclass(frozen=True)
class SelectorRules:
    """Which part types may repeat and the order they must appear in."""

    order: tuple[PartType, ...] = (
        PartType.ELEMENT,
        PartType.ID,
        PartType.CLASS,
        PartType.ATTRIBUTE,
        PartType.PSEUDO_CLASS,
        PartType.PSEUDO_ELEMENT,
        PartType.COMBINE,
    )
    unique: frozenset[PartType] = frozenset(
        {PartType.ELEMENT, PartType.ID, PartType.PSEUDO_ELEMENT}
    )

    def rank(self, part_type: PartType) -> int:
        """Position of *part_type* in the canonical order."""
        try:
            return self.order.index(part_type)
        except ValueError:
            raise ValueError(f"Part type not ranked: {part_type.value!r}") from None


DEFAULT_RULES = SelectorRules()
