"""Chainable CSS selector builder.

Usage:
    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # -> 'a[href$=".png"]:focus'

Every append returns a new builder and leaves the receiver untouched, so the
empty ``css_selector_builder`` facade can start any number of independent
chains. ``stringify`` is the only operation that mutates: it drains the
receiver's own parts.
"""

from __future__ import annotations

import logging

from objects_tasks.config import DEFAULT_RULES, SelectorRules
from objects_tasks.css.errors import OrderError, UniquenessError
from objects_tasks.css.model import Part, PartType

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector parts and renders them as CSS text."""

    def __init__(
        self,
        parts: list[Part] | None = None,
        *,
        rules: SelectorRules = DEFAULT_RULES,
    ) -> None:
        self._parts: list[Part] = list(parts) if parts else []
        self.rules = rules

    # --- simple selectors -----------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(PartType.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(PartType.ID, f"#{value}")

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(PartType.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(PartType.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(PartType.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(PartType.PSEUDO_ELEMENT, f"::{value}")

    # --- combinators ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, separator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *separator* (``' '``, ``'+'``, ``'~'``, ``'>'``).

        Both operands are stringified, and therefore drained, immediately.
        The separator is emitted as given.
        """
        text = f"{left.stringify()} {separator} {right.stringify()}"
        return self._add(PartType.COMBINE, text)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text and clear this builder's parts."""
        text = "".join(part.text for part in self._parts)
        self._parts.clear()
        logger.debug("Stringified selector %r", text)
        return text

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    def __repr__(self) -> str:
        return f"SelectorBuilder({''.join(p.text for p in self._parts)!r})"

    # --- internals ------------------------------------------------------------

    def _add(self, part_type: PartType, text: str) -> SelectorBuilder:
        part = Part(type=part_type, text=text)
        builder = SelectorBuilder(self._parts + [part], rules=self.rules)
        builder._validate(part)
        logger.debug("Appended %s part %r", part_type.value, text)
        return builder

    def _validate(self, appended: Part) -> None:
        """Check the whole sequence; uniqueness before order."""
        seen: list[PartType] = []
        for part in self._parts:
            if part.type in seen:
                if part.type in self.rules.unique:
                    logger.debug(
                        "Rejected duplicate %s part %r", appended.type.value, appended.text
                    )
                    raise UniquenessError(parts=self.parts)
            else:
                seen.append(part.type)

        ranks = [self.rules.rank(t) for t in seen]
        for previous, current in zip(ranks, ranks[1:]):
            if current <= previous:
                logger.debug(
                    "Rejected out-of-order %s part %r", appended.type.value, appended.text
                )
                raise OrderError(parts=self.parts)


css_selector_builder = SelectorBuilder()
