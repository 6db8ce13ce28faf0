"""Tests for selector rule configuration."""

import pytest

from objects_tasks.config import DEFAULT_RULES, SelectorRules
from objects_tasks.css.model import PartType


class TestDefaultRules:
    def test_ranks(self):
        assert DEFAULT_RULES.rank(PartType.ELEMENT) == 0
        assert DEFAULT_RULES.rank(PartType.ID) == 1
        assert DEFAULT_RULES.rank(PartType.CLASS) == 2
        assert DEFAULT_RULES.rank(PartType.ATTRIBUTE) == 3
        assert DEFAULT_RULES.rank(PartType.PSEUDO_CLASS) == 4
        assert DEFAULT_RULES.rank(PartType.PSEUDO_ELEMENT) == 5
        assert DEFAULT_RULES.rank(PartType.COMBINE) == 6

    def test_unique_types(self):
        assert DEFAULT_RULES.unique == {
            PartType.ELEMENT,
            PartType.ID,
            PartType.PSEUDO_ELEMENT,
        }

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_RULES.unique = frozenset()  # type: ignore[misc]


class TestCustomRules:
    def test_unranked_type(self):
        rules = SelectorRules(order=(PartType.ELEMENT,))
        with pytest.raises(ValueError, match="pseudo-class"):
            rules.rank(PartType.PSEUDO_CLASS)
