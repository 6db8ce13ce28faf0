"""Object exercises: a CSS selector builder, a rectangle and JSON helpers."""

# css must load before config, which imports the part model from it.
from objects_tasks.css import (
    ErrorKind,
    OrderError,
    Part,
    PartType,
    SelectorBuilder,
    SelectorError,
    UniquenessError,
    css_selector_builder,
)
from objects_tasks.config import DEFAULT_RULES, SelectorRules
from objects_tasks.rectangle import Rectangle
from objects_tasks.serialization import from_json, get_json

__all__ = [
    # css
    "css_selector_builder",
    "SelectorBuilder",
    "Part",
    "PartType",
    "ErrorKind",
    "SelectorError",
    "UniquenessError",
    "OrderError",
    # config
    "SelectorRules",
    "DEFAULT_RULES",
    # rectangle
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
]
