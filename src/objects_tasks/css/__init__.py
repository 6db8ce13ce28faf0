"""CSS selector builder: part model, errors and the chainable builder."""

from objects_tasks.css.builder import SelectorBuilder, css_selector_builder
from objects_tasks.css.errors import ErrorKind, OrderError, SelectorError, UniquenessError
from objects_tasks.css.model import Part, PartType

__all__ = [
    "css_selector_builder",
    "SelectorBuilder",
    "Part",
    "PartType",
    "ErrorKind",
    "SelectorError",
    "UniquenessError",
    "OrderError",
]
