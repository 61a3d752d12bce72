"""objtasks: rectangle model, JSON bridge and CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.config import ObjtasksConfig
from objtasks.errors import ParseError
from objtasks.model import Rectangle
from objtasks.selector import (
    DuplicateSelectorError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    parse_selector,
    selector_builder,
)
from objtasks.serialization import bind, parse, restore_typed, serialize

__all__ = [
    "__version__",
    "ObjtasksConfig",
    "ParseError",
    "Rectangle",
    "serialize",
    "parse",
    "bind",
    "restore_typed",
    "SelectorBuilder",
    "selector_builder",
    "parse_selector",
    "SelectorError",
    "DuplicateSelectorError",
    "OrderError",
]
