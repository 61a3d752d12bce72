"""Selector model: the six ordered stages and the CSS combinators."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Stage(IntEnum):
    """Selector part categories, valued in the order CSS requires them."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")


# Stages that may appear at most once per selector.
SINGLE_USE_STAGES = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
