"""Fluent CSS selector builder with strict part-order validation.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Classes and pseudo-classes may repeat; element, id and pseudo-element may not.
Each part category is a :class:`Stage`; the builder keeps a cursor at the
highest stage touched and rejects any part whose stage is below it.
"""

from __future__ import annotations

import logging

from objtasks.selector.errors import DuplicateSelectorError, OrderError
from objtasks.selector.model import SINGLE_USE_STAGES, Stage

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable accumulator of selector fragments.

    Every transition returns ``self`` so calls can be chained. A transition
    that raises leaves the fragments untouched, but the builder should be
    thrown away.
    """

    def __init__(self) -> None:
        self._element = ""
        self._id = ""
        self._classes: list[str] = []
        self._attribute = ""
        self._pseudo_classes: list[str] = []
        self._pseudo_element = ""
        self._combined = ""
        self._stages: list[Stage] = []
        self._cursor: Stage | None = None

    # --- validation -----------------------------------------------------------

    def _is_set(self, stage: Stage) -> bool:
        return stage in self._stages

    def _enter(self, stage: Stage) -> None:
        """Validate and record a transition into *stage*."""
        if stage in SINGLE_USE_STAGES and self._is_set(stage):
            logger.debug("Duplicate %s in selector '%s'", stage.label, self)
            raise DuplicateSelectorError(stage)
        if self._cursor is not None and stage < self._cursor:
            logger.debug(
                "%s after %s in selector '%s'", stage.label, self._cursor.label, self
            )
            raise OrderError(stage, after=self._cursor)
        self._stages.append(stage)
        self._cursor = stage

    # --- transitions ----------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._enter(Stage.ELEMENT)
        self._element = value
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._enter(Stage.ID)
        self._id = f"#{value}"
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._enter(Stage.CLASS)
        self._classes.append(f".{value}")
        return self

    def attr(self, value: str) -> SelectorBuilder:
        """Set the attribute part. A later call replaces an earlier one."""
        self._enter(Stage.ATTRIBUTE)
        self._attribute = f"[{value}]"
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._enter(Stage.PSEUDO_CLASS)
        self._pseudo_classes.append(f":{value}")
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._enter(Stage.PSEUDO_ELEMENT)
        self._pseudo_element = f"::{value}"
        return self

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* (``" "``, ``"+"``, ``"~"``, ``">"``)."""
        self._combined = f"{left.stringify()} {combinator} {right.stringify()}"
        return self

    # --- output ---------------------------------------------------------------

    @property
    def stages(self) -> tuple[Stage, ...]:
        """Stages touched so far, in call order."""
        return tuple(self._stages)

    def stringify(self) -> str:
        """Return the CSS text: fragments in stage order, then any combination."""
        return "".join(
            [
                self._element,
                self._id,
                *self._classes,
                self._attribute,
                *self._pseudo_classes,
                self._pseudo_element,
                self._combined,
            ]
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
