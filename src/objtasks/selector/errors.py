"""Selector builder error types."""

from __future__ import annotations

from objtasks.selector.model import Stage


class SelectorError(Exception):
    """Base class for selector construction failures.

    A builder that raised one of these must be discarded.
    """

    def __init__(self, message: str, stage: Stage):
        self.stage = stage
        super().__init__(message)


class DuplicateSelectorError(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""

    def __init__(self, stage: Stage):
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            stage,
        )


class OrderError(SelectorError):
    """Raised when a part arrives after a part that must follow it."""

    def __init__(self, stage: Stage, after: Stage):
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element",
            stage,
        )
