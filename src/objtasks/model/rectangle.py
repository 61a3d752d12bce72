"""Rectangle model: width/height record with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle whose area is derived from its current dimensions.

    No validation is performed: whatever ``width`` and ``height`` hold is
    multiplied as-is when the area is requested.
    """

    width: float
    height: float

    def get_area(self) -> float:
        """Return ``width * height`` for the current values."""
        return self.width * self.height
