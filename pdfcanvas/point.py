"""Points on a page, measured from the bottom left corner."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .scale import Mm, Pt

_MIN_NORMAL = 2.0 ** -126
_MAX_FINITE = 3.4028234663852886e38


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and _MIN_NORMAL <= abs(value) <= _MAX_FINITE


@dataclass(frozen=True, eq=False)
class Point:
    """A position in points; the origin is the bottom left corner of the page."""

    x: Pt = field(default_factory=Pt)
    y: Pt = field(default_factory=Pt)

    @classmethod
    def from_mm(cls, x: Mm, y: Mm) -> "Point":
        return cls(x.into_pt(), y.into_pt())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        coords = (self.x.value, self.y.value, other.x.value, other.y.value)
        if not all(_is_normal(c) for c in coords):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))