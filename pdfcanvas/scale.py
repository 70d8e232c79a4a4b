"""Length units: millimetres, points and pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

_MM_PER_PT = 0.352778
_PT_PER_MM = 2.834646
_MIN_NORMAL = 2.0 ** -126
_MAX_FINITE = 3.4028234663852886e38


def _zero_or_normal(value: float) -> bool:
    if value == 0.0:
        return True
    return math.isfinite(value) and _MIN_NORMAL <= abs(value) <= _MAX_FINITE


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _key(value: float) -> float:
    return _round_half_away(value * 1000.0)


@dataclass(frozen=True, eq=False)
class _Length:
    """A floating point length compared with a precision of three decimals."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if not (_zero_or_normal(self.value) and _zero_or_normal(other.value)):
            return False
        return _key(self.value) == _key(other.value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, _key(self.value)))

    def _same(self, other: object) -> bool:
        return type(other) is type(self)

    def __lt__(self, other):
        return self.value < other.value if self._same(other) else NotImplemented

    def __le__(self, other):
        return self.value <= other.value if self._same(other) else NotImplemented

    def __gt__(self, other):
        return self.value > other.value if self._same(other) else NotImplemented

    def __ge__(self, other):
        return self.value >= other.value if self._same(other) else NotImplemented

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __neg__(self):
        return type(self)(-self.value)

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, Real):
            return NotImplemented
        return type(self)(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._same(other):
            return self.value / other.value
        if isinstance(other, bool) or not isinstance(other, Real):
            return NotImplemented
        return type(self)(self.value / other)


class Mm(_Length):
    """A length in millimetres."""

    def into_pt(self) -> "Pt":
        return Pt(self.value * _PT_PER_MM)

    @classmethod
    def from_pt(cls, value: "Pt") -> "Mm":
        return cls(value.value * _MM_PER_PT)


class Pt(_Length):
    """A length in PDF points."""

    @classmethod
    def from_mm(cls, value: Mm) -> "Pt":
        return cls(value.value * _PT_PER_MM)

    def into_mm(self) -> Mm:
        return Mm(self.value * _MM_PER_PT)


@dataclass(frozen=True, order=True)
class Px:
    """A length in whole pixels."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"pixel count must be an integer, not {self.value!r}")
        if self.value < 0:
            raise ValueError(f"pixel count cannot be negative: {self.value}")

    def __add__(self, other):
        if not isinstance(other, Px):
            return NotImplemented
        return Px(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Px):
            return NotImplemented
        return Px(self.value - other.value)

    def into_pt(self, dpi: float) -> Pt:
        """Size in points when printed at the given resolution."""
        return Mm(self.value * (25.4 / dpi)).into_pt()