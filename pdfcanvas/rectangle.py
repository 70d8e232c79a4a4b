"""Rectangular paths for painting or clipping."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .objects import Operation
from .path import (
    OP_PATH_CONST_RECT,
    OP_PATH_PAINT_END,
    OP_PATH_PAINT_STROKE,
    PaintMode,
    WindingOrder,
)
from .point import Point
from .scale import Mm


@dataclass(frozen=True, eq=False)
class Rect:
    """A rectangle given by its lower left and upper right corners, in points."""

    ll: Point = field(default_factory=Point)
    ur: Point = field(default_factory=Point)
    mode: PaintMode = PaintMode.FILL
    winding: WindingOrder = WindingOrder.NON_ZERO

    @classmethod
    def from_mm(cls, llx: Mm, lly: Mm, urx: Mm, ury: Mm) -> "Rect":
        return cls(Point.from_mm(llx, lly), Point.from_mm(urx, ury))

    def with_mode(self, mode: PaintMode) -> "Rect":
        return dataclasses.replace(self, mode=mode)

    def with_winding(self, winding: WindingOrder) -> "Rect":
        return dataclasses.replace(self, winding=winding)

    def to_operations(self) -> list[Operation]:
        """The content stream operations that draw this rectangle."""
        width = self.ur.x - self.ll.x
        height = self.ur.y - self.ll.y
        rect_op = Operation(
            OP_PATH_CONST_RECT,
            [self.ll.x.value, self.ll.y.value, width.value, height.value],
        )
        if self.mode is PaintMode.CLIP:
            return [rect_op, Operation(self.winding.clip_op()), Operation(OP_PATH_PAINT_END)]
        if self.mode is PaintMode.FILL:
            paint = self.winding.fill_op()
        elif self.mode is PaintMode.STROKE:
            paint = OP_PATH_PAINT_STROKE
        else:
            paint = self.winding.fill_stroke_op()
        return [rect_op, Operation(paint)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.ll == other.ll and self.ur == other.ur

    def __hash__(self) -> int:
        return hash((self.ll, self.ur))