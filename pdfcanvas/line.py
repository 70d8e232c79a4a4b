"""Open or closed lines and filled polygons built from points and Bezier handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .objects import Operation
from .path import (
    OP_PATH_CONST_3BEZIER_V1,
    OP_PATH_CONST_3BEZIER_V2,
    OP_PATH_CONST_4BEZIER,
    OP_PATH_CONST_LINE_TO,
    OP_PATH_CONST_MOVE_TO,
    OP_PATH_PAINT_END,
    OP_PATH_PAINT_STROKE,
    OP_PATH_PAINT_STROKE_CLOSE,
    PaintMode,
    WindingOrder,
)
from .point import Point

PathPoint = tuple[Point, bool]


def _coords(*points: Point) -> list[float]:
    return [value for p in points for value in (p.x.value, p.y.value)]


def _path_operations(points: Sequence[PathPoint]) -> list[Operation]:
    """Move to the first point, then add straight segments and cubic curves.

    A point flagged True is a Bezier handle; two handles in a row followed by
    at least two more points form a curve.
    """
    first = points[0][0]
    operations = [Operation(OP_PATH_CONST_MOVE_TO, _coords(first))]
    current = 1
    while current < len(points):
        p1, p1_handle = points[current - 1]
        p2, p2_handle = points[current]
        if p1_handle and p2_handle and current + 2 < len(points):
            p3 = points[current + 1][0]
            p4 = points[current + 2][0]
            if p1 == p2:
                operations.append(Operation(OP_PATH_CONST_3BEZIER_V1, _coords(p3, p4)))
            elif p2 == p3:
                operations.append(Operation(OP_PATH_CONST_3BEZIER_V2, _coords(p2, p4)))
            else:
                operations.append(Operation(OP_PATH_CONST_4BEZIER, _coords(p2, p3, p4)))
            current += 3
            continue
        operations.append(Operation(OP_PATH_CONST_LINE_TO, _coords(p2)))
        current += 1
    return operations


@dataclass
class Line:
    """A stroked path through points; each point carries a Bezier-handle flag."""

    points: list[PathPoint] = field(default_factory=list)
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def set_closed(self, is_closed: bool) -> None:
        self.is_closed = is_closed

    def to_operations(self) -> list[Operation]:
        """Content stream operations that stroke this line."""
        if not self.points:
            return []
        operations = _path_operations(self.points)
        paint = OP_PATH_PAINT_STROKE_CLOSE if self.is_closed else OP_PATH_PAINT_STROKE
        operations.append(Operation(paint))
        return operations


@dataclass
class Polygon:
    """A shape made of one or more rings, painted or used as a clipping path."""

    rings: list[list[PathPoint]] = field(default_factory=list)
    mode: PaintMode = PaintMode.FILL
    winding_order: WindingOrder = WindingOrder.NON_ZERO

    def __post_init__(self) -> None:
        self.rings = [list(ring) for ring in self.rings]

    @classmethod
    def _from_points(cls, points: Iterable[PathPoint]) -> "Polygon":
        return cls([list(points)])

    def to_operations(self) -> list[Operation]:
        """Content stream operations that paint or clip this polygon."""
        if not self.rings:
            return []
        operations: list[Operation] = []
        for ring in self.rings:
            if not ring:
                raise ValueError("polygon ring has no points")
            operations.extend(_path_operations(ring))

        if self.mode is PaintMode.CLIP:
            paint = self.winding_order.clip_op()
        elif self.mode is PaintMode.FILL:
            paint = self.winding_order.fill_op()
        elif self.mode is PaintMode.STROKE:
            paint = OP_PATH_PAINT_STROKE_CLOSE
        else:
            paint = self.winding_order.fill_stroke_close_op()
        operations.append(Operation(paint))
        operations.append(Operation(OP_PATH_PAINT_END))
        return operations