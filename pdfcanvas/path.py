"""Path painting modes, winding rules and their PDF operators."""

from __future__ import annotations

import enum

OP_PATH_CONST_MOVE_TO = "m"
OP_PATH_CONST_LINE_TO = "l"
OP_PATH_CONST_4BEZIER = "c"
OP_PATH_CONST_3BEZIER_V1 = "v"
OP_PATH_CONST_3BEZIER_V2 = "y"
OP_PATH_CONST_RECT = "re"
OP_PATH_CONST_CLIP_NZ = "W"
OP_PATH_CONST_CLIP_EO = "W*"
OP_PATH_PAINT_STROKE = "S"
OP_PATH_PAINT_STROKE_CLOSE = "s"
OP_PATH_PAINT_FILL_NZ = "f"
OP_PATH_PAINT_FILL_EO = "f*"
OP_PATH_PAINT_FILL_STROKE_NZ = "B"
OP_PATH_PAINT_FILL_STROKE_EO = "B*"
OP_PATH_PAINT_FILL_STROKE_CLOSE_NZ = "b"
OP_PATH_PAINT_FILL_STROKE_CLOSE_EO = "b*"
OP_PATH_PAINT_END = "n"


class WindingOrder(enum.Enum):
    """Rule deciding which regions a fill or clip covers. NON_ZERO is the usual choice."""

    EVEN_ODD = "even_odd"
    NON_ZERO = "non_zero"

    def clip_op(self) -> str:
        return OP_PATH_CONST_CLIP_EO if self is WindingOrder.EVEN_ODD else OP_PATH_CONST_CLIP_NZ

    def fill_op(self) -> str:
        return OP_PATH_PAINT_FILL_EO if self is WindingOrder.EVEN_ODD else OP_PATH_PAINT_FILL_NZ

    def fill_stroke_close_op(self) -> str:
        if self is WindingOrder.EVEN_ODD:
            return OP_PATH_PAINT_FILL_STROKE_CLOSE_EO
        return OP_PATH_PAINT_FILL_STROKE_CLOSE_NZ

    def fill_stroke_op(self) -> str:
        if self is WindingOrder.EVEN_ODD:
            return OP_PATH_PAINT_FILL_STROKE_EO
        return OP_PATH_PAINT_FILL_STROKE_NZ


class PaintMode(enum.Enum):
    """How a path is painted. FILL is the usual choice."""

    CLIP = "clip"
    FILL = "fill"
    STROKE = "stroke"
    FILL_STROKE = "fill_stroke"