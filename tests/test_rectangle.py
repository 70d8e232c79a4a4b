import pytest

from pdfcanvas.path import (
    OP_PATH_CONST_RECT,
    OP_PATH_PAINT_END,
    OP_PATH_PAINT_STROKE,
    PaintMode,
    WindingOrder,
)
from pdfcanvas.point import Point
from pdfcanvas.rectangle import Rect
from pdfcanvas.scale import Mm


@pytest.fixture
def rect():
    return Rect.from_mm(Mm(10.0), Mm(20.0), Mm(110.0), Mm(70.0))


def test_from_mm_sets_corners(rect):
    assert rect.ll == Point.from_mm(Mm(10.0), Mm(20.0))
    assert rect.ur == Point.from_mm(Mm(110.0), Mm(70.0))
    assert rect.mode is PaintMode.FILL
    assert rect.winding is WindingOrder.NON_ZERO


def test_rect_operands_are_origin_and_size(rect):
    rect_op = rect.to_operations()[0]
    assert rect_op.operator == OP_PATH_CONST_RECT
    assert rect_op.operands == pytest.approx(
        [
            rect.ll.x.value,
            rect.ll.y.value,
            (rect.ur.x - rect.ll.x).value,
            (rect.ur.y - rect.ll.y).value,
        ]
    )


def test_fill_operations(rect):
    ops = rect.to_operations()
    assert [op.operator for op in ops] == [OP_PATH_CONST_RECT, WindingOrder.NON_ZERO.fill_op()]


def test_stroke_operations(rect):
    ops = rect.with_mode(PaintMode.STROKE).to_operations()
    assert [op.operator for op in ops] == [OP_PATH_CONST_RECT, OP_PATH_PAINT_STROKE]


def test_fill_stroke_uses_winding(rect):
    ops = rect.with_mode(PaintMode.FILL_STROKE).with_winding(WindingOrder.EVEN_ODD).to_operations()
    assert ops[-1].operator == WindingOrder.EVEN_ODD.fill_stroke_op()


def test_clip_ends_path(rect):
    ops = rect.with_mode(PaintMode.CLIP).to_operations()
    assert [op.operator for op in ops] == [
        OP_PATH_CONST_RECT,
        WindingOrder.NON_ZERO.clip_op(),
        OP_PATH_PAINT_END,
    ]


def test_with_mode_leaves_original(rect):
    changed = rect.with_mode(PaintMode.CLIP)
    assert rect.mode is PaintMode.FILL
    assert changed.mode is PaintMode.CLIP


def test_equality_ignores_paint_settings(rect):
    other = rect.with_mode(PaintMode.STROKE).with_winding(WindingOrder.EVEN_ODD)
    assert rect == other
    assert hash(rect) == hash(other)