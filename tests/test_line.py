import pytest

from pdfcanvas.line import Line, Polygon
from pdfcanvas.path import PaintMode, WindingOrder
from pdfcanvas.point import Point
from pdfcanvas.scale import Pt
from pdfcanvas.utils import circle_points


def pt(x, y):
    return Point(Pt(x), Pt(y))


def operators(ops):
    return [op.operator for op in ops]


def test_empty_line_has_no_operations():
    assert Line().to_operations() == []


def test_open_straight_line():
    line = Line([(pt(1, 2), False), (pt(3, 4), False), (pt(5, 6), False)])
    ops = line.to_operations()
    assert operators(ops) == ["m", "l", "l", "S"]
    assert ops[0].operands == [1.0, 2.0]
    assert ops[2].operands == [5.0, 6.0]


def test_set_closed_changes_paint_operator():
    line = Line([(pt(1, 2), False), (pt(3, 4), False)])
    line.set_closed(True)
    assert line.is_closed is True
    assert operators(line.to_operations()) == ["m", "l", "s"]


def test_regular_cubic_curve():
    line = Line([(pt(1, 1), True), (pt(2, 3), True), (pt(4, 5), False), (pt(6, 7), False)])
    ops = line.to_operations()
    assert operators(ops) == ["m", "c", "S"]
    assert ops[1].operands == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0]


def test_curve_with_first_control_on_start():
    line = Line([(pt(1, 1), True), (pt(1, 1), True), (pt(4, 5), False), (pt(6, 7), False)])
    ops = line.to_operations()
    assert operators(ops) == ["m", "v", "S"]
    assert ops[1].operands == [4.0, 5.0, 6.0, 7.0]


def test_curve_with_control_on_end():
    line = Line([(pt(1, 1), True), (pt(2, 3), True), (pt(2, 3), False), (pt(6, 7), False)])
    ops = line.to_operations()
    assert operators(ops) == ["m", "y", "S"]
    assert ops[1].operands == [2.0, 3.0, 6.0, 7.0]


def test_too_few_points_for_curve_falls_back_to_lines():
    line = Line([(pt(1, 1), True), (pt(2, 3), True), (pt(4, 5), False)])
    assert operators(line.to_operations()) == ["m", "l", "l", "S"]


def test_circle_outline():
    line = Line(circle_points(Pt(10), Pt(50), Pt(50)), is_closed=True)
    assert operators(line.to_operations()) == ["m", "c", "l", "c", "l", "c", "l", "c", "s"]


def test_empty_polygon_has_no_operations():
    assert Polygon().to_operations() == []


def test_polygon_fill_default():
    poly = Polygon([[(pt(1, 1), False), (pt(5, 1), False), (pt(5, 5), False)]])
    assert operators(poly.to_operations()) == ["m", "l", "l", "f", "n"]


@pytest.mark.parametrize(
    "mode, winding, paint",
    [
        (PaintMode.CLIP, WindingOrder.NON_ZERO, "W"),
        (PaintMode.CLIP, WindingOrder.EVEN_ODD, "W*"),
        (PaintMode.FILL, WindingOrder.EVEN_ODD, "f*"),
        (PaintMode.STROKE, WindingOrder.NON_ZERO, "s"),
        (PaintMode.FILL_STROKE, WindingOrder.NON_ZERO, "b"),
        (PaintMode.FILL_STROKE, WindingOrder.EVEN_ODD, "b*"),
    ],
)
def test_polygon_paint_modes(mode, winding, paint):
    poly = Polygon([[(pt(1, 1), False), (pt(5, 1), False)]], mode=mode, winding_order=winding)
    assert operators(poly.to_operations())[-2:] == [paint, "n"]


def test_polygon_with_several_rings():
    outer = [(pt(1, 1), False), (pt(9, 1), False), (pt(9, 9), False)]
    inner = [(pt(3, 3), False), (pt(4, 3), False)]
    ops = Polygon([outer, inner]).to_operations()
    assert operators(ops) == ["m", "l", "l", "m", "l", "f", "n"]
    assert ops[3].operands == [3.0, 3.0]


def test_polygon_empty_ring_raises():
    with pytest.raises(ValueError):
        Polygon([[]]).to_operations()