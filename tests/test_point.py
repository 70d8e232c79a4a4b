from pdfcanvas.point import Point
from pdfcanvas.scale import Mm, Pt


def test_from_mm_converts_each_axis():
    p = Point.from_mm(Mm(10.0), Mm(20.0))
    assert p.x == Mm(10.0).into_pt()
    assert p.y == Mm(20.0).into_pt()


def test_equal_points():
    a = Point(Pt(3.0), Pt(4.0))
    b = Point(Pt(3.0), Pt(4.0))
    assert a == b
    assert hash(a) == hash(b)


def test_different_points():
    a = Point(Pt(3.0), Pt(4.0))
    assert (a == Point(Pt(3.0), Pt(5.0))) is False
    assert (a == Point(Pt(2.0), Pt(4.0))) is False


def test_zero_coordinate_never_equal():
    p = Point(Pt(0.0), Pt(4.0))
    assert (p == p) is False


def test_default_is_origin():
    p = Point()
    assert p.x == Pt(0.0)
    assert p.y == Pt(0.0)