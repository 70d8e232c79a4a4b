import math

import pytest

from pdfcanvas.scale import Mm, Pt, Px


def test_point_to_mm_conversion():
    assert Mm.from_pt(Pt(1.0)) == Mm(0.352778)
    assert Pt(15.0).into_mm() == Mm(5.29167)


def test_mm_to_point_conversion():
    assert Mm(1.0).into_pt() == Pt(2.83464745483286)
    assert Pt.from_mm(Mm(23.0)) == Pt(65.1969)


def test_mm_eq_zero_check():
    mm1 = Mm(0.0)
    mm2 = Mm(0.0)
    assert mm1 == mm2
    assert mm1 == Mm(0.0)
    assert mm2 == Mm(0.0)


def test_max_mm():
    assert max([Mm(0.0), Mm(1.0), Mm(2.0)]) == Mm(2.0)


def test_min_mm():
    assert min([Mm(0.0), Mm(1.0), Mm(2.0)]) == Mm(0.0)


def test_pt_eq_zero_check():
    pt1 = Pt(0.0)
    pt2 = Pt(0.0)
    assert pt1 == pt2
    assert pt1 == Pt(0.0)
    assert pt2 == Pt(0.0)


def test_max_pt():
    assert max([Pt(0.0), Pt(1.0), Pt(2.0)]) == Pt(2.0)


def test_min_pt():
    assert min([Pt(0.0), Pt(1.0), Pt(2.0)]) == Pt(0.0)


def test_nan_and_infinity_never_equal():
    assert (Pt(math.nan) == Pt(math.nan)) is False
    assert (Mm(math.inf) == Mm(math.inf)) is False


def test_different_units_not_equal():
    assert (Mm(1.0) == Pt(1.0)) is False


def test_round_trip_between_units():
    original = Mm(42.5)
    assert original.into_pt().into_mm() == original


def test_addition_and_subtraction_invert():
    a, b = Pt(12.25), Pt(3.5)
    assert (a + b) - b == a


def test_division_by_same_unit_gives_ratio():
    a = Mm(7.5)
    assert a / a == pytest.approx(1.0)
    assert isinstance(a / a, float)


def test_multiply_then_divide_by_scalar():
    a = Pt(9.0)
    assert (a * 4) / 4 == a
    assert 4 * a == a * 4


def test_equal_values_hash_equal():
    assert hash(Mm(1.0001)) == hash(Mm(1.0))
    assert Mm(1.0001) == Mm(1.0)


def test_px_into_pt_matches_millimetre_conversion():
    assert Px(10).into_pt(25.4) == Mm(10.0).into_pt()


def test_px_add_and_order():
    assert Px(2) + Px(3) > Px(4)


def test_px_negative_rejected():
    with pytest.raises(ValueError):
        Px(-1)
    with pytest.raises(ValueError):
        Px(3) - Px(5)