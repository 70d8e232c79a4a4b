from pdfcanvas.objects import Reference
from pdfcanvas.resources import OCGList, OCGRef, Pattern, PatternList, PatternRef


def test_ocg_ref_name():
    assert OCGRef.from_index(0).name == "MC0"
    assert OCGRef.from_index(9).name == "MC9"


def test_ocg_list_adds_in_order():
    layers = OCGList()
    first = layers.add_ocg(Reference(3))
    second = layers.add_ocg(Reference(4))
    assert first.name == "MC0"
    assert second.name == "MC1"
    assert len(layers) == 2
    assert [obj for _, obj in layers] == [Reference(3), Reference(4)]


def test_ocg_list_to_dict():
    layers = OCGList()
    layers.add_ocg(Reference(3))
    layers.add_ocg(Reference(4))
    assert layers.to_dict() == {"MC0": Reference(3), "MC1": Reference(4)}


def test_empty_ocg_list_to_dict():
    assert OCGList().to_dict() == {}


def test_pattern_ref_name():
    assert PatternRef.from_index(0).name == "PT0"
    assert PatternRef.from_index(5).name == "PT5"


def test_pattern_list_adds():
    patterns = PatternList()
    first = patterns.add_pattern(Pattern())
    second = patterns.add_pattern(Pattern())
    assert first.name == "PT0"
    assert second.name == "PT1"
    assert len(patterns) == 2
    assert "PT1" in patterns


def test_pattern_list_dict_is_empty():
    patterns = PatternList()
    patterns.add_pattern(Pattern())
    assert patterns.to_dict() == {}