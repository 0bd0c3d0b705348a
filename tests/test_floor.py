from framers.estimators.base import waste
from framers.estimators.floor import FloorEstimator, FloorParameters
from framers.text import extract_numbers


def _extract(text):
    return FloorEstimator().extract(text, extract_numbers(text))


def test_joist_scenario():
    params = _extract("floor joists for a 28 by 14 room, 2x8, 12 on center")

    assert params == FloorParameters(span=14, width=28, spacing=12, joist_size="2x8")

    result = FloorEstimator().calculate(params)
    assert result.highlight == f"{waste(29)} joists"
    assert result.highlight == "32 joists"
    assert result.title == "Floor Joists: 28' x 14' span, 12\" OC"
    values = dict(result.lines)
    assert values["Floor Joists"] == "32 pcs (2x8 x 14')"
    assert values["Rim Board"] == "7 pcs (2x8 x 16')"
    assert values["Blocking"] == "35 pcs (1 row)"
    assert values["Subfloor"] == "15 sheets (3/4\" T&G, 4'x8')"
    assert values["Floor Area"] == "392 sq.ft"


def test_larger_dimension_is_width_regardless_of_order():
    params = _extract("floor joists 14 by 28")

    assert params.width == 28
    assert params.span == 14


def test_single_dimension_sets_span():
    params = _extract("floor joists 12 foot span")

    assert params.span == 12
    assert params.width == 28


def test_defaults():
    assert _extract("floor joists") == FloorParameters()


def test_joist_sizes_and_spacing():
    assert _extract("2x12 joists").joist_size == "2x12"
    assert _extract("tji joists").joist_size == "TJI"
    assert _extract("i-joist floor").joist_size == "TJI"
    assert _extract("joists 24 oc").spacing == 24
    assert _extract("joists 24 o.c.").spacing == 24


def test_long_span_uses_longest_stock_and_more_blocking():
    result = FloorEstimator().calculate(FloorParameters(span=24, width=20))
    values = dict(result.lines)

    assert values["Floor Joists"].endswith("(2x10 x 20')")
    assert values["Blocking"].endswith("(3 rows)")
