from framers.text import extract_numbers, format_fixed, format_number, normalize, tokenize


def test_feet_markers_collapse_to_bare_numbers():
    text = normalize("40 Foot wall, 9 FEET high, 12ft plate")

    assert "foot" not in text
    assert "feet" not in text
    assert "ft" not in text
    assert extract_numbers("40 Foot wall, 9 FEET high, 12ft plate") == (40.0, 9.0, 12.0)


def test_inch_markers_collapse_to_in_suffix():
    assert "8in " in normalize('8" slab')
    assert "6in " in normalize("6 inches thick")
    assert "4in " in normalize("4 inch")


def test_trailing_single_quote_is_feet():
    assert normalize("12' wall") == "12  wall"


def test_fractions_stay_together_but_count_as_two_numbers():
    tokens = tokenize("roof at 5 / 12 pitch")

    assert "5/12" in tokens.text
    assert tokens.numbers == (5.0, 12.0)


def test_numbers_keep_order_duplicates_and_decimals():
    assert extract_numbers("24 by 24 by 9.5 feet") == (24.0, 24.0, 9.5)


def test_dimension_shorthand_splits_into_numbers():
    assert extract_numbers("2x6 studs") == (2.0, 6.0)


def test_text_without_numbers():
    assert extract_numbers("what's the weather today") == ()


def test_format_number_drops_trailing_zero():
    assert format_number(40.0) == "40"
    assert format_number(0.67) == "0.67"
    assert format_number(9.5) == "9.5"


def test_extract_numbers_matches_tokenize():
    text = "floor 28 by 14, 5/12 and 2x8"
    assert extract_numbers(text) == tokenize(text).numbers


def test_format_fixed_rounds_halves_up():
    assert format_fixed(12.5) == "13"
    assert format_fixed(0.5) == "1"
    assert format_fixed(40.0) == "40"
    assert format_fixed(0.25, 1) == "0.3"
    assert format_fixed(2.0, 2) == "2.00"
