import pytest

from framers.classifier import Category, classify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I need studs for a 40 foot wall", Category.WALL),
        ("interior wall 12 feet", Category.WALL),
        ("partition between the bedrooms", Category.WALL),
        ("floor joists for a 28 by 14 room", Category.FLOOR),
        ("subfloor system", Category.FLOOR),
        ("roof rafters, 30 wide", Category.ROOF),
        ("gable end 24 wide", Category.ROOF),
        ("OSB sheathing for 1200 square feet", Category.SHEATHING),
        ("plywood sheets", Category.SHEATHING),
        ("concrete footing 40 feet long", Category.CONCRETE),
        ("pour a 20 by 20 slab", Category.CONCRETE),
        ("garage pad", Category.CONCRETE),
    ],
)
def test_keyword_groups(text, expected):
    assert classify(text) is expected


def test_wall_terms_win_over_floor_terms():
    assert classify("framing an exterior wall that sits on the floor joists") is Category.WALL
    assert classify("wall studs over 2x10 joists") is Category.WALL


def test_floor_terms_win_over_concrete():
    assert classify("joists over a concrete foundation") is Category.FLOOR


def test_loose_fallback_order():
    assert classify("a 30 foot wall") is Category.WALL
    assert classify("new floor 20 by 30") is Category.FLOOR
    assert classify("the floor and the wall") is Category.WALL


def test_roof_word_matches_before_sheathing():
    assert classify("roof sheathing for the garage") is Category.ROOF


def test_unrecognized():
    assert classify("what's the weather today") is Category.UNRECOGNIZED
    assert classify("") is Category.UNRECOGNIZED
