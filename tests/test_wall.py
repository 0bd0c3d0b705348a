"""Wall framing extraction and stud takeoff."""

from framers.estimators.base import waste
from framers.estimators.wall import StudBreakdown, WallEstimator, WallParameters, stud_breakdown, stud_label
from framers.human_review import ReviewChecklist
from framers.text import extract_numbers


def _extract(text, review=None):
    return WallEstimator(review=review).extract(text, extract_numbers(text))


def test_defaults_when_nothing_is_said():
    assert _extract("frame a wall") == WallParameters()


def test_studs_scenario_parameters():
    params = _extract("I need studs for a 40 foot wall, 9 feet high, 3 windows and a door")

    assert params == WallParameters(
        length=40, height=9, spacing=16, stud_type="2x6", corners=4, intersections=0, windows=3, doors=1
    )


def test_studs_scenario_takeoff():
    params = _extract("I need studs for a 40 foot wall, 9 feet high, 3 windows and a door")
    result = WallEstimator().calculate(params)

    studs = stud_breakdown(params)
    assert studs.base == 31
    assert studs.removed == 8
    assert studs.king == studs.jack == 8
    assert studs.cripples == 7
    assert studs.corner == 12
    assert studs.total == waste(58) == 64

    assert result.highlight == "64 studs"
    assert result.title == "Wall Framing: 40' x 9' 2x6 (3W / 1D)"
    assert result.lines[0].label == "Total Studs"
    assert "104-5/8\" precut 9'" in result.lines[0].value
    assert result.lines[1].value == "9 pcs (2x6 x 16') = 120 lin.ft"
    headers = [item.value for item in result.lines if item.label == "Header"]
    assert headers == ["Window (~3ft) - 2-2x6"] * 3 + ["Door (~3ft) - 2-2x6"]
    assert not result.error


def test_interior_partition_uses_2x4():
    assert _extract("interior partition 12 feet long").stud_type == "2x4"
    assert _extract("2x4 wall 20 feet").stud_type == "2x4"


def test_24_on_center_spacing_is_not_a_dimension():
    params = _extract("wall 30 feet long 24 on center")

    assert params.spacing == 24
    assert params.length == 30


def test_sixteen_is_never_read_as_a_dimension():
    # A 16' wall reads as the default length: 16 is assumed to be stud spacing.
    assert _extract("a 16 foot wall").length == 40


def test_height_outside_band_keeps_default():
    params = _extract("wall 40 feet long and 30 feet high")

    assert params.length == 40
    assert params.height == 8


def test_explicit_counts():
    params = _extract("wall 36 feet, 2 corners, 2 windows, 2 doors")

    assert params.corners == 2
    assert params.windows == 2
    assert params.doors == 2
    assert params.length == 36


def test_singular_window_mention():
    params = _extract("wall 20 feet with one window")

    assert params.windows == 1
    assert params.doors == 0


def test_counts_are_excluded_from_dimensions():
    params = _extract("wall with 3 windows 28 feet long 10 feet high")

    assert params.length == 28
    assert params.height == 10


def test_review_notes_defaults():
    review = ReviewChecklist()
    _extract("frame a wall", review=review)

    messages = [item.message for item in review.items]
    assert any("corner" in message for message in messages)
    assert any("wall length" in message for message in messages)


def test_stud_labels_by_height():
    assert stud_label(8) == "92-5/8\" precut 8'"
    assert stud_label(9) == "104-5/8\" precut 9'"
    assert stud_label(10) == "116-5/8\" precut 10'"
    assert stud_label(12) == '144" custom'


def test_short_wall_with_many_windows_is_not_clamped():
    params = _extract("a 2 foot wall with 6 windows")
    studs = stud_breakdown(params)

    assert params.length == 2
    assert params.windows == 6
    assert studs.base - studs.removed < 0
    assert studs.total == waste(studs.subtotal)


def test_negative_subtotal_passes_through_waste():
    studs = StudBreakdown(base=1, removed=10, king=0, jack=0, cripples=0, corner=0, intersection=0)

    assert studs.subtotal == -9
    assert studs.total == -9


def test_intersections_line_only_when_present():
    result = WallEstimator().calculate(WallParameters(intersections=2))

    labels = [item.label for item in result.lines]
    assert "T-Intersections" in labels
    assert "T-Intersections" not in [item.label for item in WallEstimator().calculate(WallParameters()).lines]


def test_more_studs_at_16_than_24():
    at_16 = stud_breakdown(WallParameters(spacing=16)).total
    at_24 = stud_breakdown(WallParameters(spacing=24)).total

    assert at_16 > at_24
