import math

import pytest

from wxtoolbox.formulas import (
    EARTH_DIAMETER_M,
    LEGACY_EARTH_DIAMETER_M,
    angle_difference,
    bearing_to_compass,
    bearing_to_compass8,
    bearing_to_compass16,
    deg_to_compass,
    great_circle_distance,
    legacy_great_circle_distance,
)

PARIS = (48.8566, 2.3522)
LONDON = (51.5074, -0.1278)


def test_distance_paris_london() -> None:
    assert great_circle_distance(*PARIS, *LONDON) == pytest.approx(343_500, rel=0.01)


def test_distance_is_symmetric_and_zero_for_same_point() -> None:
    assert great_circle_distance(*PARIS, *LONDON) == great_circle_distance(*LONDON, *PARIS)
    assert great_circle_distance(*PARIS, *PARIS) == 0
    assert great_circle_distance(-33.9, 151.2, -33.9, 151.2) == 0


def test_distance_one_degree_of_latitude() -> None:
    expected = EARTH_DIAMETER_M * math.radians(1) / 2
    assert great_circle_distance(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected)


def test_distance_antipodal_points_is_half_circumference() -> None:
    assert great_circle_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(EARTH_DIAMETER_M * math.pi / 2)


def test_legacy_distance_is_ten_times_standard() -> None:
    assert LEGACY_EARTH_DIAMETER_M == pytest.approx(EARTH_DIAMETER_M * 10)
    standard = great_circle_distance(*PARIS, *LONDON)
    assert legacy_great_circle_distance(*PARIS, *LONDON) == pytest.approx(standard * 10)


@pytest.mark.parametrize(
    ("bearing", "expected"),
    [
        (0, "N"),
        (11.24, "N"),
        (11.25, "NNE"),
        (90, "E"),
        (180, "S"),
        (247.5, "WSW"),
        (359, "N"),
        (360, "N"),
        (-90, "W"),
        (-22.5, "NNW"),
        (-180, "S"),
    ],
)
def test_bearing_to_compass16(bearing: float, expected: str) -> None:
    assert bearing_to_compass16(bearing) == expected


@pytest.mark.parametrize("bearing", [-190, -180.01, 361, 720, math.nan, math.inf])
def test_bearing_out_of_range_returns_sentinel(bearing: float) -> None:
    assert bearing_to_compass16(bearing) == "-"
    assert bearing_to_compass8(bearing) == "-"
    assert deg_to_compass(bearing) == "Unknown"


@pytest.mark.parametrize(
    ("bearing", "expected"),
    [(0, "N"), (22.4, "N"), (22.5, "NE"), (45, "NE"), (135, "SE"), (-45, "NW"), (337.5, "N"), (360, "N")],
)
def test_bearing_to_compass8(bearing: float, expected: str) -> None:
    assert bearing_to_compass8(bearing) == expected


def test_deg_to_compass_matches_sixteen_points_in_range() -> None:
    for bearing in range(-179, 361, 7):
        assert deg_to_compass(bearing) == bearing_to_compass16(bearing)


def test_custom_sentinel_and_bad_resolution() -> None:
    assert bearing_to_compass(500, points=8, sentinel="?") == "?"
    with pytest.raises(ValueError):
        bearing_to_compass(10, points=4)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [(0, 0, 0), (10, 350, 20), (350, 10, 20), (0, 180, 180), (90, 270, 180), (45, 90, 45), (-10, 10, 20)],
)
def test_angle_difference(first: float, second: float, expected: float) -> None:
    assert angle_difference(first, second) == pytest.approx(expected)


def test_angle_difference_symmetric_and_bounded() -> None:
    for first in range(0, 360, 17):
        for second in range(0, 360, 23):
            diff = angle_difference(first, second)
            assert diff == angle_difference(second, first)
            assert 0 <= diff <= 180


@pytest.mark.parametrize(
    "point",
    [
        (math.inf, 0.0, 0.0, 0.0),
        (0.0, -math.inf, 0.0, 0.0),
        (0.0, 0.0, math.nan, 0.0),
        (0.0, 0.0, 0.0, math.nan),
    ],
)
def test_distance_non_finite_coordinates_return_nan(point) -> None:
    assert math.isnan(great_circle_distance(*point))

