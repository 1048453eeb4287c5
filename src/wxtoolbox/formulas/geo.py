"""
Geographic helpers: great-circle distance and compass bearings.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Sequence

from . import _numeric

logger = logging.getLogger(__name__)

# 3958.75 statute miles, doubled, at 1609 m per mile.
EARTH_DIAMETER_M = 3958.75 * 2 * 1609
# Constant used by the first toolbox release; ten times too large.
LEGACY_EARTH_DIAMETER_M = 3958.75 * 2 * 16090

COMPASS_SENTINEL = "-"
LEGACY_COMPASS_SENTINEL = "Unknown"

_COMPASS_16 = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)
_COMPASS_8 = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

_COMPASS_LABELS: Dict[int, Sequence[str]] = {
    16: _COMPASS_16,
    8: _COMPASS_8,
}


def great_circle_distance(
    lat_a: float,
    lng_a: float,
    lat_b: float,
    lng_b: float,
    diameter_m: float = EARTH_DIAMETER_M,
) -> float:
    """
    Haversine distance between two points given in decimal degrees.

    Args:
        lat_a: Latitude of the first point.
        lng_a: Longitude of the first point.
        lat_b: Latitude of the second point.
        lng_b: Longitude of the second point.
        diameter_m: Sphere diameter; defaults to the Earth's.

    Returns:
        Distance between the two points in meters; NaN for non-finite
        coordinates.
    """
    d_lat = _numeric.sin(math.radians(lat_b - lat_a) / 2) ** 2
    d_lng = _numeric.sin(math.radians(lng_b - lng_a) / 2) ** 2
    a = d_lat + _numeric.cos(math.radians(lat_a)) * _numeric.cos(math.radians(lat_b)) * d_lng
    # Rounding can push `a` a hair above 1 for antipodal points.
    return diameter_m * math.atan2(_numeric.sqrt(a), _numeric.sqrt(max(0.0, 1 - a)))


def legacy_great_circle_distance(lat_a: float, lng_a: float, lat_b: float, lng_b: float) -> float:
    return great_circle_distance(lat_a, lng_a, lat_b, lng_b, diameter_m=LEGACY_EARTH_DIAMETER_M)


def bearing_to_compass(bearing: float, points: int = 16, sentinel: str = COMPASS_SENTINEL) -> str:
    """
    Convert a bearing in degrees into a compass label.

    Bearings in (-180, 0) are folded into [180, 360). Anything above 360 or
    below -180 (or NaN) returns `sentinel`. 360 itself is accepted and maps
    to "N".

    Raises:
        ValueError: If `points` is not 8 or 16.
    """
    try:
        labels = _COMPASS_LABELS[points]
    except KeyError:
        raise ValueError(f"Unsupported compass resolution: {points} (expected 8 or 16)") from None

    value = float(bearing)
    if -180 < value < 0:
        value += 360.0
    if not -180 <= value <= 360:
        logger.debug("Bearing %s out of range; returning %r", bearing, sentinel)
        return sentinel

    step = 360.0 / len(labels)
    index = int(math.floor(((value + step / 2) % 360) / step))
    return labels[index % len(labels)]


def bearing_to_compass16(bearing: float) -> str:
    return bearing_to_compass(bearing, points=16)


def bearing_to_compass8(bearing: float) -> str:
    return bearing_to_compass(bearing, points=8)


def deg_to_compass(bearing: float) -> str:
    """16-point conversion reporting out-of-range bearings as "Unknown"."""
    return bearing_to_compass(bearing, points=16, sentinel=LEGACY_COMPASS_SENTINEL)


def angle_difference(bearing1: float, bearing2: float) -> float:
    """
    Smallest angle between two bearings, in degrees.

    Symmetric and zero for equal bearings; within [0, 180] for bearings less
    than a full turn apart.
    """
    return 180 - abs(abs(bearing2 - bearing1) - 180)
