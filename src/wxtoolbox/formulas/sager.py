"""
Sager weathercaster inputs: pressure trend, pressure level and cloud level.

Each helper reduces a raw observation to the small integer scale the Sager
forecasting tables are indexed by.
"""

from __future__ import annotations

from enum import IntEnum


class PressureTrend(IntEnum):
    RISING_RAPIDLY = 1
    RISING_SLOWLY = 2
    NORMAL = 3
    DECREASING_SLOWLY = 4
    DECREASING_RAPIDLY = 5


class CloudLevel(IntEnum):
    CLEAR = 1
    PARTLY_CLOUDY = 2
    MOSTLY_OVERCAST = 3
    OVERCAST = 4
    RAINING = 5


# hPa change over the comparison window, checked in order with `>`.
_TREND_STEPS = (
    (1.7, PressureTrend.RISING_RAPIDLY),
    (0.68, PressureTrend.RISING_SLOWLY),
    (-0.68, PressureTrend.NORMAL),
    (-1.7, PressureTrend.DECREASING_SLOWLY),
)

# Lower bounds (hPa, exclusive) of pressure levels 1..8.
_PRESSURE_LEVELS = (1029.46, 1019.3, 1012.53, 1005.76, 999.0, 988.8, 975.28, 948.19)

_CLOUD_STEPS = (
    (80, CloudLevel.OVERCAST),
    (50, CloudLevel.MOSTLY_OVERCAST),
    (20, CloudLevel.PARTLY_CLOUDY),
)


def sager_pressure_trend(current_hpa: float, historic_hpa: float) -> PressureTrend:
    """
    Classify the pressure evolution between a past and a current reading.
    """
    evolution = current_hpa - historic_hpa
    for threshold, trend in _TREND_STEPS:
        if evolution > threshold:
            return trend
    return PressureTrend.DECREASING_RAPIDLY


def sager_pressure_level(current_hpa: float) -> int:
    """
    Map a sea-level pressure (hPa) onto the 1..8 Sager pressure scale.

    Readings at or below the lowest bound stay on the bottom level (8).
    """
    for level, threshold in enumerate(_PRESSURE_LEVELS, start=1):
        if current_hpa > threshold:
            return level
    return len(_PRESSURE_LEVELS)


def sager_cloud_level(cloud_pct: float, is_raining: bool) -> CloudLevel:
    if is_raining:
        return CloudLevel.RAINING
    for threshold, level in _CLOUD_STEPS:
        if cloud_pct > threshold:
            return level
    return CloudLevel.CLEAR
