"""
Stateless geographic and meteorological formulas exposed to rule scripts.
"""

from .geo import (
    COMPASS_SENTINEL,
    EARTH_DIAMETER_M,
    LEGACY_COMPASS_SENTINEL,
    LEGACY_EARTH_DIAMETER_M,
    angle_difference,
    bearing_to_compass,
    bearing_to_compass8,
    bearing_to_compass16,
    deg_to_compass,
    great_circle_distance,
    legacy_great_circle_distance,
)
from .meteo import beaufort_index, humidex, sea_level_pressure
from .sager import CloudLevel, PressureTrend, sager_cloud_level, sager_pressure_level, sager_pressure_trend

__all__ = [
    "COMPASS_SENTINEL",
    "EARTH_DIAMETER_M",
    "LEGACY_COMPASS_SENTINEL",
    "LEGACY_EARTH_DIAMETER_M",
    "angle_difference",
    "bearing_to_compass",
    "bearing_to_compass8",
    "bearing_to_compass16",
    "deg_to_compass",
    "great_circle_distance",
    "legacy_great_circle_distance",
    "beaufort_index",
    "humidex",
    "sea_level_pressure",
    "CloudLevel",
    "PressureTrend",
    "sager_cloud_level",
    "sager_pressure_level",
    "sager_pressure_trend",
]
