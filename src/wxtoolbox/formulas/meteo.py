"""
Meteorological helper formulas (humidex, Beaufort scale, sea-level pressure).
"""

from __future__ import annotations

from . import _numeric

# Upper bounds (m/s, exclusive) of Beaufort forces 0..11; anything faster is force 12.
_BEAUFORT_LIMITS = (0.3, 1.6, 3.4, 5.5, 8.0, 10.8, 13.9, 17.2, 20.8, 24.5, 28.5, 32.7)

_LAPSE_RATE = 0.0065  # K/m
_KELVIN_OFFSET = 273.15
_BAROMETRIC_EXPONENT = -5.257


def humidex(temperature_c: float, relative_humidity_pct: float) -> float:
    """
    Compute the Humidex index from air temperature and relative humidity.

    See https://en.wikipedia.org/wiki/Humidex. Humidity is expected in
    [0, 100] but is neither clamped nor validated.
    """
    t = float(temperature_c)
    exponent = _numeric.divide(7.5 * t, 237.7 + t)
    vapour_pressure = 6.112 * _numeric.power(10, exponent) * float(relative_humidity_pct) / 100
    return t + 0.555555556 * (vapour_pressure - 10)


def beaufort_index(wind_speed_ms: float) -> int:
    """
    Classify a wind speed (m/s) on the Beaufort scale.

    Returns:
        Force between 0 and 12. Negative speeds are reported as calm (0).
    """
    speed = float(wind_speed_ms)
    for force, limit in enumerate(_BEAUFORT_LIMITS):
        if speed < limit:
            return force
    return len(_BEAUFORT_LIMITS)


def sea_level_pressure(pressure_hpa: float, temperature_c: float, altitude_m: float) -> float:
    """
    Reduce a station pressure to its equivalent sea-level pressure.

    Args:
        pressure_hpa: Absolute (station) pressure in hPa.
        temperature_c: Air temperature at the station in °C.
        altitude_m: Station altitude in meters.

    Returns:
        Equivalent sea-level pressure in hPa. Returns the input unchanged at
        altitude 0; physically impossible inputs yield NaN or infinity.
    """
    x = _LAPSE_RATE * float(altitude_m)
    # No altitude, no correction, whatever the temperature.
    ratio = _numeric.divide(x, float(temperature_c) + x + _KELVIN_OFFSET) if x != 0 else 0.0
    return float(pressure_hpa) * _numeric.power(1 - ratio, _BAROMETRIC_EXPONENT)
