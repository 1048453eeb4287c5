"""
IEEE-754 style arithmetic: undefined results come back as NaN or infinity
instead of raising.
"""

from __future__ import annotations

import math


def divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    # Signed zero decides the direction, as in IEEE division.
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if base == 0:
            return math.inf
        return math.nan


def sqrt(value: float) -> float:
    if value < 0:
        return math.nan
    return math.sqrt(value)


def sin(radians: float) -> float:
    return math.sin(radians) if math.isfinite(radians) else math.nan


def cos(radians: float) -> float:
    return math.cos(radians) if math.isfinite(radians) else math.nan
