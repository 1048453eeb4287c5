import pytest

from wxtoolbox.formulas import CloudLevel, PressureTrend, sager_cloud_level, sager_pressure_level, sager_pressure_trend


@pytest.mark.parametrize(
    ("current", "historic", "expected"),
    [
        (1015.0, 1013.0, PressureTrend.RISING_RAPIDLY),
        (1.7, 0.0, PressureTrend.RISING_SLOWLY),
        (1014.0, 1013.0, PressureTrend.RISING_SLOWLY),
        (1013.5, 1013.0, PressureTrend.NORMAL),
        (1013.0, 1013.0, PressureTrend.NORMAL),
        (1012.0, 1013.0, PressureTrend.DECREASING_SLOWLY),
        (1010.0, 1013.0, PressureTrend.DECREASING_RAPIDLY),
    ],
)
def test_sager_pressure_trend(current: float, historic: float, expected: PressureTrend) -> None:
    assert sager_pressure_trend(current, historic) == expected


def test_sager_pressure_trend_values_are_plain_ints() -> None:
    assert sager_pressure_trend(1020.0, 1000.0) == 1
    assert sager_pressure_trend(1000.0, 1020.0) == 5


@pytest.mark.parametrize(
    ("pressure", "expected"),
    [
        (1030, 1),
        (1029.46, 2),
        (1020, 2),
        (1015, 3),
        (1010, 4),
        (1000, 5),
        (999, 6),
        (990, 6),
        (980, 7),
        (950, 8),
        (948.19, 8),
        (900, 8),
    ],
)
def test_sager_pressure_level(pressure: float, expected: int) -> None:
    assert sager_pressure_level(pressure) == expected


@pytest.mark.parametrize("cloud", [0, 10, 50, 90, 100])
def test_sager_cloud_level_raining_wins(cloud: int) -> None:
    assert sager_cloud_level(cloud, True) == CloudLevel.RAINING == 5


@pytest.mark.parametrize(
    ("cloud", "expected"),
    [(10, 1), (20, 1), (21, 2), (50, 2), (51, 3), (80, 3), (81, 4), (100, 4)],
)
def test_sager_cloud_level_dry(cloud: int, expected: int) -> None:
    assert sager_cloud_level(cloud, False) == expected
