"""
Explicit name -> callable table published to the host rule engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Tuple

from .. import formulas

logger = logging.getLogger(__name__)


class FormulaVariant(str, Enum):
    STANDARD = "standard"
    LEGACY = "legacy"


class UnknownActionError(KeyError):
    """Raised when the host asks for an action that is not registered."""


@dataclass(frozen=True)
class ActionParam:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Action:
    """
    A documented callable exposed to rule scripts.

    Attributes:
        name: Lookup name used by the host.
        func: The formula to invoke with positional arguments.
        description: One-line summary shown to script authors.
        returns: Description of the returned value.
        params: Positional parameters in call order.
    """
    name: str
    func: Callable[..., Any]
    description: str
    returns: str
    params: Tuple[ActionParam, ...] = field(default_factory=tuple)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)


class ActionRegistry:
    """Ordered registry of actions, looked up by name."""

    def __init__(self) -> None:
        self._actions: Dict[str, Action] = {}

    def register(self, action: Action) -> Action:
        if action.name in self._actions:
            raise ValueError(f"Action already registered: {action.name}")
        self._actions[action.name] = action
        return action

    def get(self, name: str) -> Action:
        try:
            return self._actions[name]
        except KeyError:
            raise UnknownActionError(name) from None

    def call(self, name: str, *args: Any) -> Any:
        action = self.get(name)
        result = action(*args)
        logger.debug("%s%s -> %r", name, args, result)
        return result

    def names(self) -> List[str]:
        return list(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)


def _params(*names: str) -> Tuple[ActionParam, ...]:
    return tuple(ActionParam(name) for name in names)


_DISTANCE = dict(
    description="Compute the distance between two points",
    returns="distance between the two points in meters",
    params=_params("Point a Latitude", "Point a Longitude", "Point b Latitude", "Point b Longitude"),
)

_HUMIDEX = Action(
    "get_humidex",
    formulas.humidex,
    "Compute the Humidex index given temperature and hygrometry",
    "Humidex index value",
    _params("Temperature", "Relative hygro level"),
)

_BEAUFORT = Action(
    "get_beaufort_index",
    formulas.beaufort_index,
    "Compute the Beaufort scale for a given wind speed",
    "Beaufort Index between 0 and 12",
    _params("WindSpeed"),
)

_SEA_LEVEL_PRESSURE = Action(
    "get_sea_level_pressure",
    formulas.sea_level_pressure,
    "Compute the Sea Level Pressure",
    "Equivalent Sea Level pressure",
    (
        ActionParam("pressure", "absolute pressure hPa"),
        ActionParam("temperature", "temperature (°C)"),
        ActionParam("altitude", "Altitude in meter"),
    ),
)

_COMPASS_DOC = dict(
    description="Transform an orientation angle to its cardinal string equivalent",
    returns="String representing the direction",
    params=_params("Bearing angle"),
)


def _standard_actions() -> List[Action]:
    return [
        Action("get_distance", formulas.great_circle_distance, **_DISTANCE),
        _HUMIDEX,
        _BEAUFORT,
        Action("bearing_to_compass16", formulas.bearing_to_compass16, **_COMPASS_DOC),
        Action("bearing_to_compass8", formulas.bearing_to_compass8, **_COMPASS_DOC),
        _SEA_LEVEL_PRESSURE,
        Action(
            "get_angle_diff",
            formulas.angle_difference,
            "Compute the difference between two bearings",
            "Angle difference",
            _params("first bearing", "second bearing"),
        ),
        Action(
            "sager_pressure_trend",
            formulas.sager_pressure_trend,
            "Set pressure evolution trend according to Sager Algorithm",
            "Number representing pressure trend",
            _params("Actual pressure value", "Past pressure value"),
        ),
        Action(
            "sager_pressure_level",
            formulas.sager_pressure_level,
            "Transforms pressure value (hPa) to Sager pressure scales",
            "Sager pressure level",
            _params("Actual pressure value"),
        ),
        Action(
            "sager_cloud_level",
            formulas.sager_cloud_level,
            "Converts a cloud percentage into Sager scale",
            "Sager cloud level",
            _params("Percent of cloud coverage", "Is it raining ?"),
        ),
    ]


def _legacy_actions() -> List[Action]:
    return [
        Action("get_distance", formulas.legacy_great_circle_distance, **_DISTANCE),
        _HUMIDEX,
        _BEAUFORT,
        Action("deg_to_compass", formulas.deg_to_compass, **_COMPASS_DOC),
        _SEA_LEVEL_PRESSURE,
    ]


def build_registry(variant: FormulaVariant | str = FormulaVariant.STANDARD) -> ActionRegistry:
    """
    Build the action table published to the host at startup.

    Args:
        variant: Which formula set to publish.

    Returns:
        A populated ActionRegistry.
    """
    variant = FormulaVariant(variant)
    actions = _legacy_actions() if variant is FormulaVariant.LEGACY else _standard_actions()
    registry = ActionRegistry()
    for action in actions:
        registry.register(action)
    logger.debug("Built %s registry with %d actions", variant.value, len(registry))
    return registry
