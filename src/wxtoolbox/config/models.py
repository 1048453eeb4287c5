"""
Pydantic models for validating toolbox configuration files.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from collections.abc import Mapping
from typing import Any, Dict, Literal

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class ToolboxConfig(BaseModel):
    """
    Configuration for the toolbox action.

    Attributes:
        variant: Formula set to publish. "standard" is canonical; "legacy"
            reproduces the first release (larger Earth constant, "Unknown"
            compass sentinel, fewer actions).
        compass_points: Default compass resolution (8 or 16) for the CLI.
    """
    variant: Literal["standard", "legacy"] = "standard"
    compass_points: Literal[8, 16] = 16

    model_config = {
        "extra": "forbid",
    }


def parse_config(data: Mapping[str, Any]) -> ToolboxConfig:
    """
    Validate an in-memory configuration mapping.

    Raises:
        ConfigError: If the mapping does not describe a valid configuration.
    """
    raw = _normalize_toml_schema(data)
    try:
        config = ToolboxConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    if config.variant == "legacy":
        logger.warning("Legacy formula variant selected; distances are reported ten times too large")
    return config


def load_config(path: Path | str) -> ToolboxConfig:
    """
    Load and validate a TOML config file into a ToolboxConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated ToolboxConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    return parse_config(raw_data)


def _normalize_toml_schema(data: Any) -> Dict[str, Any]:
    """
    Accept settings either at the top level or inside a [toolbox] table.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration root must be a TOML table/object.")

    normalized = dict(data)
    section = normalized.pop("toolbox", None)
    if section is None:
        return normalized
    if not isinstance(section, Mapping):
        raise ConfigError("[toolbox] must be a table.")
    if normalized:
        keys = ", ".join(sorted(normalized))
        raise ConfigError(f"Keys outside [toolbox] are not supported when the table is present: {keys}")
    return dict(section)
