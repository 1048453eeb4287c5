"""
Configuration helpers for the toolbox action.
"""

from .models import ConfigError, ToolboxConfig, load_config, parse_config
from .settings import Settings, get_settings

__all__ = ["ConfigError", "ToolboxConfig", "load_config", "parse_config", "Settings", "get_settings"]
