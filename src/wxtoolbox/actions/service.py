"""
Host-facing action service: publishes the registry and tracks configuration.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from ..config import ToolboxConfig, parse_config
from .registry import ActionRegistry, FormulaVariant, build_registry

logger = logging.getLogger(__name__)


class ToolboxActionService:
    """
    Registers the toolbox actions with a host scripting engine.

    `properly_configured` becomes true once a configuration has been delivered
    through `updated`; actions stay callable either way.
    """

    def __init__(self) -> None:
        self.properly_configured = False
        self.config = ToolboxConfig()
        self.registry: ActionRegistry = build_registry(FormulaVariant.STANDARD)

    def action_names(self) -> List[str]:
        return self.registry.names()

    def call(self, name: str, *args: Any) -> Any:
        return self.registry.call(name, *args)

    def activate(self) -> None:
        logger.info("Toolbox action activated with %d actions", len(self.registry))

    def deactivate(self) -> None:
        logger.info("Toolbox action deactivated")

    def updated(self, config: Optional[Union[ToolboxConfig, Mapping[str, Any]]]) -> None:
        """
        Apply a configuration pushed by the host.

        A `None` config is ignored. Anything else marks the service as
        configured and rebuilds the registry for the selected variant.

        Raises:
            ConfigError: If a mapping config fails validation.
        """
        if config is None:
            logger.debug("Received empty configuration; keeping current state")
            return
        if not isinstance(config, ToolboxConfig):
            config = parse_config(config)
        self.config = config
        self.registry = build_registry(config.variant)
        self.properly_configured = True
        logger.info("Toolbox configured (variant=%s)", config.variant)
