"""
Action registry and service exposing the formulas to rule scripts.
"""

from .registry import Action, ActionParam, ActionRegistry, FormulaVariant, UnknownActionError, build_registry
from .service import ToolboxActionService

__all__ = [
    "Action",
    "ActionParam",
    "ActionRegistry",
    "FormulaVariant",
    "UnknownActionError",
    "build_registry",
    "ToolboxActionService",
]
