"""
Core package for the weather toolbox rule-script actions.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("wxtoolbox")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
