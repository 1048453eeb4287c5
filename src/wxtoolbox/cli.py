"""
Command line interface for invoking toolbox actions by name.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .actions import ToolboxActionService, UnknownActionError
from .config import ConfigError, ToolboxConfig, get_settings, load_config
from .formulas import COMPASS_SENTINEL, LEGACY_COMPASS_SENTINEL, bearing_to_compass

console = Console()
app = typer.Typer(help="Evaluate the weather toolbox formulas from the command line.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]

_TRUE_WORDS = {"true", "yes", "on"}
_FALSE_WORDS = {"false", "no", "off"}


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Optional[Path]) -> Optional[Path]:
    """Fall back to WXTOOLBOX_CONFIG, then ensure the path exists."""
    if value is None:
        value = get_settings().config_path
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Path) -> ToolboxConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _build_service(config_path: Optional[Path]) -> ToolboxActionService:
    service = ToolboxActionService()
    if config_path is not None:
        service.updated(_load_config_or_exit(config_path))
    return service


def _parse_argument(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    try:
        return float(raw)
    except ValueError:
        raise typer.BadParameter(f"Expected a number or true/false, got {raw!r}") from None


def _format_result(value: Any) -> str:
    if isinstance(value, IntEnum):
        return f"{int(value)} ({value.name.replace('_', ' ').lower()})"
    return str(value)


_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to configuration TOML (defaults to $WXTOOLBOX_CONFIG).",
    callback=_resolve_config_path,
)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show wxtoolbox version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]wxtoolbox[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]wxtoolbox[/] is ready. Run [cyan]wxtoolbox list[/] to see the available actions.",
        )


@app.command("list")
def list_actions(config: Optional[Path] = _CONFIG_OPTION) -> None:
    """
    Show every action published to rule scripts.
    """
    service = _build_service(config)
    table = Table(title=f"Toolbox actions ({service.config.variant})")
    table.add_column("Action", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")
    table.add_column("Returns")
    for action in service.registry:
        params = ", ".join(param.name for param in action.params)
        table.add_row(action.name, params, action.description, action.returns)
    console.print(table)


@app.command(context_settings={"ignore_unknown_options": True})
def call(
    name: str = typer.Argument(..., help="Action name, e.g. get_beaufort_index."),
    args: Optional[List[str]] = typer.Argument(None, help="Positional numeric or true/false arguments."),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """
    Invoke a single action and print its result.
    """
    service = _build_service(config)
    try:
        action = service.registry.get(name)
    except UnknownActionError as exc:
        console.print(f"[bold red]Unknown action:[/] {name}")
        raise typer.Exit(code=1) from exc

    values = [_parse_argument(raw) for raw in args or []]
    if len(values) != action.arity:
        params = ", ".join(param.name for param in action.params)
        console.print(f"[bold red]{name}[/] expects {action.arity} argument(s): {params}")
        raise typer.Exit(code=1)

    result = service.call(name, *values)
    console.print(_format_result(result), markup=False, highlight=False)


@app.command(context_settings={"ignore_unknown_options": True})
def compass(
    bearing: float = typer.Argument(..., help="Bearing in degrees."),
    points: Optional[int] = typer.Option(
        None,
        "--points",
        "-p",
        help="Compass resolution (8 or 16); defaults to compass_points from the config.",
    ),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """
    Print the compass label for a bearing using the configured variant.
    """
    service = _build_service(config)
    resolution = points if points is not None else service.config.compass_points
    if resolution not in (8, 16):
        raise typer.BadParameter("--points must be 8 or 16")
    sentinel = LEGACY_COMPASS_SENTINEL if service.config.variant == "legacy" else COMPASS_SENTINEL
    console.print(bearing_to_compass(bearing, points=resolution, sentinel=sentinel), markup=False, highlight=False)


@app.command("config-check")
def config_check(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to configuration TOML.",
        callback=_resolve_config_path,
    ),
) -> None:
    """
    Validate a configuration file and report the active formula variant.
    """
    toolbox_config = _load_config_or_exit(config)
    console.print(
        f"[bold green]OK[/] variant={toolbox_config.variant} compass_points={toolbox_config.compass_points}"
    )


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
