from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from wxtoolbox.config import settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Keep WXTOOLBOX_* variables from the developer's shell out of the tests.
    """
    monkeypatch.delenv("WXTOOLBOX_CONFIG", raising=False)
    monkeypatch.delenv("WXTOOLBOX_LOG_LEVEL", raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


@pytest.fixture
def write_config(tmp_path: Path):
    """
    Return a helper that writes a TOML config file and returns its path.
    """

    def _write(body: str, name: str = "toolbox.toml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def legacy_config(write_config) -> Path:
    return write_config(
        """
        [toolbox]
        variant = "legacy"
        """
    )
