import os
from pathlib import Path

from wxtoolbox.config import settings


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("WXTOOLBOX_LOG_LEVEL=debug\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("WXTOOLBOX_LOG_LEVEL", "error")

    settings._load_dotenv()

    assert os.getenv("WXTOOLBOX_LOG_LEVEL") == "debug"


def test_settings_read_from_environment(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "toolbox.toml"
    monkeypatch.setenv("WXTOOLBOX_CONFIG", str(config_path))

    loaded = settings.get_settings()

    assert loaded.config_path == Path(config_path)
    assert loaded.log_level is None
