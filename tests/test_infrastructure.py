import logging
from pathlib import Path

from apps.streamlit import runtime
from roicalc.infrastructure import config
from roicalc.infrastructure.logging_setup import LOG_FORMAT, configure_logging


def test_env_bool_is_tolerant(monkeypatch):
    monkeypatch.delenv("ROI_TEST_FLAG", raising=False)
    assert config._env_bool("ROI_TEST_FLAG", True) is True

    for raw in ("0", "false", "No", " off ", ""):
        monkeypatch.setenv("ROI_TEST_FLAG", raw)
        assert config._env_bool("ROI_TEST_FLAG", True) is False

    monkeypatch.setenv("ROI_TEST_FLAG", "yes")
    assert config._env_bool("ROI_TEST_FLAG", False) is True


def test_settings_defaults():
    settings = config.Settings()
    assert settings.PAGE_TITLE
    assert isinstance(settings.SHOW_RAW_METRICS, bool)


def test_configure_logging_uses_requested_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging("debug")
    assert captured == {"level": logging.DEBUG, "format": LOG_FORMAT}

    configure_logging("nonsense")
    assert captured["level"] == logging.INFO


def test_prepare_runtime_loads_env_from_project_root(monkeypatch):
    loaded = []
    monkeypatch.setattr(runtime, "load_dotenv", loaded.append)

    root = runtime.prepare_runtime()

    assert root == Path(__file__).resolve().parents[1]
    assert (root / "bootstrap.py").exists()
    assert loaded == [root / ".env"]


def test_chdir_to_root_returns_previous_cwd(monkeypatch, tmp_path):
    start = tmp_path / "elsewhere"
    start.mkdir()
    monkeypatch.chdir(start)

    previous = runtime.chdir_to_root(tmp_path)

    assert previous.resolve() == start.resolve()
    assert Path.cwd().resolve() == tmp_path.resolve()
