from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import dotenv_values
from pydantic import ValidationError

import dashboard.app as dashboard_app
import dashboard.settings as settings_module
from dashboard.settings import DEFAULT_LOG_PATH, Settings


ENV_VARS = [
    "HOST",
    "PORT",
    "LOG_PATH",
    "TAIL_WINDOW",
    "STATIC_DIR",
    "DATA_RATE_LIMIT",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # A developer .env must not leak into os.environ during tests.
    monkeypatch.setattr(settings_module, "load_dotenv", lambda *args, **kwargs: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_producer_contract():
    settings = Settings.from_env()

    assert settings.port == 3000
    assert settings.tail_window == 60
    assert settings.log_path == DEFAULT_LOG_PATH
    assert settings.log_path.parts[-2:] == (".taskmgrr_data", "history_graph.json")


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("TAIL_WINDOW", "10")
    monkeypatch.setenv("LOG_PATH", str(tmp_path / "h.json"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.port == 8080
    assert settings.tail_window == 10
    assert settings.log_path == tmp_path / "h.json"
    assert settings.log_level == "DEBUG"


def test_home_is_expanded(monkeypatch):
    monkeypatch.setenv("LOG_PATH", "~/custom/history.json")

    settings = Settings.from_env()

    assert settings.log_path == Path.home() / "custom" / "history.json"


@pytest.mark.parametrize("window", ["0", "-5", "many"])
def test_invalid_tail_window_rejected(monkeypatch, window):
    monkeypatch.setenv("TAIL_WINDOW", window)

    with pytest.raises(ValidationError):
        Settings.from_env()


def test_cli_overrides_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(
        dashboard_app.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs)
    )

    dashboard_app.main(["--host", "0.0.0.0", "--port", "8123"])

    assert calls == [{"host": "0.0.0.0", "port": 8123}]


def test_cli_port_out_of_range_is_rejected(monkeypatch):
    calls = []
    monkeypatch.setattr(
        dashboard_app.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs)
    )

    with pytest.raises(ValidationError):
        dashboard_app.main(["--port", "70000"])

    assert calls == []


def test_env_example_leaves_static_dir_to_the_default():
    example = Path(__file__).resolve().parents[1] / ".env.example"

    values = dotenv_values(example)

    assert "STATIC_DIR" not in values
    assert values["DATA_RATE_LIMIT"] == "120/minute"
