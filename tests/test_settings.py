import logging
import os

from centinela.cli import parse_args
from centinela.core.logging_config import ContextualFormatter
from centinela.core.settings import get_settings

_ENV_NAMES = (
    "CENTINELA_FAST_INTERVAL_S",
    "CENTINELA_SLOW_INTERVAL_S",
    "CENTINELA_WINDOW_CAPACITY",
    "CENTINELA_RANDOM_SEED",
    "CENTINELA_LOG_LEVEL",
    "CENTINELA_CONSOLE_FORMAT",
)


def _clear_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    settings = get_settings()
    assert settings.fast_interval_s == 2.0
    assert settings.slow_interval_s == 30.0
    assert settings.window_capacity == 7
    assert settings.random_seed is None
    assert settings.log_level == "INFO"
    assert settings.console_format == "rich"


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CENTINELA_FAST_INTERVAL_S", "0.5")
    monkeypatch.setenv("CENTINELA_SLOW_INTERVAL_S", "10")
    monkeypatch.setenv("CENTINELA_WINDOW_CAPACITY", "12")
    monkeypatch.setenv("CENTINELA_RANDOM_SEED", "42")
    monkeypatch.setenv("CENTINELA_LOG_LEVEL", "debug")
    monkeypatch.setenv("CENTINELA_CONSOLE_FORMAT", "JSON")
    settings = get_settings()
    assert settings.fast_interval_s == 0.5
    assert settings.slow_interval_s == 10.0
    assert settings.window_capacity == 12
    assert settings.random_seed == 42
    assert settings.log_level == "DEBUG"
    assert settings.console_format == "json"


def test_invalid_values_fall_back_to_defaults(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CENTINELA_FAST_INTERVAL_S", "-1")
    monkeypatch.setenv("CENTINELA_SLOW_INTERVAL_S", "abc")
    monkeypatch.setenv("CENTINELA_WINDOW_CAPACITY", "0")
    monkeypatch.setenv("CENTINELA_RANDOM_SEED", "x")
    monkeypatch.setenv("CENTINELA_CONSOLE_FORMAT", "html")
    monkeypatch.setenv("CENTINELA_LOG_LEVEL", "verbose")
    settings = get_settings()
    assert settings.fast_interval_s == 2.0
    assert settings.slow_interval_s == 30.0
    assert settings.window_capacity == 7
    assert settings.random_seed is None
    assert settings.log_level == "INFO"
    assert settings.console_format == "rich"


def test_dotenv_file_is_loaded(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("CENTINELA_WINDOW_CAPACITY=5\n", encoding="utf-8")
    try:
        assert get_settings().window_capacity == 5
    finally:
        os.environ.pop("CENTINELA_WINDOW_CAPACITY", None)


def test_cli_defaults_come_from_settings(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CENTINELA_FAST_INTERVAL_S", "1.5")
    args = parse_args(["--capacity", "4"])
    assert args.fast_interval == 1.5
    assert args.capacity == 4
    assert args.serve is False


def test_contextual_formatter_appends_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "Cambio de nivel de alerta", None, None)
    record.alert_level = "CRITICAL"
    record.slope_movement = 10.2
    assert formatter.format(record) == "Cambio de nivel de alerta | alert_level=CRITICAL slope_movement=10.2"
