import pytest

import centinela.main as main_module
from centinela.cli import parse_args

_ENV_NAMES = (
    "CENTINELA_FAST_INTERVAL_S",
    "CENTINELA_SLOW_INTERVAL_S",
    "CENTINELA_WINDOW_CAPACITY",
    "CENTINELA_RANDOM_SEED",
    "CENTINELA_LOG_LEVEL",
    "CENTINELA_CONSOLE_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "configure_logging", lambda level=None: None)


@pytest.fixture
def console_calls(monkeypatch):
    calls = []

    def fake_run_console(engine, console_format, refresh_s, duration_s=None):
        calls.append({"engine": engine, "format": console_format, "refresh": refresh_s, "duration": duration_s})
        return 0

    monkeypatch.setattr(main_module, "run_console", fake_run_console)
    return calls


@pytest.fixture
def serve_calls(monkeypatch):
    calls = []

    def fake_run(app, **kwargs):
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    return calls


def test_console_engine_uses_cli_options(clean_env, console_calls, serve_calls):
    main_module.main(
        ["--fast-interval", "0.5", "--slow-interval", "4", "--capacity", "3", "--format", "plain", "--duration", "1"]
    )
    assert serve_calls == []
    call = console_calls[0]
    engine = call["engine"]
    assert engine.fast_interval_s == 0.5
    assert engine.slow_interval_s == 4.0
    assert engine.current_window().capacity == 3
    assert not engine.running
    assert call["format"] == "plain"
    assert call["duration"] == 1.0


def test_console_refresh_defaults_to_fast_interval(clean_env, console_calls):
    main_module.main(["--fast-interval", "1.5"])
    assert console_calls[0]["refresh"] == 1.5


def test_console_explicit_refresh(clean_env, console_calls):
    main_module.main(["--refresh", "5"])
    assert console_calls[0]["refresh"] == 5.0


def test_console_defaults_come_from_environment(clean_env, console_calls, monkeypatch):
    monkeypatch.setenv("CENTINELA_WINDOW_CAPACITY", "4")
    monkeypatch.setenv("CENTINELA_FAST_INTERVAL_S", "0.25")
    main_module.main([])
    engine = console_calls[0]["engine"]
    assert engine.current_window().capacity == 4
    assert console_calls[0]["refresh"] == 0.25


def test_serve_passes_cli_engine_to_web_app(clean_env, console_calls, serve_calls):
    main_module.main(
        ["--serve", "--fast-interval", "0.5", "--capacity", "3", "--host", "0.0.0.0", "--port", "9001"]
    )
    assert console_calls == []
    call = serve_calls[0]
    engine = call["app"].state.engine
    assert engine.fast_interval_s == 0.5
    assert engine.current_window().capacity == 3
    assert not engine.running
    assert call["host"] == "0.0.0.0"
    assert call["port"] == 9001


@pytest.mark.parametrize(
    "argv",
    [
        ["--refresh", "-1"],
        ["--refresh", "0"],
        ["--capacity", "0"],
        ["--fast-interval", "0"],
        ["--slow-interval", "-3"],
        ["--fast-interval", "abc"],
        ["--duration", "-1"],
        ["--log-level", "foo"],
    ],
)
def test_invalid_cli_values_exit_with_usage_error(clean_env, argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(argv)
    assert exc_info.value.code == 2
    assert argv[0] in capsys.readouterr().err


def test_log_level_is_case_insensitive(clean_env):
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_zero_duration_is_accepted(clean_env):
    assert parse_args(["--duration", "0"]).duration == 0.0
