from __future__ import annotations

import json
import logging
import sys

import pytest

from linguista_security.app.env import Env, get_env, normalize_env, pick
from linguista_security.app.logging import JsonFormatter, _read_format, _read_level, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="linguista_security.security.breach",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JsonFormatter().format(_record()))
    assert payload["message"] == "hello"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "linguista_security.security.breach"
    assert "time" in payload and "pid" in payload


def test_json_formatter_includes_prefix_and_status():
    payload = json.loads(JsonFormatter().format(_record(hash_prefix="5BAA6", status_code=503)))
    assert payload["hash_prefix"] == "5BAA6"
    assert payload["status"] == 503


def test_json_formatter_includes_error_object():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JsonFormatter().format(record))
    assert payload["error"]["type"] == "ValueError"
    assert payload["error"]["message"] == "boom"
    assert "Traceback" in payload["error"]["stack"]


def test_level_and_format_follow_env(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    assert _read_level(Env.PROD) == "INFO"
    assert _read_level(Env.LOCAL) == "DEBUG"
    assert _read_format(Env.PROD) == "json"
    assert _read_format(Env.TEST) == "plain"

    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    assert _read_level(Env.LOCAL) == "WARNING"
    assert _read_format(Env.LOCAL) == "json"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


def test_setup_logging_installs_json_handler(restore_root_logger):
    setup_logging(level="info", fmt="json")
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.parametrize(
    "raw,expected",
    [("prod", Env.PROD), ("Production", Env.PROD), (" dev ", Env.DEV), ("ci", Env.TEST), ("", None), ("mars", None)],
)
def test_normalize_env(raw, expected):
    assert normalize_env(raw) == expected


def test_pick():
    assert pick(prod="a", nonprod="b", env=Env.PROD) == "a"
    assert pick(prod="a", nonprod="b", env=Env.DEV) == "b"


@pytest.fixture
def fresh_env():
    get_env.cache_clear()
    yield
    get_env.cache_clear()


def test_get_env_reads_app_env(monkeypatch, fresh_env):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_env() is Env.PROD
    assert pick(prod="json", nonprod="plain") == "json"


def test_get_env_defaults_to_local(monkeypatch, fresh_env):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_env() is Env.LOCAL


def test_get_env_warns_on_unknown_value(monkeypatch, fresh_env):
    monkeypatch.setenv("APP_ENV", "mars")
    with pytest.warns(RuntimeWarning, match="mars"):
        assert get_env() is Env.LOCAL
