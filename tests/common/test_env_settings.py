import logging

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import setup_default_logging


def test_env_int_parses_and_floors(monkeypatch):
    monkeypatch.setenv("IR_TEST_INT", "-4")
    assert env_int("IR_TEST_INT", 3, min_value=0) == 0
    monkeypatch.setenv("IR_TEST_INT", "nope")
    assert env_int("IR_TEST_INT", 3) == 3
    monkeypatch.delenv("IR_TEST_INT")
    assert env_int("IR_TEST_INT") is None


def test_env_bool_accepts_words_and_numbers(monkeypatch):
    monkeypatch.setenv("IR_TEST_BOOL", "yes")
    assert env_bool("IR_TEST_BOOL") is True
    monkeypatch.setenv("IR_TEST_BOOL", "0")
    assert env_bool("IR_TEST_BOOL", True) is False
    monkeypatch.setenv("IR_TEST_BOOL", "maybe")
    assert env_bool("IR_TEST_BOOL", True) is True


def test_env_str_blank_is_default(monkeypatch):
    monkeypatch.setenv("IR_TEST_STR", "   ")
    assert env_str("IR_TEST_STR", "x") == "x"


def test_settings_reload_from_env(monkeypatch):
    monkeypatch.setenv("IR_DEBUG_TRANSFORM", "1")
    monkeypatch.setenv("IR_LOG_LEVEL", "debug")
    monkeypatch.setenv("IR_DEFAULT_MARKS", "1")
    settings.reload_from_env()
    current = settings.get()
    assert current.DEBUG_TRANSFORM is True
    assert current.LOG_LEVEL == "DEBUG"
    assert current.DEFAULT_MARKS == 2


def test_debug_transform_logs_conversions(monkeypatch, caplog):
    from input_range.state import Point, RangeConfig, TrackGeometry
    from input_range.value_transformer import value_from_position

    monkeypatch.setenv("IR_DEBUG_TRANSFORM", "1")
    settings.reload_from_env()
    with caplog.at_level(logging.DEBUG, logger="input_range.value_transformer"):
        value_from_position(RangeConfig(0, 100), TrackGeometry(200), Point(50))
    assert "value_from_position" in caplog.text


def test_setup_default_logging_is_noop_with_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == before + [handler]
    finally:
        root.removeHandler(handler)
