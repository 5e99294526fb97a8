import logging

import pytest

from kmehr.logger import LOGGER_NAME, LogLevel, get_log_level_from_env, get_logger, log_info


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_log_level_defaults_to_info() -> None:
    assert get_log_level_from_env() is LogLevel.INFO


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", LogLevel.DEBUG), (" ERROR ", LogLevel.ERROR), ("30", LogLevel.WARN)],
)
def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: LogLevel) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert get_log_level_from_env() is expected


@pytest.mark.parametrize("raw", ["verbose", "15"])
def test_bad_log_level_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert get_log_level_from_env(LogLevel.WARN) is LogLevel.WARN


def test_get_logger_configures_once() -> None:
    first = get_logger(LogLevel.DEBUG)
    second = get_logger()
    assert first is second is logging.getLogger(LOGGER_NAME)
    assert len(first.handlers) == 1
    assert not first.propagate
    assert second.level == LogLevel.INFO


def test_messages_are_prefixed_with_caller() -> None:
    handler = ListHandler()
    logger = get_logger()
    logger.addHandler(handler)
    try:
        log_info("catalog loaded")
    finally:
        logger.removeHandler(handler)
    assert handler.messages == [
        "tests/test_logger.py:test_messages_are_prefixed_with_caller - catalog loaded"
    ]
