"""Unit tests for the logging setup."""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from parasempre.logging import (
    LoggingSettings,
    ThirdPartyPrefixFilter,
    configure_logging,
    log_startup,
)

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("sqlalchemy").setLevel(logging.NOTSET)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("parasempre.service_layer.guest_directory", ""),
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("alembic", "[alembic]"),
    ],
)
def test_third_party_prefix(name, prefix):
    """Only foreign loggers get a prefix; nothing is dropped."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record)
    assert record.prefix == prefix


@pytest.mark.usefixtures("restore_root_logger")
def test_console_only_without_log_path():
    """No path, no flight recorder."""
    handlers = configure_logging(LoggingSettings(log_path=None))
    assert [type(h) for h in handlers] == [RichHandler]


@pytest.mark.usefixtures("restore_root_logger")
def test_flight_recorder_creates_directory(tmp_path: Path):
    """The recorder's parent directory is created on demand."""
    log_path = tmp_path / "nested" / "dir" / "latest.log"
    handlers = configure_logging(
        LoggingSettings(
            log_path=log_path,
            flight_capacity=10,
            logger_levels={"sqlalchemy": logging.ERROR},
        )
    )
    assert isinstance(handlers[1], MemoryHandler)
    assert handlers[1].capacity == 10
    assert log_path.parent.is_dir()
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy").level == logging.ERROR


@pytest.mark.usefixtures("restore_root_logger")
def test_flight_recorder_dumps_on_warning(tmp_path: Path):
    """DEBUG records are kept and written out once a WARNING arrives."""
    log_path = tmp_path / "latest.log"
    handlers = configure_logging(LoggingSettings(log_path=log_path))
    logger = logging.getLogger("parasempre.test")
    logger.debug("quiet detail")
    logger.warning("something odd")
    handlers[1].flush()
    content = log_path.read_text(encoding="utf-8")
    assert "quiet detail" in content
    assert "something odd" in content


def test_log_startup(caplog):
    """The summary line names the version and console level."""
    settings = LoggingSettings(level=logging.INFO, flight_recorder=False)
    with caplog.at_level(logging.DEBUG, logger="parasempre"):
        log_startup(
            logging.getLogger("parasempre.test"),
            app_version="9.9.9",
            settings=settings,
            handlers=[],
        )
    assert "PARASEMPRE 9.9.9: console=INFO, flight-recorder=OFF" in caplog.text
    assert "openpyxl" in caplog.text
