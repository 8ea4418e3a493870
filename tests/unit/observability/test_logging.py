"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mailpeek import __version__
from mailpeek.observability.logging import (
    JsonLoggerFactory,
    add_package_version,
    get_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_configure_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_configure_twice_does_not_stack_handlers(self) -> None:
        JsonLoggerFactory.configure()
        JsonLoggerFactory.configure(with_version=True)
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_returned_logger_has_info_method(self) -> None:
        log = get_logger("test.module")
        assert callable(getattr(log, "info", None))

    def test_kwargs_bind_context(self) -> None:
        with capture_logs() as logs:
            get_logger("test.module", service="mailpeek").info("hello")
        assert logs[0]["event"] == "hello"
        assert logs[0]["service"] == "mailpeek"


class TestAddPackageVersion:
    def test_stamps_version(self) -> None:
        event = add_package_version(None, "info", {"event": "x"})
        assert event["mailpeek_version"] == __version__

    def test_keeps_existing_value(self) -> None:
        event = add_package_version(None, "info", {"mailpeek_version": "custom"})
        assert event["mailpeek_version"] == "custom"
