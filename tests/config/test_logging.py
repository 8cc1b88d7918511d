"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from paramguard.config.logging import configure_from_settings, configure_logging
from paramguard.config.settings import GuardSettings
from paramguard.validator import Validator


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and paramguard logger state after each test."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    guard = logging.getLogger("paramguard")
    guard_handlers = guard.handlers[:]
    guard_level = guard.level
    guard_propagate = guard.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    guard.handlers = guard_handlers
    guard.setLevel(guard_level)
    guard.propagate = guard_propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("paramguard").level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("paramguard").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("paramguard.test")
        log.warning("hello world", key="val")
        # Smoke test — verify no exception; format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("paramguard.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "paramguard.test"
        assert "timestamp" in parsed

    def test_validation_failure_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        Validator().check_numericality_of("wes")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Validation failed: op=numericality"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "paramguard.validator"

    def test_non_verbose_hides_validation_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        Validator().check_numericality_of("wes")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        guard = logging.getLogger("paramguard")
        assert len(guard.handlers) == 1
        assert guard.propagate is False

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.INFO)
        before = root.handlers[:]

        configure_logging(verbose=True, log_json=True)

        assert root.handlers == before
        assert host_handler in root.handlers
        assert root.level == logging.INFO

    def test_keeps_foreign_paramguard_handlers(self) -> None:
        guard = logging.getLogger("paramguard")
        host_handler = logging.NullHandler()
        guard.addHandler(host_handler)

        configure_logging(verbose=False, log_json=False)
        configure_logging(verbose=True, log_json=True)

        assert host_handler in guard.handlers
        assert len(guard.handlers) == 2

    def test_records_do_not_reach_root(self, caplog: pytest.LogCaptureFixture) -> None:
        configure_logging(verbose=True, log_json=True)
        with caplog.at_level(logging.DEBUG):
            Validator().check_numericality_of("wes")
        assert caplog.records == []


@pytest.mark.usefixtures("_clean_env")
class TestConfigureFromSettings:
    def test_applies_flags(self) -> None:
        configure_from_settings(GuardSettings(verbose=True, log_json=True))
        assert logging.getLogger("paramguard").level == logging.DEBUG
