"""Tests for cfn_update.reporting."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

from cfn_update.reporting import (
    ConsoleReporter,
    RecordingReporter,
    _escape_workflow_data,
    default_reporter,
)


class TestRecordingReporter:
    def test_records_in_order(self):
        r = RecordingReporter()
        r.info("a")
        r.warning("b")
        r.debug("c")
        r.report_failure("d", trace="tb")
        assert r.records == [
            ("info", "a"), ("warning", "b"), ("debug", "c"), ("failure", "d"),
        ]
        assert r.failures == ["d"]
        assert r.traces == ["tb"]

    def test_messages_filter(self):
        r = RecordingReporter()
        r.info("x")
        r.warning("y")
        assert r.messages("info") == ["x"]


class TestConsoleReporter:
    def test_info_logs_and_prints(self, caplog):
        with patch("cfn_update.reporting.ui") as mock_ui:
            with caplog.at_level(logging.INFO, logger="cfn_update.reporting"):
                ConsoleReporter(github_actions=False).info("hello")
        mock_ui.info.assert_called_once_with("hello")
        assert "hello" in caplog.text

    def test_failure_panel_without_actions(self):
        with patch("cfn_update.reporting.ui") as mock_ui:
            r = ConsoleReporter(github_actions=False)
            r.report_failure("boom")
        assert r.failed is True
        mock_ui.error_panel.assert_called_once_with("Stack update failed", "boom")
        mock_ui.plain.assert_not_called()

    def test_failure_emits_workflow_command(self):
        with patch("cfn_update.reporting.ui") as mock_ui:
            ConsoleReporter(github_actions=True).report_failure("line1\nline2")
        mock_ui.plain.assert_called_once_with("::error::line1%0Aline2")

    def test_detects_github_actions(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        assert ConsoleReporter().github_actions is True
        monkeypatch.delenv("GITHUB_ACTIONS")
        assert ConsoleReporter().github_actions is False

    def test_unconfigured_logging_does_not_echo_to_stderr(self):
        last_resort = MagicMock(level=logging.WARNING)
        with patch("cfn_update.reporting.ui"), \
                patch.object(logging.root, "handlers", []), \
                patch.object(logging, "lastResort", last_resort):
            r = ConsoleReporter(github_actions=False)
            r.warning("careful")
            r.report_failure("boom")
        last_resort.handle.assert_not_called()

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("cfn_update").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestEscape:
    def test_percent_and_newlines(self):
        assert _escape_workflow_data("50%\r\n") == "50%25%0D%0A"


class TestDefaultReporter:
    def test_console(self):
        assert isinstance(default_reporter(), ConsoleReporter)
