"""Reporter — the logging/reporting sink handed to every component.

Components never reach for a global sink; they receive a :class:`Reporter`
and fall back to :func:`default_reporter` when none is given.

* :class:`ConsoleReporter` — stdlib :mod:`logging` plus :mod:`cfn_update.ui`
  console lines.  Under GitHub Actions it also emits the ``::error::``
  workflow command so the failure is annotated on the run.
* :class:`RecordingReporter` — keeps every call in memory (tests).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from cfn_update import ui

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Minimal sink used by the reconciler, cleanup and orchestrator."""

    def info(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...

    def debug(self, msg: str) -> None: ...

    def report_failure(self, msg: str, trace: Optional[str] = None) -> None: ...


# ---------------------------------------------------------------------------
# ConsoleReporter
# ---------------------------------------------------------------------------


def _in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def _escape_workflow_data(msg: str) -> str:
    """Escape a message for a GitHub Actions workflow command."""
    return msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ConsoleReporter:
    """Log through :mod:`logging` and print user-facing lines via :mod:`ui`."""

    def __init__(self, *, github_actions: Optional[bool] = None) -> None:
        self.github_actions = (
            _in_github_actions() if github_actions is None else github_actions
        )
        self.failed = False

    def info(self, msg: str) -> None:
        logger.info(msg)
        ui.info(msg)

    def warning(self, msg: str) -> None:
        logger.warning(msg)
        ui.warn(msg)

    def debug(self, msg: str) -> None:
        logger.debug(msg)

    def report_failure(self, msg: str, trace: Optional[str] = None) -> None:
        self.failed = True
        logger.error(msg)
        if trace:
            logger.debug(trace)
        if self.github_actions:
            ui.plain(f"::error::{_escape_workflow_data(msg)}")
        ui.error_panel("Stack update failed", msg)


# ---------------------------------------------------------------------------
# RecordingReporter
# ---------------------------------------------------------------------------


@dataclass
class RecordingReporter:
    """Collects ``(level, message)`` tuples in call order."""

    records: List[Tuple[str, str]] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    traces: List[str] = field(default_factory=list)

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def warning(self, msg: str) -> None:
        self.records.append(("warning", msg))

    def debug(self, msg: str) -> None:
        self.records.append(("debug", msg))

    def report_failure(self, msg: str, trace: Optional[str] = None) -> None:
        self.records.append(("failure", msg))
        self.failures.append(msg)
        if trace:
            self.traces.append(trace)

    def messages(self, level: str) -> List[str]:
        """Return messages recorded at *level*."""
        return [m for lvl, m in self.records if lvl == level]


def default_reporter() -> Reporter:
    """Return a fresh :class:`ConsoleReporter`."""
    return ConsoleReporter()
