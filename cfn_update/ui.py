"""Colorized console output for cfn-update.

Thin wrapper around :mod:`rich` that degrades gracefully when stdout
is not a TTY (e.g. piped, CI runners).  All user-facing status messages
should flow through this module; ``logger.*`` calls are kept for
structured logging.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

# Shared console; force_terminal=None lets Rich detect a TTY.
console = Console(stderr=False, force_terminal=None)

# ── Symbols ────────────────────────────────────────────────────────────────

_WARN = "[bold yellow]⚠[/]"
_DOT = "[dim]·[/]"

# ── Status lines ───────────────────────────────────────────────────────────


def warn(msg: str) -> None:
    """Yellow warning + message."""
    console.print(f"  {_WARN} [yellow]{escape(msg)}[/]", highlight=False)


def info(msg: str) -> None:
    """Dim dot + informational message."""
    console.print(f"  {_DOT} [dim]{escape(msg)}[/]", highlight=False)


def plain(msg: str) -> None:
    """Unstyled line, no markup processing (CI workflow commands)."""
    console.print(msg, markup=False, highlight=False, soft_wrap=True)


# ── Banners / panels ──────────────────────────────────────────────────────


def error_panel(title: str, body: str) -> None:
    """Red-bordered error panel."""
    console.print()
    console.print(
        Panel(
            escape(body),
            title=f"[bold red]{title}[/]",
            border_style="red",
            padding=(1, 2),
        )
    )


# ── Progress helpers ───────────────────────────────────────────────────────


def elapsed_str(seconds: float) -> str:
    """Format seconds as ``Xh Ym Zs`` (hours only when non-zero)."""
    m, s = divmod(int(seconds), 60)
    h, m = divmod(m, 60)
    if h > 0:
        return f"{h}h {m}m {s}s"
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"
