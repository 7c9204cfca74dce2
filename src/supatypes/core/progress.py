"""User-facing status output for CLI operations.

Status lines go to stderr through a shared Rich console so generated types
piped to stdout stay clean.

Usage::

    from supatypes.core.progress import status

    status("Wrote prisma/database.ts", style="success")  # ✓ Wrote prisma/database.ts
    status("Formatter failed", style="warning")  # ! Formatter failed
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from supatypes.core.logging import get_logger

    return get_logger("progress")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Examples:
        pluralize(1, "table") -> "1 table"
        pluralize(3, "enum") -> "3 enums"
        pluralize(2, "composite type") -> "2 composite types"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a short human-readable string.

    Examples:
        0.345 -> "0.3s"
        90.0 -> "1m 30s"
    """
    if seconds < 0:
        raise ValueError("Duration must be non-negative")
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {int(seconds % 60)}s"
