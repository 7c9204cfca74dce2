"""Optional formatting pass over the generated text.

The formatter is an external text-to-text command (prettier by default):
source on stdin, formatted source on stdout. It never changes meaning, so
any failure falls back to the built-in default style instead of aborting.
"""

from __future__ import annotations

import subprocess

import structlog

from supatypes.config.models import FormattingConfig

log = structlog.get_logger()


def default_style(text: str) -> str:
    """Built-in style: no trailing whitespace, exactly one final newline."""
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n"


def run_formatter(text: str, command: list[str], timeout_sec: float) -> str:
    """Run ``command`` over ``text``.

    Raises:
        OSError: Command could not be started.
        subprocess.SubprocessError: Non-zero exit or timeout.
    """
    result = subprocess.run(
        command,
        input=text,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout_sec,
        check=True,
    )
    return result.stdout


def format_source(text: str, config: FormattingConfig) -> str:
    """Format generated source according to ``config``.

    Disabled formatting returns ``text`` unchanged.
    """
    if not config.enabled:
        return text
    try:
        formatted = run_formatter(text, config.command, config.timeout_sec)
    except (OSError, subprocess.SubprocessError) as e:
        stderr = getattr(e, "stderr", None)
        log.warning(
            "formatter_failed",
            command=config.command[0],
            error=str(e),
            stderr=stderr.strip() if isinstance(stderr, str) else None,
        )
        return default_style(text)
    if not formatted.strip():
        log.warning("formatter_empty_output", command=config.command[0])
        return default_style(text)
    return formatted
