"""Write generated types to their destination."""

from __future__ import annotations

from pathlib import Path

import structlog

from supatypes.core.errors import ConfigError, OutputError

log = structlog.get_logger()


def resolve_destination(output: str | None, base_dir: Path | None = None) -> Path:
    """Resolve the configured output path.

    Relative paths resolve against ``base_dir`` (default: cwd).

    Raises:
        ConfigError: When no output destination is configured.
    """
    if not output:
        raise ConfigError.missing_required("generator.output")
    path = Path(output).expanduser()
    if not path.is_absolute():
        path = (base_dir or Path.cwd()) / path
    return path


def write_output(text: str, destination: Path) -> Path:
    """Write ``text`` to ``destination``, creating parent directories.

    Raises:
        OutputError: When the file cannot be written.
    """
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError.write_failed(str(destination), str(e)) from e
    log.info("output_written", path=str(destination), bytes=len(text.encode("utf-8")))
    return destination
