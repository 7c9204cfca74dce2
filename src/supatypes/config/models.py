"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags, Prisma generator config)
2. Environment variables (SUPATYPES__SECTION__KEY)
3. Project YAML (supatypes.yaml)
4. Global YAML (~/.config/supatypes/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SUPATYPES__<SECTION>__<KEY>=<VALUE>

Examples:
    SUPATYPES__LOGGING__LEVEL=DEBUG
    SUPATYPES__GENERATOR__DOCUMENTATION=false
    SUPATYPES__GENERATOR__OUTPUT=prisma/database.ts
    SUPATYPES__FORMATTING__ENABLED=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from supatypes.config.constants import DEFAULT_FORMATTER_COMMAND, FORMATTER_TIMEOUT_MAX_SEC

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SUPATYPES__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports each generation run; DEBUG is verbose.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GeneratorConfig(BaseModel):
    """Generator configuration.

    Env vars:
        SUPATYPES__GENERATOR__DOCUMENTATION: Render doc comments (default: true)
        SUPATYPES__GENERATOR__OUTPUT: Destination file for the generated types
    """

    documentation: bool = Field(
        default=True,
        description="Render /// comments from the schema as doc comments.",
    )
    output: str | None = Field(
        default=None,
        description="Destination file. Required; generation fails before it starts without one.",
    )


class FormattingConfig(BaseModel):
    """Optional formatting pass over the generated text.

    Env vars:
        SUPATYPES__FORMATTING__ENABLED: Run the external formatter
        SUPATYPES__FORMATTING__TIMEOUT_SEC: Formatter timeout
    """

    enabled: bool = Field(
        default=False,
        description="Pipe the output through an external formatter. "
        "On failure the built-in default style is used instead.",
    )
    command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FORMATTER_COMMAND),
        description="Formatter command. Reads source on stdin, writes it to stdout.",
    )
    timeout_sec: float = Field(
        default=30.0,
        description="Formatter timeout before falling back to the default style.",
    )

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("Formatter command must not be empty")
        return v

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if not (0 < v <= FORMATTER_TIMEOUT_MAX_SEC):
            raise ValueError(f"Timeout must be in (0, {FORMATTER_TIMEOUT_MAX_SEC}], got {v}")
        return v


class SupatypesConfig(BaseModel):
    """Root configuration for supatypes.

    All settings can be configured via:
    1. Environment variables: SUPATYPES__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
