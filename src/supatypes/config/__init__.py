"""Config module exports."""

from supatypes.config.loader import load_config, parse_flag
from supatypes.config.models import (
    FormattingConfig,
    GeneratorConfig,
    LoggingConfig,
    LogOutputConfig,
    SupatypesConfig,
)

__all__ = [
    "load_config",
    "parse_flag",
    "SupatypesConfig",
    "GeneratorConfig",
    "FormattingConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
