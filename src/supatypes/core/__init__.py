"""Core module exports."""

from supatypes.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    ModelError,
    OutputError,
    SupatypesError,
)
from supatypes.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from supatypes.core.progress import pluralize, status

__all__ = [
    # Errors
    "SupatypesError",
    "ConfigError",
    "ModelError",
    "OutputError",
    "InternalError",
    "ErrorCode",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "status",
]
