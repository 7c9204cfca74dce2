"""Configuration constants.

Values here are not user-configurable: file names, protocol strings and
hard limits. For configurable values, see models.py.
"""

# =============================================================================
# Config Files
# =============================================================================

PROJECT_CONFIG_FILE = "supatypes.yaml"
"""Project config, looked up in the project root."""

GLOBAL_CONFIG_FILE = "~/.config/supatypes/config.yaml"
"""Per-user config shared by all projects."""

# =============================================================================
# Prisma Generator Manifest
# =============================================================================

DEFAULT_OUTPUT = "./database.ts"
"""Output path suggested to Prisma when the generator block sets none."""

PRETTY_NAME = "Supabase Types"
"""Generator name shown by the Prisma CLI."""

# =============================================================================
# Formatting
# =============================================================================

DEFAULT_FORMATTER_COMMAND = ("npx", "--no-install", "prettier", "--parser", "typescript")
"""Formatter used when formatting is enabled without an explicit command."""

FORMATTER_TIMEOUT_MAX_SEC = 600.0
"""Upper bound for the formatter timeout."""
