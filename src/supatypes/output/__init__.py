"""Output handling - formatting and writing generated types."""

from supatypes.output.formatter import default_style, format_source
from supatypes.output.writer import resolve_destination, write_output

__all__ = ["default_style", "format_source", "resolve_destination", "write_output"]
