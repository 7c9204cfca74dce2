"""supatypes - Supabase Database types from a Prisma schema model."""

from supatypes.generator import generate_types

__version__ = "0.1.0"

__all__ = ["generate_types", "__version__"]
