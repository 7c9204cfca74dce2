"""Prisma generator plugin."""

from supatypes.plugin.handler import GeneratorHandler, serve

__all__ = ["GeneratorHandler", "serve"]
