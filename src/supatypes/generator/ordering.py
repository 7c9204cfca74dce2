"""Deterministic ordering and filtering of schema objects.

Kept apart from text rendering so the emitted order can be tested on its own.
Names sort alphabetically ignoring case; on a case-only tie the lowercase
name comes first (``role`` < ``Role`` < ``session``).

Schemas, tables, enums and composite types sort on their emitted key, so a
quoted key such as ``"audit-log"`` lands ahead of plain identifiers.
Fields sort on their name.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

from supatypes.model.types import CompositeType, EnumType, Schema, Table


class _Named(Protocol):
    @property
    def name(self) -> str: ...


class _Keyed(Protocol):
    @property
    def key(self) -> str: ...


N = TypeVar("N", bound=_Named)
K = TypeVar("K", bound=_Keyed)


def alpha_key(name: str) -> tuple[str, str]:
    return name.casefold(), name.swapcase()


def by_name(items: Iterable[N]) -> list[N]:
    return sorted(items, key=lambda item: alpha_key(item.name))


def by_key(items: Iterable[K]) -> list[K]:
    return sorted(items, key=lambda item: alpha_key(item.key))


def ordered_schemas(schemas: Iterable[Schema]) -> list[Schema]:
    return by_key(schemas)


def ordered_tables(schema: Schema) -> list[Table]:
    return by_key(schema.tables)


def ordered_enums(schema: Schema) -> list[EnumType]:
    """Enums with at least one variant, by key."""
    return by_key(e for e in schema.enums if e.variants)


def ordered_composite_types(schema: Schema) -> list[CompositeType]:
    """Composite types with at least one field, by key."""
    return by_key(t for t in schema.composite_types if t.fields)
