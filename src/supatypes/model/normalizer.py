"""Normalize a raw Prisma DMMF datamodel into schema objects.

The raw datamodel is the ``datamodel`` member of a DMMF document, or an
equivalent mapping loaded from JSON::

    {
        "models": [{"name": "User", "fields": [...], "documentation": "..."}],
        "enums": [{"name": "Role", "values": [{"name": "USER"}]}],
        "types": [{"name": "Address", "fields": [...]}],
    }

Missing collections are treated as empty and unknown field kinds degrade to
an untyped scalar. Every model, enum, type and field must carry a name.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

import structlog

from supatypes.model.types import (
    CompositeField,
    CompositeType,
    CompositeTypeField,
    Documentation,
    EnumField,
    EnumType,
    EnumVariant,
    Field,
    RelationField,
    ScalarField,
    ScalarType,
    Schema,
    Table,
)

log = structlog.get_logger()

T = TypeVar("T")

DEFAULT_SCHEMA = "public"

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_$][a-zA-Z_$0-9]*$")


def escape_name(name: str) -> str:
    """Return ``name`` usable as an object key in the emitted types.

    Identifiers pass through unchanged; anything else becomes a string
    literal (``my-table`` -> ``"my-table"``).
    """
    if _IDENTIFIER_RE.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def normalize_documentation(raw: Any) -> Documentation:
    """Split free-text documentation into lines.

    Accepts a string (split on line breaks), a list of strings, or None.
    Leading and trailing blank lines are dropped; all-blank input yields ``()``.
    """
    if raw is None:
        return ()
    lines = raw.splitlines() if isinstance(raw, str) else [str(line) for line in raw]
    lines = [line.rstrip() for line in lines]
    while lines and not lines[-1]:
        lines.pop()
    while lines and not lines[0]:
        lines.pop(0)
    return tuple(lines)


def normalize_field(raw: Mapping[str, Any]) -> Field:
    """Map one DMMF field onto the closed field union."""
    kind = raw.get("kind")
    type_name = str(raw.get("type") or "")
    relation_name = raw.get("relationName") or ""

    has_default = raw.get("hasDefaultValue")
    if has_default is None:
        has_default = raw.get("default") is not None

    common: dict[str, Any] = {
        "name": raw["name"],
        "is_required": bool(raw.get("isRequired", True)),
        "is_generated": bool(raw.get("isGenerated", False)),
        "has_default_value": bool(has_default),
        "is_list": bool(raw.get("isList", False)),
        "documentation": normalize_documentation(raw.get("documentation")),
    }

    if kind == "scalar":
        return ScalarField(scalar=ScalarType.from_name(type_name), **common)
    if kind == "enum":
        return EnumField(enum_name=type_name, **common)
    if kind == "object" and relation_name:
        return RelationField(
            relation_name=relation_name,
            target=type_name,
            from_fields=tuple(raw.get("relationFromFields") or ()),
            to_fields=tuple(raw.get("relationToFields") or ()),
            **common,
        )
    if kind == "object":
        return CompositeField(type_name=type_name, **common)

    log.debug("field_kind_unsupported", field=raw["name"], kind=kind)
    return ScalarField(scalar=None, **common)


def _normalize_table(raw: Mapping[str, Any]) -> Table:
    return Table(
        name=raw["name"],
        key=escape_name(raw["name"]),
        fields=tuple(normalize_field(f) for f in raw.get("fields") or ()),
        documentation=normalize_documentation(raw.get("documentation")),
    )


def _normalize_enum(raw: Mapping[str, Any]) -> EnumType:
    variants = tuple(
        EnumVariant(
            name=value["name"],
            documentation=normalize_documentation(value.get("documentation")),
        )
        for value in raw.get("values") or ()
    )
    return EnumType(
        name=raw["name"],
        key=escape_name(raw["name"]),
        variants=variants,
        documentation=normalize_documentation(raw.get("documentation")),
    )


def _normalize_composite_type(raw: Mapping[str, Any]) -> CompositeType:
    fields = []
    for member in raw.get("fields") or ():
        field_type = normalize_field(member) if member.get("type") else None
        fields.append(
            CompositeTypeField(
                name=member["name"],
                type=field_type,
                documentation=normalize_documentation(member.get("documentation")),
            )
        )
    return CompositeType(
        name=raw["name"],
        key=escape_name(raw["name"]),
        fields=tuple(fields),
    )


def _collect(
    items: Iterable[Mapping[str, Any]] | None, fn: Callable[[Mapping[str, Any]], T]
) -> tuple[T, ...]:
    return tuple(fn(item) for item in items or ())


def normalize_datamodel(datamodel: Mapping[str, Any]) -> list[Schema]:
    """Build the schema list for a raw datamodel.

    All tables, enums and composite types land in the ``public`` schema.

    Args:
        datamodel: Raw DMMF datamodel mapping.

    Returns:
        A single-element list holding the ``public`` schema.
    """
    schema = Schema(
        name=DEFAULT_SCHEMA,
        key=escape_name(DEFAULT_SCHEMA),
        tables=_collect(datamodel.get("models"), _normalize_table),
        enums=_collect(datamodel.get("enums"), _normalize_enum),
        composite_types=_collect(datamodel.get("types"), _normalize_composite_type),
    )
    log.debug(
        "datamodel_normalized",
        schema=schema.name,
        tables=len(schema.tables),
        enums=len(schema.enums),
        composite_types=len(schema.composite_types),
    )
    return [schema]
