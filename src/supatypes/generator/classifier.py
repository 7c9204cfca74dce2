"""Field classification - output types and Row/Insert/Update projections.

Each non-relation column of a table appears three times in the output:

- Row: the shape returned by a select. Optional columns are ``| null``.
- Insert: what a client may send on insert. Columns that are optional,
  defaulted or generated may be omitted.
- Update: what a client may send on update. Every column may be omitted.

Generated columns are assigned by the database; their Insert and Update
types are ``never`` so clients cannot supply them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from supatypes.model.types import (
    CompositeField,
    Documentation,
    EnumField,
    Field,
    RelationField,
    ScalarField,
    ScalarType,
    Table,
)

NULL_TYPE = "null"
NEVER_TYPE = "never"
UNKNOWN_TYPE = "unknown"
JSON_TYPE = "Json"

SCALAR_TYPES: Mapping[ScalarType, str] = MappingProxyType(
    {
        ScalarType.BIG_INT: "number",
        ScalarType.BOOLEAN: "boolean",
        ScalarType.BYTES: "string",
        ScalarType.DATE_TIME: "string",
        ScalarType.DECIMAL: "number",
        ScalarType.FLOAT: "number",
        ScalarType.INT: "number",
        ScalarType.JSON: JSON_TYPE,
        ScalarType.STRING: "string",
    }
)
"""Default scalar lookup. Decimal and DateTime lose precision/calendar semantics."""


@dataclass(frozen=True, slots=True)
class Projection:
    """One member of a Row, Insert or Update record."""

    name: str
    type: str
    optional: bool = False
    documentation: Documentation = ()


def union(*types: str) -> str:
    return " | ".join(types)


def with_null(type_: str, is_required: bool) -> str:
    """Add the null member to ``type_`` unless the column is required."""
    return type_ if is_required else union(type_, NULL_TYPE)


def columns(table: Table) -> list[Field]:
    """Fields of ``table`` that map to columns (relations excluded)."""
    return [f for f in table.fields if not isinstance(f, RelationField)]


def _forbidden(field: Field) -> Projection:
    return Projection(field.name, NEVER_TYPE, optional=True, documentation=field.documentation)


class FieldClassifier:
    """Derives output types for fields of one schema.

    Args:
        scalar_types: Scalar lookup table. Defaults to ``SCALAR_TYPES``.
        schema_name: Schema used in enum and composite type references.
    """

    def __init__(
        self,
        scalar_types: Mapping[ScalarType, str] = SCALAR_TYPES,
        *,
        schema_name: str = "public",
    ) -> None:
        self._scalar_types = scalar_types
        self._schema_name = schema_name

    @property
    def schema_name(self) -> str:
        return self._schema_name

    def reference(self, section: str, name: str) -> str:
        """Namespaced reference into a section of the Database type."""
        return f"Database['{self._schema_name}']['{section}']['{name}']"

    def type_of(self, field: Field) -> str:
        """Output type token for ``field``, without nullability."""
        if isinstance(field, ScalarField):
            if field.scalar is None:
                return UNKNOWN_TYPE
            return self._scalar_types.get(field.scalar, UNKNOWN_TYPE)
        if isinstance(field, EnumField):
            return self.reference("Enums", field.enum_name)
        if isinstance(field, CompositeField):
            return self.reference("CompositeTypes", field.type_name)
        if isinstance(field, RelationField):
            return field.target
        raise TypeError(f"Unsupported field type: {type(field).__name__}")

    def row(self, field: Field) -> Projection:
        return Projection(
            name=field.name,
            type=with_null(self.type_of(field), field.is_required),
            documentation=field.documentation,
        )

    def insert(self, field: Field) -> Projection:
        if field.is_generated:
            return _forbidden(field)
        optional = not field.is_required or field.has_default_value
        return Projection(
            name=field.name,
            type=with_null(self.type_of(field), field.is_required),
            optional=optional,
            documentation=field.documentation,
        )

    def update(self, field: Field) -> Projection:
        if field.is_generated:
            return _forbidden(field)
        return Projection(
            name=field.name,
            type=with_null(self.type_of(field), field.is_required),
            optional=True,
            documentation=field.documentation,
        )

    def member(self, field: Field | None) -> str:
        """Type of a composite type member. Untyped members are ``unknown``."""
        if field is None:
            return UNKNOWN_TYPE
        return union(self.type_of(field), NULL_TYPE)
