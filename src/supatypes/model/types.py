"""Schema model - tables, fields, enums and composite types.

Built once per generation run by the normalizer and read only afterwards.
Every object carries both its raw ``name`` (used for ordering and
cross-references) and its ``key`` (the name escaped for use as a structural
key in the emitted type text).

Fields form a closed union of four kinds (``Field``). Consumers dispatch on
the concrete class rather than on a kind string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Documentation = tuple[str, ...]


class ScalarType(Enum):
    """Primitive column types of the source model."""

    INT = "Int"
    BIG_INT = "BigInt"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    BOOLEAN = "Boolean"
    BYTES = "Bytes"
    DATE_TIME = "DateTime"
    JSON = "Json"
    STRING = "String"

    @classmethod
    def from_name(cls, name: str) -> ScalarType | None:
        """Look up a scalar by its model name; None for unsupported types."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True, kw_only=True)
class _FieldBase:
    name: str
    is_required: bool = True
    is_generated: bool = False
    has_default_value: bool = False
    is_list: bool = False
    documentation: Documentation = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ScalarField(_FieldBase):
    """Column holding a primitive value. ``scalar`` is None when unsupported."""

    scalar: ScalarType | None


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumField(_FieldBase):
    """Column holding a variant of a schema enum."""

    enum_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RelationField(_FieldBase):
    """Navigation to another table.

    ``from_fields`` are the local foreign-key columns and ``to_fields`` the
    referenced columns. Back-reference fields carry neither.
    """

    relation_name: str
    target: str
    from_fields: tuple[str, ...] = ()
    to_fields: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class CompositeField(_FieldBase):
    """Column holding an embedded composite type."""

    type_name: str


Field = ScalarField | EnumField | RelationField | CompositeField


@dataclass(frozen=True, slots=True)
class Table:
    name: str
    key: str
    fields: tuple[Field, ...] = ()
    documentation: Documentation = ()


@dataclass(frozen=True, slots=True)
class EnumVariant:
    name: str
    documentation: Documentation = ()


@dataclass(frozen=True, slots=True)
class EnumType:
    name: str
    key: str
    variants: tuple[EnumVariant, ...] = ()
    documentation: Documentation = ()


@dataclass(frozen=True, slots=True)
class CompositeTypeField:
    """Member of a composite type. ``type`` is None when the model gives none."""

    name: str
    type: Field | None = None
    documentation: Documentation = ()


@dataclass(frozen=True, slots=True)
class CompositeType:
    name: str
    key: str
    fields: tuple[CompositeTypeField, ...] = ()


@dataclass(frozen=True, slots=True)
class Schema:
    """A database schema. Views and functions are never populated."""

    name: str
    key: str
    tables: tuple[Table, ...] = ()
    enums: tuple[EnumType, ...] = ()
    composite_types: tuple[CompositeType, ...] = ()
    views: tuple[()] = ()
    functions: tuple[()] = ()
