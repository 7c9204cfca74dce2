"""Schema model exports."""

from supatypes.model.normalizer import escape_name, normalize_datamodel
from supatypes.model.types import (
    CompositeField,
    CompositeType,
    CompositeTypeField,
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

__all__ = [
    "normalize_datamodel",
    "escape_name",
    # Types
    "Schema",
    "Table",
    "Field",
    "ScalarField",
    "ScalarType",
    "EnumField",
    "RelationField",
    "CompositeField",
    "EnumType",
    "EnumVariant",
    "CompositeType",
    "CompositeTypeField",
]
