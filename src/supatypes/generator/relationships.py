"""Foreign-key relationship extraction."""

from __future__ import annotations

from dataclasses import dataclass

from supatypes.generator.ordering import alpha_key
from supatypes.model.types import RelationField, Table


@dataclass(frozen=True, slots=True)
class Relationship:
    """A foreign key owned by a table."""

    foreign_key_name: str
    columns: tuple[str, ...]
    is_one_to_one: bool
    referenced_relation: str
    referenced_columns: tuple[str, ...]


def is_foreign_key(field: RelationField) -> bool:
    """True when ``field`` owns the foreign key columns.

    Back-reference fields (the other side of a relation) carry no local
    columns and are skipped.
    """
    return bool(field.relation_name and field.from_fields and field.to_fields)


def extract_relationships(table: Table) -> list[Relationship]:
    """Relationships of ``table``, ordered by field name."""
    fields = [f for f in table.fields if isinstance(f, RelationField) and is_foreign_key(f)]
    fields.sort(key=lambda f: (alpha_key(f.name), alpha_key(f.relation_name)))
    return [
        Relationship(
            foreign_key_name=f.relation_name,
            columns=f.from_fields,
            # Derived from the owning side only.
            is_one_to_one=not f.is_list,
            referenced_relation=f.target,
            referenced_columns=f.to_fields,
        )
        for f in fields
    ]
