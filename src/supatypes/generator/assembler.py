"""Output assembly - schemas to the final TypeScript text.

Layout of the generated text::

    export type Json = ...

    export type Database = {
      public: {
        Tables: { ... }
        Views: { ... }
        Functions: { ... }
        Enums: { ... }
        CompositeTypes: { ... }
      }
    }

    <helper types>

Ordering comes from ``ordering``; field types from ``FieldClassifier``;
comments from ``docs``. This module only arranges text nodes.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

import structlog

from supatypes.generator.classifier import SCALAR_TYPES, FieldClassifier, Projection, columns
from supatypes.generator.docs import render_documentation, render_enum_documentation
from supatypes.generator.helpers import HELPER_TYPES, JSON_TYPE_ALIAS
from supatypes.generator.nodes import Block, Join, Lines, Node, Text, lines_before
from supatypes.generator.ordering import (
    by_name,
    ordered_composite_types,
    ordered_enums,
    ordered_schemas,
    ordered_tables,
)
from supatypes.generator.relationships import Relationship, extract_relationships
from supatypes.model.types import CompositeType, EnumType, Field, ScalarType, Schema, Table

log = structlog.get_logger()

SCHEMA_INDENT = " " * 2
SECTION_INDENT = " " * 4
ENTRY_INDENT = " " * 6
RECORD_INDENT = " " * 8
MEMBER_INDENT = " " * 10
RELATIONSHIP_INDENT = " " * 12

EMPTY_SECTION = "[_ in never]: never"
VIEWS_PLACEHOLDER = "/* No support for views */"
FUNCTIONS_PLACEHOLDER = "/* No support for functions */"


@dataclass(frozen=True)
class GenerationOptions:
    """Options consumed by the generator core.

    Attributes:
        documentation: Render doc comments from the model.
        scalar_types: Scalar lookup table handed to the classifier.
    """

    documentation: bool = True
    scalar_types: Mapping[ScalarType, str] = field(default_factory=lambda: SCALAR_TYPES)


def _json_list(values: Sequence[str]) -> str:
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))


def _json_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


class OutputAssembler:
    """Builds the text node tree for a list of schemas."""

    def __init__(self, options: GenerationOptions | None = None) -> None:
        self._options = options or GenerationOptions()

    def _docs(self, lines: Sequence[str]) -> list[str]:
        return render_documentation(lines, enabled=self._options.documentation)

    def _classifier(self, schema: Schema) -> FieldClassifier:
        return FieldClassifier(self._options.scalar_types, schema_name=schema.name)

    # -- tables --------------------------------------------------------------

    def _member(self, projection: Projection) -> Node:
        marker = "?" if projection.optional else ""
        line = Text(f"{MEMBER_INDENT}{projection.name}{marker}: {projection.type}")
        return lines_before(self._docs(projection.documentation), line, MEMBER_INDENT)

    def _record(
        self,
        title: str,
        fields: Sequence[Field],
        project: Callable[[Field], Projection],
    ) -> Node:
        members = [self._member(project(f)) for f in by_name(fields)]
        return Block(f"{RECORD_INDENT}{title}: {{", Join(members, ";\n"), f"{RECORD_INDENT}}}")

    def _relationship(self, relationship: Relationship) -> Node:
        one_to_one = "true" if relationship.is_one_to_one else "false"
        body = Lines(
            [
                f"foreignKeyName: {_json_string(relationship.foreign_key_name)};",
                f"columns: {_json_list(relationship.columns)};",
                f"isOneToOne: {one_to_one};",
                f"referencedRelation: {_json_string(relationship.referenced_relation)};",
                f"referencedColumns: {_json_list(relationship.referenced_columns)}",
            ],
            RELATIONSHIP_INDENT,
        )
        return Block(f"{MEMBER_INDENT}{{", body, f"{MEMBER_INDENT}}}")

    def _table(self, table: Table, classifier: FieldClassifier) -> Node:
        table_columns = columns(table)
        relationships = [self._relationship(r) for r in extract_relationships(table)]
        body = Join(
            [
                self._record("Row", table_columns, classifier.row),
                self._record("Insert", table_columns, classifier.insert),
                self._record("Update", table_columns, classifier.update),
                Block(
                    f"{RECORD_INDENT}Relationships: [",
                    Join(relationships, ",\n"),
                    f"{RECORD_INDENT}]",
                ),
            ]
        )
        node = Block(f"{ENTRY_INDENT}{table.key}: {{", body, f"{ENTRY_INDENT}}}")
        return lines_before(self._docs(table.documentation), node, ENTRY_INDENT)

    def _tables(self, schema: Schema, classifier: FieldClassifier) -> Node:
        tables = ordered_tables(schema)
        if not tables:
            body: Node = Text(f"{ENTRY_INDENT}{EMPTY_SECTION}")
        else:
            body = Join([self._table(t, classifier) for t in tables], ";\n")
        return Block(f"{SECTION_INDENT}Tables: {{", body, f"{SECTION_INDENT}}}")

    # -- enums and composite types -------------------------------------------

    def _enum(self, enum: EnumType) -> Node:
        variants = " | ".join(_json_string(v.name) for v in enum.variants)
        line = Text(f"{ENTRY_INDENT}{enum.key}: {variants}")
        docs = render_enum_documentation(enum, enabled=self._options.documentation)
        return lines_before(docs, line, ENTRY_INDENT)

    def _enums(self, schema: Schema) -> Node:
        enums = ordered_enums(schema)
        if not enums:
            body: Node = Text(f"{ENTRY_INDENT}{EMPTY_SECTION}")
        else:
            body = Join([self._enum(e) for e in enums])
        return Block(f"{SECTION_INDENT}Enums: {{", body, f"{SECTION_INDENT}}}")

    def _composite_type(self, composite: CompositeType, classifier: FieldClassifier) -> Node:
        members = [
            lines_before(
                self._docs(member.documentation),
                Text(f"{RECORD_INDENT}{member.name}: {classifier.member(member.type)}"),
                RECORD_INDENT,
            )
            for member in composite.fields
        ]
        return Block(
            f"{ENTRY_INDENT}{composite.key}: {{", Join(members, ",\n"), f"{ENTRY_INDENT}}}"
        )

    def _composite_types(self, schema: Schema, classifier: FieldClassifier) -> Node:
        composites = ordered_composite_types(schema)
        if not composites:
            body: Node = Text(f"{ENTRY_INDENT}{EMPTY_SECTION}")
        else:
            body = Join([self._composite_type(c, classifier) for c in composites], ",\n\n")
        return Block(f"{SECTION_INDENT}CompositeTypes: {{", body, f"{SECTION_INDENT}}}")

    # -- schemas -------------------------------------------------------------

    def _placeholder(self, title: str, text: str) -> Node:
        return Block(
            f"{SECTION_INDENT}{title}: {{",
            Text(f"{ENTRY_INDENT}{text}"),
            f"{SECTION_INDENT}}}",
        )

    def schema(self, schema: Schema) -> Node:
        classifier = self._classifier(schema)
        sections = Join(
            [
                self._tables(schema, classifier),
                self._placeholder("Views", VIEWS_PLACEHOLDER),
                self._placeholder("Functions", FUNCTIONS_PLACEHOLDER),
                self._enums(schema),
                self._composite_types(schema, classifier),
            ]
        )
        return Block(f"{SCHEMA_INDENT}{schema.key}: {{", sections, f"{SCHEMA_INDENT}}}")

    def build(self, schemas: Sequence[Schema]) -> Node:
        """Node tree for the whole output file."""
        database = Block(
            "export type Database = {",
            Join([self.schema(s) for s in ordered_schemas(schemas)]),
            "}",
        )
        return Join(
            [
                Text(""),
                Text(JSON_TYPE_ALIAS),
                Text(""),
                database,
                Text(""),
                Text(""),
                Text(HELPER_TYPES),
                Text(""),
            ]
        )

    def assemble(self, schemas: Sequence[Schema]) -> str:
        """Serialize ``schemas`` to the final output text."""
        output = self.build(schemas).render()
        log.debug("output_assembled", schemas=len(schemas), chars=len(output))
        return output
