"""Type generation - datamodel in, TypeScript Database types out."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from supatypes.generator.assembler import GenerationOptions, OutputAssembler
from supatypes.generator.classifier import SCALAR_TYPES, FieldClassifier, Projection
from supatypes.generator.relationships import Relationship, extract_relationships
from supatypes.model.normalizer import normalize_datamodel


def generate_types(datamodel: Mapping[str, Any], *, documentation: bool = True) -> str:
    """Generate the Database type text for a raw DMMF datamodel.

    Pure: no I/O, and the same datamodel always yields the same text.

    Args:
        datamodel: The ``datamodel`` member of a Prisma DMMF document.
        documentation: Render doc comments from the model.
    """
    schemas = normalize_datamodel(datamodel)
    assembler = OutputAssembler(GenerationOptions(documentation=documentation))
    return assembler.assemble(schemas)


__all__ = [
    "generate_types",
    "GenerationOptions",
    "OutputAssembler",
    "FieldClassifier",
    "Projection",
    "SCALAR_TYPES",
    "Relationship",
    "extract_relationships",
]
