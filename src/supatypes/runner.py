"""One generation run: model in, formatted types written out.

Shared by the CLI and the Prisma generator plugin. The destination is
resolved before anything is generated, so a missing output path fails fast.
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from supatypes.config.models import SupatypesConfig
from supatypes.core.errors import ModelError
from supatypes.core.logging import clear_run_id, set_run_id
from supatypes.generator.assembler import GenerationOptions, OutputAssembler
from supatypes.generator.ordering import ordered_composite_types, ordered_enums
from supatypes.model.normalizer import normalize_datamodel
from supatypes.output.formatter import format_source
from supatypes.output.writer import resolve_destination, write_output

log = structlog.get_logger()


@dataclass
class GenerationResult:
    """Summary of a completed run."""

    destination: Path
    tables: int
    enums: int
    composite_types: int
    duration_seconds: float


def extract_datamodel(document: Any) -> Mapping[str, Any]:
    """Return the datamodel from a DMMF document or a bare datamodel.

    Raises:
        ModelError: When ``document`` is neither.
    """
    if not isinstance(document, Mapping):
        raise ModelError.invalid("expected a JSON object")
    datamodel = document.get("datamodel", document)
    if not isinstance(datamodel, Mapping):
        raise ModelError.invalid("'datamodel' must be an object")
    if not any(key in datamodel for key in ("models", "enums", "types")):
        raise ModelError.invalid("no 'models', 'enums' or 'types' found")
    return datamodel


def load_datamodel(path: Path) -> Mapping[str, Any]:
    """Load a datamodel from a DMMF JSON file.

    Raises:
        ModelError: File missing, unreadable or not a datamodel.
    """
    if not path.exists():
        raise ModelError.not_found(str(path))
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ModelError.parse_error(str(path), str(e)) from e
    return extract_datamodel(document)


def run_generation(
    datamodel: Mapping[str, Any],
    config: SupatypesConfig,
    *,
    base_dir: Path | None = None,
) -> GenerationResult:
    """Generate, format and write the types for ``datamodel``.

    Raises:
        ConfigError: No output destination configured.
        OutputError: Writing the output failed.
    """
    destination = resolve_destination(config.generator.output, base_dir)
    set_run_id()
    start = time.perf_counter()
    try:
        schemas = normalize_datamodel(datamodel)
        assembler = OutputAssembler(GenerationOptions(documentation=config.generator.documentation))
        text = format_source(assembler.assemble(schemas), config.formatting)
        write_output(text, destination)

        result = GenerationResult(
            destination=destination,
            tables=sum(len(s.tables) for s in schemas),
            enums=sum(len(ordered_enums(s)) for s in schemas),
            composite_types=sum(len(ordered_composite_types(s)) for s in schemas),
            duration_seconds=time.perf_counter() - start,
        )
        log.info(
            "generation_complete",
            destination=str(destination),
            tables=result.tables,
            enums=result.enums,
            composite_types=result.composite_types,
        )
        return result
    finally:
        clear_run_id()
