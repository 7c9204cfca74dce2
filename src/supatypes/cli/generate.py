"""supatypes generate command - write Database types for a DMMF model file."""

from pathlib import Path
from typing import Any

import click

from supatypes.config.loader import load_config
from supatypes.config.models import LoggingConfig, SupatypesConfig
from supatypes.core.errors import SupatypesError
from supatypes.core.logging import configure_logging
from supatypes.core.progress import format_duration, pluralize, status
from supatypes.runner import GenerationResult, load_datamodel, run_generation


def _overrides(output: Path | None, docs: bool | None, fmt: bool | None) -> dict[str, Any]:
    """Config kwargs for the flags that were actually given."""
    generator: dict[str, Any] = {}
    if output is not None:
        generator["output"] = str(output)
    if docs is not None:
        generator["documentation"] = docs

    overrides: dict[str, Any] = {}
    if generator:
        overrides["generator"] = generator
    if fmt is not None:
        overrides["formatting"] = {"enabled": fmt}
    return overrides


def _logging_config(config: SupatypesConfig, verbose: bool) -> LoggingConfig:
    """Loaded logging config, forced to DEBUG by -v."""
    if verbose:
        return config.logging.model_copy(update={"level": "DEBUG"})
    return config.logging


def _summary(result: GenerationResult) -> str:
    counts = ", ".join(
        [
            pluralize(result.tables, "table"),
            pluralize(result.enums, "enum"),
            pluralize(result.composite_types, "composite type"),
        ]
    )
    return f"Wrote {result.destination} ({counts}, {format_duration(result.duration_seconds)})"


@click.command()
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (overrides generator.output)",
)
@click.option("--docs/--no-docs", default=None, help="Render doc comments from the model")
@click.option("--format/--no-format", "fmt", default=None, help="Run the formatting pass")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root holding supatypes.yaml (default: current directory)",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    model: Path,
    output: Path | None,
    docs: bool | None,
    fmt: bool | None,
    project: Path | None,
) -> None:
    """Generate Supabase Database types.

    MODEL is a Prisma DMMF JSON document, or just its datamodel.
    """
    project_root = project or Path.cwd()
    try:
        config = load_config(project_root, **_overrides(output, docs, fmt))
        configure_logging(config=_logging_config(config, (ctx.obj or {}).get("verbose", False)))
        datamodel = load_datamodel(model)
        result = run_generation(datamodel, config, base_dir=project_root)
    except SupatypesError as e:
        status(e.message, style="error")
        raise SystemExit(1) from e

    status(_summary(result), style="success")
