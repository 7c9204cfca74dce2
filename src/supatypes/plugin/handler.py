"""Prisma generator protocol handler.

Prisma runs the generator as a subprocess and talks JSON-RPC 2.0 with one
message per line: requests arrive on stdin, responses leave on stderr.
Non-JSON lines on stderr are shown by Prisma as generator logs.

Methods:
    getManifest: Report default output path and display name.
    generate: Generate types for ``params.dmmf`` and write them to
        ``params.generator.output.value``.

Generator block options (``generator supabase { ... }``):
    documentation = "false"  Skip doc comments.
    format = "true"          Run the formatting pass.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

import structlog

from supatypes.config.constants import DEFAULT_OUTPUT, PRETTY_NAME
from supatypes.config.loader import load_config, parse_flag
from supatypes.core.errors import InternalError, SupatypesError
from supatypes.core.logging import configure_logging
from supatypes.runner import extract_datamodel, run_generation

log = structlog.get_logger()

JSONRPC_VERSION = "2.0"
METHOD_NOT_FOUND = -32601
SERVER_ERROR = -32000


def _overrides(params: Mapping[str, Any]) -> dict[str, Any]:
    """Config kwargs from the generator block of ``params``."""
    generator = params.get("generator") or {}
    options = generator.get("config") or {}
    output = (generator.get("output") or {}).get("value")

    generator_overrides: dict[str, Any] = {}
    if output:
        generator_overrides["output"] = output
    documentation = parse_flag(options.get("documentation"))
    if documentation is not None:
        generator_overrides["documentation"] = documentation

    overrides: dict[str, Any] = {}
    if generator_overrides:
        overrides["generator"] = generator_overrides
    formatting = parse_flag(options.get("format"))
    if formatting is not None:
        overrides["formatting"] = {"enabled": formatting}
    return overrides


class GeneratorHandler:
    """Dispatches Prisma generator requests."""

    def __init__(self, project_root: Path | None = None) -> None:
        self._project_root = project_root

    def get_manifest(self, params: Mapping[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return {"manifest": {"defaultOutput": DEFAULT_OUTPUT, "prettyName": PRETTY_NAME}}

    def generate(self, params: Mapping[str, Any]) -> None:
        schema_path = params.get("schemaPath")
        base_dir = Path(schema_path).parent if schema_path else self._project_root
        config = load_config(base_dir, **_overrides(params))
        configure_logging(config=config.logging)
        datamodel = extract_datamodel(params.get("dmmf"))
        run_generation(datamodel, config, base_dir=base_dir)

    def handle(self, message: Mapping[str, Any]) -> dict[str, Any] | None:
        """Handle one request and build its response.

        Returns None for notifications (messages without an id).
        """
        request_id = message.get("id")
        method = message.get("method")
        params = message.get("params") or {}
        log.debug("request_received", method=method, id=request_id)

        try:
            if method == "getManifest":
                result: Any = self.get_manifest(params)
            elif method == "generate":
                result = self.generate(params)
            else:
                return _error(request_id, METHOD_NOT_FOUND, f"Unknown method: {method}")
        except SupatypesError as e:
            log.error("request_failed", method=method, error=e.error_name, message=e.message)
            return _error(request_id, SERVER_ERROR, str(e), data=e.to_dict())
        except Exception as e:
            log.exception("request_crashed", method=method)
            error = InternalError.unexpected(str(e) or type(e).__name__, method=method)
            return _error(request_id, SERVER_ERROR, str(error), data=error.to_dict())

        if request_id is None:
            return None
        return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def _error(
    request_id: Any, code: int, message: str, *, data: dict[str, Any] | None = None
) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}


def serve(
    stdin: TextIO,
    stderr: TextIO,
    handler: GeneratorHandler | None = None,
) -> None:
    """Process requests from ``stdin`` until it closes."""
    handler = handler or GeneratorHandler()
    for line in stdin:
        if not line.strip():
            continue
        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            log.warning("request_unparseable", error=str(e))
            continue
        if not isinstance(message, dict):
            log.warning("request_not_object", kind=type(message).__name__)
            continue
        response = handler.handle(message)
        if response is not None:
            stderr.write(json.dumps(response) + "\n")
            stderr.flush()


def main() -> None:
    """Entry point used by ``provider = "prisma-supabase-types"``."""
    configure_logging(level="WARNING")
    serve(sys.stdin, sys.stderr)
