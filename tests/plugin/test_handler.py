"""Tests for the Prisma generator protocol handler."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from supatypes.config.constants import DEFAULT_OUTPUT, PRETTY_NAME
from supatypes.plugin.handler import (
    METHOD_NOT_FOUND,
    SERVER_ERROR,
    GeneratorHandler,
    _overrides,
    serve,
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    with (
        patch("supatypes.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"),
        patch.dict("os.environ", {}, clear=True),
    ):
        yield


def generate_params(
    document: dict[str, Any], schema_dir: Path, output: str, **config: str
) -> dict[str, Any]:
    return {
        "dmmf": document,
        "schemaPath": str(schema_dir / "schema.prisma"),
        "generator": {"output": {"value": output}, "config": config},
    }


class TestOverrides:
    """Tests for generator block option mapping."""

    def test_empty(self) -> None:
        assert _overrides({}) == {}

    def test_output_and_flags(self) -> None:
        params = {
            "generator": {
                "output": {"value": "/abs/database.ts"},
                "config": {"documentation": "false", "format": "true"},
            }
        }
        assert _overrides(params) == {
            "generator": {"output": "/abs/database.ts", "documentation": False},
            "formatting": {"enabled": True},
        }

    def test_unrecognised_flag_ignored(self) -> None:
        params = {"generator": {"config": {"documentation": "sometimes"}}}
        assert _overrides(params) == {}


class TestGeneratorHandler:
    """Tests for request dispatch."""

    def test_get_manifest(self) -> None:
        response = GeneratorHandler().handle({"jsonrpc": "2.0", "id": 1, "method": "getManifest"})

        assert response == {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {"manifest": {"defaultOutput": DEFAULT_OUTPUT, "prettyName": PRETTY_NAME}},
        }

    def test_generate_writes_output(
        self, tmp_path: Path, blog_document: dict[str, Any], blog_expected: str
    ) -> None:
        output = tmp_path / "generated" / "database.ts"
        message = {
            "jsonrpc": "2.0",
            "id": 2,
            "method": "generate",
            "params": generate_params(blog_document, tmp_path, str(output)),
        }

        response = GeneratorHandler().handle(message)

        assert response == {"jsonrpc": "2.0", "id": 2, "result": None}
        assert output.read_text() == blog_expected

    def test_generate_relative_output_uses_schema_dir(
        self, tmp_path: Path, blog_document: dict[str, Any]
    ) -> None:
        params = generate_params(blog_document, tmp_path, "database.ts", documentation="false")

        GeneratorHandler().handle({"id": 3, "method": "generate", "params": params})

        assert (tmp_path / "database.ts").exists()

    def test_generate_failure_is_error_response(self, tmp_path: Path) -> None:
        params = generate_params({"datamodel": "nope"}, tmp_path, "database.ts")

        response = GeneratorHandler().handle({"id": 4, "method": "generate", "params": params})

        assert response is not None
        assert response["id"] == 4
        assert response["error"]["code"] == SERVER_ERROR
        assert response["error"]["data"]["error"] == "MODEL_INVALID"

    def test_unknown_method(self) -> None:
        response = GeneratorHandler().handle({"id": 5, "method": "shutdown"})

        assert response is not None
        assert response["error"]["code"] == METHOD_NOT_FOUND

    def test_notification_has_no_response(self) -> None:
        assert GeneratorHandler().handle({"method": "getManifest"}) is None


class TestServe:
    """Tests for the stdin/stderr loop."""

    def test_responses_written_one_per_line(self) -> None:
        stdin = StringIO(
            "\n".join(
                [
                    json.dumps({"jsonrpc": "2.0", "id": 1, "method": "getManifest"}),
                    "",
                    "not json",
                    json.dumps({"jsonrpc": "2.0", "id": 2, "method": "unknown"}),
                ]
            )
        )
        stderr = StringIO()

        serve(stdin, stderr)

        lines = stderr.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["id"] == 1
        assert json.loads(lines[1])["error"]["code"] == METHOD_NOT_FOUND


class TestUnexpectedFailures:
    """Errors outside the SupatypesError hierarchy still get a response."""

    def test_malformed_model_is_internal_error(self, tmp_path: Path) -> None:
        document = {"datamodel": {"models": [{"fields": []}]}}
        params = generate_params(document, tmp_path, "database.ts")

        response = GeneratorHandler().handle({"id": 7, "method": "generate", "params": params})

        assert response is not None
        assert response["id"] == 7
        assert response["error"]["code"] == SERVER_ERROR
        assert response["error"]["data"]["error"] == "INTERNAL_ERROR"
        assert response["error"]["data"]["details"] == {"method": "generate"}

    def test_serve_keeps_running_after_crash(self, tmp_path: Path) -> None:
        params = generate_params({"datamodel": {"models": [{}]}}, tmp_path, "database.ts")
        stdin = StringIO(
            "\n".join(
                [
                    json.dumps({"jsonrpc": "2.0", "id": 1, "method": "generate", "params": params}),
                    json.dumps([1, 2]),
                    json.dumps({"jsonrpc": "2.0", "id": 2, "method": "getManifest"}),
                ]
            )
        )
        stderr = StringIO()

        serve(stdin, stderr)

        responses = [json.loads(line) for line in stderr.getvalue().splitlines()]
        assert [r["id"] for r in responses] == [1, 2]
        assert "error" in responses[0]
        assert "result" in responses[1]


class TestLoggingSetup:
    def test_generate_applies_project_logging_config(
        self, tmp_path: Path, blog_document: dict[str, Any]
    ) -> None:
        (tmp_path / "supatypes.yaml").write_text("logging:\n  level: INFO\n")
        params = generate_params(blog_document, tmp_path, "database.ts")

        with patch("supatypes.plugin.handler.configure_logging") as mock_configure:
            GeneratorHandler().handle({"id": 8, "method": "generate", "params": params})

        mock_configure.assert_called_once()
        assert mock_configure.call_args.kwargs["config"].level == "INFO"
