"""Tests for runner.py."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from supatypes.config.models import FormattingConfig, GeneratorConfig, SupatypesConfig
from supatypes.core.errors import ConfigError, ErrorCode, ModelError
from supatypes.core.logging import get_run_id
from supatypes.runner import extract_datamodel, load_datamodel, run_generation


def make_config(output: str | None = "database.ts", **generator: Any) -> SupatypesConfig:
    return SupatypesConfig(generator=GeneratorConfig(output=output, **generator))


class TestExtractDatamodel:
    """Tests for extract_datamodel function."""

    def test_full_document(self, blog_document: dict[str, Any]) -> None:
        assert extract_datamodel(blog_document) is blog_document["datamodel"]

    def test_bare_datamodel(self, blog_datamodel: dict[str, Any]) -> None:
        assert extract_datamodel(blog_datamodel) is blog_datamodel

    @pytest.mark.parametrize("document", [None, [], "text", {"datamodel": []}, {"other": 1}])
    def test_invalid(self, document: Any) -> None:
        with pytest.raises(ModelError) as exc_info:
            extract_datamodel(document)
        assert exc_info.value.code == ErrorCode.MODEL_INVALID


class TestLoadDatamodel:
    """Tests for load_datamodel function."""

    def test_loads_fixture(self, fixtures_dir: Path, blog_datamodel: dict[str, Any]) -> None:
        assert load_datamodel(fixtures_dir / "blog_dmmf.json") == blog_datamodel

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ModelError) as exc_info:
            load_datamodel(tmp_path / "missing.json")
        assert exc_info.value.code == ErrorCode.MODEL_NOT_FOUND

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ModelError) as exc_info:
            load_datamodel(path)
        assert exc_info.value.code == ErrorCode.MODEL_PARSE_ERROR


class TestRunGeneration:
    """Tests for run_generation function."""

    def test_writes_output(
        self, tmp_path: Path, blog_datamodel: dict[str, Any], blog_expected: str
    ) -> None:
        result = run_generation(blog_datamodel, make_config(), base_dir=tmp_path)

        assert result.destination == tmp_path / "database.ts"
        assert result.destination.read_text(encoding="utf-8") == blog_expected
        assert (result.tables, result.enums, result.composite_types) == (2, 1, 0)
        assert result.duration_seconds >= 0

    def test_missing_output_fails_before_generating(
        self, tmp_path: Path, blog_datamodel: dict[str, Any]
    ) -> None:
        with (
            patch("supatypes.runner.normalize_datamodel") as mock_normalize,
            pytest.raises(ConfigError),
        ):
            run_generation(blog_datamodel, make_config(output=None), base_dir=tmp_path)

        mock_normalize.assert_not_called()
        assert list(tmp_path.iterdir()) == []

    def test_documentation_disabled(self, tmp_path: Path) -> None:
        datamodel = {
            "models": [
                {
                    "name": "T",
                    "documentation": "A table",
                    "fields": [{"name": "id", "kind": "scalar", "type": "Int"}],
                }
            ]
        }
        result = run_generation(
            datamodel, make_config(documentation=False), base_dir=tmp_path
        )
        assert "/**" not in result.destination.read_text()

    def test_formatter_failure_still_writes(
        self, tmp_path: Path, blog_datamodel: dict[str, Any], blog_expected: str
    ) -> None:
        config = make_config()
        config.formatting = FormattingConfig(enabled=True, command=["no-such-formatter"])

        with patch(
            "supatypes.output.formatter.subprocess.run", side_effect=FileNotFoundError()
        ):
            result = run_generation(blog_datamodel, config, base_dir=tmp_path)

        text = result.destination.read_text()
        assert text.endswith("\n")
        assert not text.endswith("\n\n")
        assert text.strip() == blog_expected.strip()

    def test_run_id_cleared(self, tmp_path: Path, blog_datamodel: dict[str, Any]) -> None:
        run_generation(blog_datamodel, make_config(), base_dir=tmp_path)
        assert get_run_id() is None

    def test_model_json_round_trip(self, tmp_path: Path, blog_document: dict[str, Any]) -> None:
        model = tmp_path / "dmmf.json"
        model.write_text(json.dumps(blog_document))

        result = run_generation(load_datamodel(model), make_config(), base_dir=tmp_path)
        assert result.tables == 2
