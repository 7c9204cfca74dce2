"""Tests for config/models.py."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from supatypes.config.constants import DEFAULT_FORMATTER_COMMAND
from supatypes.config.models import (
    FormattingConfig,
    GeneratorConfig,
    LogOutputConfig,
    SupatypesConfig,
)


class TestLogOutputConfig:
    """Log output destination validation."""

    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_streams_accepted(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_absolute_path_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "supatypes.log"
        assert LogOutputConfig(destination=str(path)).destination == str(path)

    def test_relative_path_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="logs/supatypes.log")


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.documentation is True
        assert config.output is None


class TestFormattingConfig:
    """Formatting pass settings."""

    def test_defaults(self) -> None:
        config = FormattingConfig()
        assert config.enabled is False
        assert config.command == list(DEFAULT_FORMATTER_COMMAND)
        assert config.timeout_sec == 30.0

    def test_default_command_not_shared(self) -> None:
        first = FormattingConfig()
        first.command.append("--extra")
        assert FormattingConfig().command == list(DEFAULT_FORMATTER_COMMAND)

    def test_empty_command_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormattingConfig(command=[])

    @pytest.mark.parametrize("timeout", [0, -5, 601])
    def test_timeout_out_of_range(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            FormattingConfig(timeout_sec=timeout)


def test_root_config_sections() -> None:
    config = SupatypesConfig()
    assert config.logging.level == "WARNING"
    assert len(config.logging.outputs) == 1
    assert config.generator == GeneratorConfig()
    assert config.formatting == FormattingConfig()
