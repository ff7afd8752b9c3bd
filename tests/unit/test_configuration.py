"""Unit tests for loading the configuration."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from textprobe.configuration import load_configuration


@pytest.mark.unit
class TestLoadConfiguration:
    """Test reading settings from TOML and the environment."""

    def test_missing_file_uses_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test defaults are used without a configuration file."""
        monkeypatch.delenv("CEREBRAS_API_KEY", raising=False)

        configuration = load_configuration(tmp_path / "missing.toml")

        assert configuration.api_port == 7123
        assert configuration.api_rate_limiter_interval == timedelta(seconds=1)
        assert configuration.cerebras_api_key is None
        assert configuration.tuning_file is None

    def test_values_from_file(self, tmp_path: Path) -> None:
        """Test settings are read from the file."""
        configuration_file = tmp_path / "config.toml"
        configuration_file.write_text(
            "api_port = 8000\n"
            "api_rate_limiter_interval = 60\n"
            'tuning_file = "custom.toml"\n'
            "sanitise_by_default = true\n",
            encoding="utf-8",
        )

        configuration = load_configuration(configuration_file)

        assert configuration.api_port == 8000
        assert configuration.api_rate_limiter_interval == timedelta(minutes=1)
        assert configuration.tuning_file == Path("custom.toml")
        assert configuration.sanitise_by_default

    def test_api_key_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the environment provides the key missing in the file."""
        monkeypatch.setenv("CEREBRAS_API_KEY", "from-env")

        configuration = load_configuration(tmp_path / "missing.toml")

        assert configuration.cerebras_api_key == "from-env"

    def test_api_key_in_file_wins(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the key from the file takes precedence."""
        monkeypatch.setenv("CEREBRAS_API_KEY", "from-env")
        configuration_file = tmp_path / "config.toml"
        configuration_file.write_text(
            'cerebras_api_key = "from-file"\n', encoding="utf-8"
        )

        configuration = load_configuration(configuration_file)

        assert configuration.cerebras_api_key == "from-file"

    def test_invalid_limit(self, tmp_path: Path) -> None:
        """Test invalid values are rejected."""
        configuration_file = tmp_path / "config.toml"
        configuration_file.write_text(
            "api_max_requests_per_interval = 0\n", encoding="utf-8"
        )

        with pytest.raises(ValidationError):
            load_configuration(configuration_file)
