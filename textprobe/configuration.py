"""The configuration module."""

import os
import tomllib
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "textprobe"

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 7123
    api_max_requests_per_interval: int = Field(5, ge=1)
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)
    cors_origins: list[str] = ["*"]
    apianalyticsdev_api_key: str | None = None

    # Uses the tables shipped with the package if not set.
    tuning_file: Path | None = None
    sanitise_by_default: bool = False

    cerebras_api_key: str | None = None
    llm_model: str = "gpt-oss-120b"
    llm_cache_directory: Path = Path(".cache/llm")


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Defaults are used for settings missing in the file or if there is no file at
    all. The Cerebras API key falls back to the `CEREBRAS_API_KEY` environment
    variable.
    """
    settings = {}
    if configuration_file.exists():
        with configuration_file.open("rb") as f:
            settings = tomllib.load(f)

    if not settings.get("cerebras_api_key"):
        settings["cerebras_api_key"] = os.environ.get("CEREBRAS_API_KEY")
    return Configuration(**settings)


config = load_configuration()
