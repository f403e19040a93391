"""Runtime settings: optional YAML file, `.env` and environment variables.

Environment variables win over the file:

    API_KEY           credential for the enrichment service (absent = disabled)
    CODIZER_MODEL     litellm model name
    CODIZER_TIMEOUT   enrichment timeout in seconds
"""

import os
from pathlib import Path
from typing import Mapping

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

from codizer.llm import DEFAULT_MODEL, DEFAULT_TIMEOUT

ENV_VARS = {
    "API_KEY": "api_key",
    "CODIZER_MODEL": "model",
    "CODIZER_TIMEOUT": "timeout",
}


class ConfigError(ValueError):
    """Configuration file or values could not be loaded."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    output_suffixes: dict[str, str] = {}  # family name -> output file suffix


def load_settings(config_path: Path | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from `config_path` (YAML) and the environment.

    When `environ` is omitted, a `.env` file is loaded into the process
    environment first and `os.environ` is used.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    data = _read_yaml(config_path) if config_path is not None else {}
    for env_name, key in ENV_VARS.items():
        value = environ.get(env_name)
        if value:
            data[key] = value

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _read_yaml(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read config file: {path}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data
