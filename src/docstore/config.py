"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
CONFIG_ENV = "DOCSTORE_CONFIG"


class Settings(BaseModel):
    app_name:    str = "docstore"
    seed_file:   Optional[str] = Field(default=None, description="Default seed file for CLI commands")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    json_indent: int = Field(default=2, ge=0, description="Indent for JSON output; 0 = compact")


def _config_path(config_file: str | None) -> Path | None:
    """Pick the config file: explicit argument, then DOCSTORE_CONFIG, then ./config.yaml if present."""
    explicit = config_file or os.getenv(CONFIG_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        return path
    path = Path(CONFIG_FILE)
    return path if path.exists() else None


def _read_config(path: Path) -> dict[str, Any]:
    """Parse the YAML config; a relative seed_file is resolved against the config's directory."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")

    seed = data.get("seed_file")
    if seed and not Path(seed).is_absolute():
        data["seed_file"] = str(path.parent / seed)
    return data


def load_config(overrides: dict[str, Any] = None, config_file: str | None = None) -> Settings:
    """Load Settings from the config file, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    Env and CLI values for seed_file are used as given (relative to the working directory).
    """
    path = _config_path(config_file)
    data: dict[str, Any] = _read_config(path) if path else {}

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
