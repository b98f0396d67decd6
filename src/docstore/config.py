"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from docstore.util.files import read_yaml


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:  str = "docstore"
    data_file: str = Field(default="documents.yaml", description="YAML file the CLI seeds its store from")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings; later sources win: defaults, config.yaml, DOCSTORE_<FIELD> env vars, CLI overrides.

    Raises ValueError when config.yaml is unreadable or not a mapping.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        data = read_yaml(Path(CONFIG_FILE)) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping of settings")

    env = {name: os.getenv(f"DOCSTORE_{name.upper()}") for name in Settings.model_fields}
    data.update({k: v for k, v in env.items() if v})
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
