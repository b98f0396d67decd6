"""YAML file reading shared by the config and document loaders"""

from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    """Return the parsed YAML content of path.

    Raises ValueError for invalid YAML or when the file cannot be read (e.g. it is a directory).
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Could not read {path}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e
