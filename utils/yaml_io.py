from __future__ import annotations
from pathlib import Path
from typing import Any
import json
import yaml


def read_yaml(path: Path) -> Any:
    """
    Reads a definition file. *.json goes through json (the harness historically
    ships workloads.json); anything else is parsed as YAML.
    Raises OSError / ValueError / yaml.YAMLError, callers wrap them.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)
