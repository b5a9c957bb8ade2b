from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import yaml

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a fit config mapping from YAML (.yaml/.yml) or JSON (.json).

    Parse errors and non-mapping documents are raised as ValueError naming the file.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    suffix = p.suffix.lower()
    if suffix not in _YAML_SUFFIXES and suffix != ".json":
        raise ValueError(f"Unsupported config format '{suffix}' for {p}; use .yaml, .yml or .json")
    text = p.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if suffix in _YAML_SUFFIXES else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid config {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {p} must be a mapping at top level; got {type(data).__name__}")
    return data


def _to_builtin(obj: Any) -> Any:
    # numpy scalars and arrays show up in coefficient and metric payloads
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dump_json(obj: Any) -> str:
    return json.dumps(
        obj, ensure_ascii=False, sort_keys=True, separators=(",", ":"), default=_to_builtin
    )
