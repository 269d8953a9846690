from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from mdtoc.models.configs import TOCOptions
from mdtoc.settings import Settings


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    # pyproject-style files keep their settings under [tool.mdtoc]
    tool_section = data.get("tool", {}).get("mdtoc") if isinstance(data.get("tool"), dict) else None
    if isinstance(tool_section, dict):
        return tool_section
    return data


def load_options(path: Path) -> TOCOptions:
    return TOCOptions.model_validate(_load_structured_file(path))


def resolve_options(
    settings: Settings,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> TOCOptions:
    """Layer environment settings, an optional config file and explicit overrides."""

    values = settings.to_options().model_dump()
    if config_path is not None:
        values.update(_load_structured_file(config_path))
    if overrides:
        values.update({key: value for key, value in overrides.items() if value is not None})
    return TOCOptions.model_validate(values)


__all__ = ["load_options", "resolve_options"]
