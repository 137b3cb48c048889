"""
Static system source.

Reads a local json or yaml file that describes one system.
Files ending in .yml or .yaml are read with PyYAML, everything else as json.

Schema example
{
  "sun": {
    "name": "Sun",
    "Properties": {"radius": "261600000", "gravParameter": "1.1723328e18"}
  },
  "bodies": [
    {
      "name": "Kerbin",
      "Properties": {"radius": "600000", "geeASL": "1"},
      "Orbit": {"referenceBody": "Sun", "semiMajorAxis": "13599840256"}
    }
  ]
}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from solar_config.core.errors import ConfigSourceError
from solar_config.sources.base import SystemConfig, SystemSource

_YAML_SUFFIXES = {".yml", ".yaml"}


def _read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigSourceError(f"cannot parse system file {path}: {exc}") from exc


def system_from_dict(obj: Any, origin: str = "<memory>") -> SystemConfig:
    """Convert a loaded document into SystemConfig."""
    if not isinstance(obj, dict):
        raise ConfigSourceError(f"system file {origin} must contain a mapping")

    sun = obj.get("sun")
    if not isinstance(sun, dict):
        raise ConfigSourceError(f"system file {origin} has no sun mapping")

    bodies = obj.get("bodies", []) or []
    if not isinstance(bodies, list):
        raise ConfigSourceError(f"bodies of system file {origin} must be a list")

    for idx, body in enumerate(bodies):
        if not isinstance(body, dict):
            raise ConfigSourceError(f"body at index {idx} of system file {origin} must be a mapping, got {body!r}")

    return SystemConfig(sun=sun, bodies=list(bodies))


@dataclass(frozen=True)
class StaticSystemSource(SystemSource):
    """
    Load a system from a local json or yaml file.

    path points to a file that matches the schema described in the module docstring.
    """

    path: Path

    def load(self) -> SystemConfig:
        return system_from_dict(_read_document(self.path), origin=str(self.path))
