"""
System writer.

Turns a ResolvedSystem into plain containers and yaml text for downstream
tools. Floats are kept as floats, so inf and nan survive; PyYAML writes them
as .inf and .nan. Colors are written as integers.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import yaml

from solar_config.core.types import ResolvedSystem


def _normalize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_normalize(v) for v in obj]
    return obj


def system_to_dict(system: ResolvedSystem) -> dict[str, Any]:
    """
    Convert a resolved system into a dict.

    Shape
    {"sun": {...}, "bodies": [{...}, ...]} with bodies in id order.
    """
    raw = {
        "sun": asdict(system.sun),
        "bodies": [asdict(body) for body in system.bodies],
    }
    normalized = _normalize(raw)
    if not isinstance(normalized, dict):
        raise TypeError("expected dict after normalization")
    return normalized


def dump_system_yaml(system: ResolvedSystem, path: Optional[Path] = None) -> str:
    """
    Serialize a resolved system to yaml.

    Returns the yaml text, and also writes it when path is given.
    """
    text = yaml.safe_dump(system_to_dict(system), sort_keys=False)
    if path is not None:
        path.write_text(text, encoding="utf-8")
    return text
