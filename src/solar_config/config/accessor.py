"""
Config accessor.

Raw body configs arrive as nested mappings, usually straight out of a cfg, json
or yaml parser. We wrap them so the deduction engine asks for named optional
fields instead of poking at dictionaries.

Schema example
{
  "name": "Kerbin",
  "Template": {"name": "Kerbin"},
  "Properties": {"radius": "600000", "geeASL": "1", "sphereOfInfluence": "84159286"},
  "Atmosphere": {"maxAltitude": "70000"},
  "Orbit": {
    "referenceBody": "Sun",
    "semiMajorAxis": "13599840256",
    "meanAnomalyAtEpochD": "179.9",
    "color": "0.4,0.6,1.0,1"
  }
}

A missing key and an explicit null are both "absent". Everything else, zero and
the empty string included, is an authored value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value: Any) -> float:
    """
    Permissive numeric parse.

    Returns nan instead of raising. Strings are read up to the longest numeric
    prefix, so "600000 m" parses as 600000.0 and "abc" parses as nan.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)

    match = _NUMBER_PREFIX.match(str(value).strip())
    if match is None:
        return math.nan

    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


@dataclass(frozen=True)
class BodyConfig:
    """
    Read only view over one raw body config.

    properties and orbit are always mappings, empty when the section is missing.
    atmosphere is None when the section is missing, so callers can tell
    "no atmosphere" apart from "atmosphere with no fields".
    """

    raw: Mapping[str, Any]

    @property
    def name(self) -> str:
        return str(self.raw.get("name", ""))

    @property
    def template_name(self) -> Optional[str]:
        template = self.raw.get("Template")
        if not isinstance(template, Mapping):
            return None
        name = template.get("name")
        return None if name is None else str(name)

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._section("Properties") or {}

    @property
    def orbit(self) -> Mapping[str, Any]:
        return self._section("Orbit") or {}

    @property
    def atmosphere(self) -> Optional[Mapping[str, Any]]:
        return self._section("Atmosphere")

    @property
    def reference_body(self) -> Optional[str]:
        ref = self.orbit.get("referenceBody")
        return None if ref is None else str(ref)

    def _section(self, key: str) -> Optional[Mapping[str, Any]]:
        section = self.raw.get(key)
        if section is None:
            return None
        if not isinstance(section, Mapping):
            raise TypeError(f"config section {key} of {self.name!r} must be a mapping")
        return section


def as_body_config(config: Union[BodyConfig, Mapping[str, Any]]) -> BodyConfig:
    """Accept either a BodyConfig or a raw mapping."""
    if isinstance(config, BodyConfig):
        return config
    return BodyConfig(raw=config)
