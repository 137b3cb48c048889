"""
System source interfaces.

Goal
Provide pluggable ingestion of raw system configs.

A source returns raw, unresolved configs. Resolution is the converter's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol


@dataclass(frozen=True)
class SystemConfig:
    """
    Raw configs of one system.

    sun is the raw sun config mapping.
    bodies are the raw orbiting body config mappings, in file order.
    """

    sun: Dict[str, Any]
    bodies: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def sun_name(self) -> str:
        return str(self.sun.get("name", ""))


class SystemSource(Protocol):
    """
    System source interface.

    load returns the raw configs of one system.
    """

    def load(self) -> SystemConfig:
        """Load the system."""
