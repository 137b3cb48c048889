"""
Core types.

This file defines the shared data structures used across the converter.

Important design choice
Orbiting bodies exist in two shapes.

Unordered shape:
OrbitingBodyData is what field deduction produces. It knows its attractor only
by name, carried next to it in ParsedOrbitingBody.

Ordered shape:
OrbitingBody is what linearization produces. It carries its own integer id and
the integer id of its attractor. Names are no longer used as references.

Unknown numeric values are float("nan"), never None, so downstream math keeps
working and consumers decide how strict they want to be.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from solar_config.core.constants import DEFAULT_BODY_COLOR, SUN_COLOR, SUN_ID, SUN_SOI


def _nan() -> float:
    return math.nan


@dataclass(frozen=True)
class Orbit:
    """
    Keplerian orbital elements.

    semi_major_axis is in meters.
    inclination, arg_of_periapsis and asc_node_longitude are passed through
    in whatever angular unit the config authored them.
    """

    semi_major_axis: float = field(default_factory=_nan)
    eccentricity: float = field(default_factory=_nan)
    inclination: float = field(default_factory=_nan)
    arg_of_periapsis: float = field(default_factory=_nan)
    asc_node_longitude: float = field(default_factory=_nan)


@dataclass
class CelestialBody:
    """
    The sun of a system.

    There is exactly one per system. It is the root of the hierarchy, it has no
    attractor, its id is always 0 and its sphere of influence is unbounded.

    atmosphere_alt is None when the config has no atmosphere section at all.
    That is different from an authored altitude of zero.
    """

    name: str
    radius: float
    mass: float
    std_grav_param: float
    atmosphere_alt: Optional[float] = None
    soi: float = SUN_SOI
    color: int = SUN_COLOR
    id: int = SUN_ID


@dataclass
class OrbitingBodyData:
    """
    An orbiting body before linearization.

    soi is nan when the config did not author it. The SOI resolver fills it
    after ids are known.
    """

    name: str
    radius: float
    mass: float
    std_grav_param: float
    orbit: Orbit
    mean_anomaly0: float
    epoch: float
    soi: float = field(default_factory=_nan)
    atmosphere_alt: Optional[float] = None
    color: int = DEFAULT_BODY_COLOR


@dataclass(frozen=True)
class ParsedOrbitingBody:
    """
    Deduction output for one orbiting body.

    reference_body is the raw attractor name from the config.
    """

    reference_body: str
    data: OrbitingBodyData


@dataclass
class OrbitingBody:
    """
    An orbiting body after linearization.

    id is the position of the body in traversal order, sun excluded from the
    list but counted, so the first orbiting body has id 1.
    attractor_id is 0 for bodies orbiting the sun.
    """

    id: int
    attractor_id: int
    name: str
    radius: float
    mass: float
    std_grav_param: float
    orbit: Orbit
    mean_anomaly0: float
    epoch: float
    soi: float = field(default_factory=_nan)
    atmosphere_alt: Optional[float] = None
    color: int = DEFAULT_BODY_COLOR


TemplateBody = Union[CelestialBody, OrbitingBodyData, OrbitingBody]


@dataclass
class ResolvedSystem:
    """
    Final converter output.

    bodies is ordered by id, so bodies[i] has id i + 1.
    """

    sun: CelestialBody
    bodies: List[OrbitingBody] = field(default_factory=list)

    def body_by_id(self, body_id: int) -> Union[CelestialBody, OrbitingBody]:
        """Return the sun for id 0, otherwise the orbiting body with that id."""
        if body_id == SUN_ID:
            return self.sun
        return self.bodies[body_id - 1]

    def body_by_name(self, name: str) -> Optional[Union[CelestialBody, OrbitingBody]]:
        """Return the body with that name if present."""
        if name == self.sun.name:
            return self.sun
        for body in self.bodies:
            if body.name == name:
                return body
        return None

    def names(self) -> List[str]:
        """Return body names in id order, sun first."""
        return [self.sun.name] + [b.name for b in self.bodies]
