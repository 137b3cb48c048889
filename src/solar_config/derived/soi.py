"""
Sphere of influence backfill.

Runs after linearization. Every orbiting body whose sphere of influence was not
authored gets the Laplace approximation

  soi = a * (m / M) ** (2 / 5)

where a is the body's semi-major axis, m its mass and M the mass of its
attractor. Masses never depend on a computed SOI, so the only ordering
requirement is that attractor ids are already resolved.

A massless attractor gives an unbounded SOI for a body with positive mass.
A negative mass ratio has no real root and leaves the SOI as nan.
"""

from __future__ import annotations

import logging
import math
from typing import List, Union

from solar_config.core.constants import SOI_EXPONENT, SUN_ID
from solar_config.core.types import CelestialBody, OrbitingBody

logger = logging.getLogger(__name__)


def sphere_of_influence(semi_major_axis: float, mass: float, attractor_mass: float) -> float:
    """Laplace sphere of influence radius."""
    if attractor_mass == 0 and mass > 0:
        return semi_major_axis * math.inf
    return semi_major_axis * math.pow(mass / attractor_mass, SOI_EXPONENT)


def attractor_of(
    body: OrbitingBody,
    orbiting: List[OrbitingBody],
    sun: CelestialBody,
) -> Union[CelestialBody, OrbitingBody]:
    """Return the sun for attractor id 0, else the orbiting body with that id."""
    if body.attractor_id == SUN_ID:
        return sun
    return orbiting[body.attractor_id - 1]


def recompute_sois(orbiting: List[OrbitingBody], sun: CelestialBody) -> int:
    """
    Fill every nan SOI in place.

    orbiting must be in id order. Authored SOIs are left untouched.
    Returns the number of bodies that were filled.
    """
    filled = 0
    for body in orbiting:
        if not math.isnan(body.soi):
            continue

        attractor = attractor_of(body, orbiting, sun)
        try:
            body.soi = sphere_of_influence(body.orbit.semi_major_axis, body.mass, attractor.mass)
        except (ValueError, ZeroDivisionError):
            # No real root, keep the gap visible.
            logger.warning("sphere of influence of %s is undefined against %s", body.name, attractor.name)
            body.soi = math.nan
        filled += 1

    return filled
