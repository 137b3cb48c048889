"""
Linearization.

Turns parsed bodies into ordered bodies with integer ids.

Ids follow the depth first order of the system tree. The sun is 0, so the
body at position i of the walk gets id i and attractor ids always point to a
body that was emitted earlier.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from solar_config.core.constants import SUN_ID
from solar_config.core.types import OrbitingBody, ParsedOrbitingBody
from solar_config.hierarchy.tree import build_system_tree, depth_first_order, sort_children_by_orbit

logger = logging.getLogger(__name__)


def assign_ids(ordered_names: List[str]) -> Dict[str, int]:
    """Map each name to its position in the walk."""
    return {name: idx for idx, name in enumerate(ordered_names)}


def find_unreachable(parsed: Iterable[ParsedOrbitingBody], ordered_names: List[str]) -> List[str]:
    """
    Return names of bodies the walk never reached, sorted.

    Only possible when references form a cycle that does not lead to the sun.
    """
    reached = set(ordered_names)
    return sorted({p.data.name for p in parsed if p.data.name not in reached})


def order_orbiting_bodies(
    parsed: List[ParsedOrbitingBody],
    sun_name: str,
    warn_unreachable: bool = True,
) -> List[OrbitingBody]:
    """
    Linearize parsed bodies.

    Behavior
    1. Build the tree by name, unknown attractors raise MissingAttractor.
    2. Sort siblings by descending semi-major axis.
    3. Walk depth first from the sun and number the walk from 0.
    4. Re-emit every body after the sun with its own id and its attractor id.

    The returned list is in id order, so result[i].id == i + 1.
    """
    by_name: Dict[str, ParsedOrbitingBody] = {p.data.name: p for p in parsed}

    tree = build_system_tree(parsed, sun_name)
    sort_children_by_orbit(tree, by_name)

    ordered_names = depth_first_order(tree, sun_name)
    ids = assign_ids(ordered_names)

    logger.debug("linearized order: %s", ordered_names)

    if warn_unreachable:
        unreachable = find_unreachable(parsed, ordered_names)
        if unreachable:
            logger.warning("bodies not reachable from %s were dropped: %s", sun_name, unreachable)

    ordered: List[OrbitingBody] = []
    for idx in range(SUN_ID + 1, len(ordered_names)):
        info = by_name[ordered_names[idx]]
        data = info.data
        ordered.append(
            OrbitingBody(
                id=idx,
                attractor_id=ids[info.reference_body],
                name=data.name,
                radius=data.radius,
                mass=data.mass,
                std_grav_param=data.std_grav_param,
                orbit=data.orbit,
                mean_anomaly0=data.mean_anomaly0,
                epoch=data.epoch,
                soi=data.soi,
                atmosphere_alt=data.atmosphere_alt,
                color=data.color,
            )
        )

    return ordered
