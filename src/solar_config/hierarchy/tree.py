"""
System tree.

This module converts the flat referenceBody names of parsed bodies into a tree
rooted at the sun, and walks it in a deterministic order.

What is a SystemTree
- keys: every known body name, sun included
- values: ordered list of child names, the bodies that orbit the key

Design goals
1. Build by name first, no ids and no back references while the tree is built.
2. Keep the sibling order a pure function of the orbits, never of config order.
3. An unknown attractor aborts the build. There is no partial tree.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Mapping, Set

from solar_config.core.errors import MissingAttractor
from solar_config.core.types import ParsedOrbitingBody

logger = logging.getLogger(__name__)

SystemTree = Dict[str, List[str]]


def build_system_tree(parsed: Iterable[ParsedOrbitingBody], sun_name: str) -> SystemTree:
    """
    Build the attractor tree.

    Behavior
    1. Every known name gets an empty child list, so leaves are keys too.
    2. Each body is appended to the child list of its reference body, in input order.
    3. A reference body that is not a known name raises MissingAttractor.
    """
    bodies = list(parsed)

    tree: SystemTree = {sun_name: []}
    for body in bodies:
        if body.data.name in tree:
            logger.warning("body name %s is declared more than once", body.data.name)
        tree[body.data.name] = []

    for body in bodies:
        children = tree.get(body.reference_body)
        if children is None:
            raise MissingAttractor(body.reference_body, body.data.name)
        children.append(body.data.name)

    return tree


def _semi_major_axis_key(value: float) -> float:
    # nan compares false both ways, so it would break the sort. Treat it as the smallest orbit.
    return -math.inf if math.isnan(value) else value


def sort_children_by_orbit(tree: SystemTree, bodies: Mapping[str, ParsedOrbitingBody]) -> SystemTree:
    """
    Sort every child list by descending semi-major axis, in place.

    The depth first walk pushes children in list order, so the largest orbit is
    pushed first and the smallest orbit is popped, and emitted, first.
    Equal axes keep their input order.
    """
    for children in tree.values():
        children.sort(
            key=lambda name: _semi_major_axis_key(bodies[name].data.orbit.semi_major_axis),
            reverse=True,
        )
    return tree


def depth_first_order(tree: Mapping[str, List[str]], root: str) -> List[str]:
    """
    Stack based depth first walk from root.

    Each popped node is emitted and marked visited, then its children are
    pushed in list order. A visited node is never pushed or emitted again,
    so a cycle cannot loop forever.
    """
    visited: Set[str] = set()
    stack: List[str] = [root]
    result: List[str] = []

    while stack:
        node = stack.pop()
        if node in visited:
            continue

        result.append(node)
        visited.add(node)

        for child in tree.get(node, []):
            if child not in visited:
                stack.append(child)

    return result
