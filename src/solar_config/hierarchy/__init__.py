"""
Hierarchy package.

Attractor tree construction and deterministic linearization.
"""

from solar_config.hierarchy.ordering import order_orbiting_bodies
from solar_config.hierarchy.tree import build_system_tree, depth_first_order, sort_children_by_orbit

__all__ = ["build_system_tree", "depth_first_order", "order_orbiting_bodies", "sort_children_by_orbit"]
