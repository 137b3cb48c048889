"""
System converter.

This is the composition layer of the package. It sequences

1. field deduction for the sun and every orbiting body
2. tree building and linearization
3. sphere of influence backfill
4. optional strict validation

Every step is a pure transformation over in memory records, except the SOI
backfill which fills the already emitted bodies in place as the final step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from solar_config.core.errors import IncompleteSystem
from solar_config.core.types import ResolvedSystem
from solar_config.deduction.fields import RawConfig, Templates, parse_to_body, parse_to_sun
from solar_config.derived.soi import recompute_sois
from solar_config.hierarchy.ordering import order_orbiting_bodies
from solar_config.templates.registry import as_registry
from solar_config.validation import validate_system

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterConfig:
    """
    Converter configuration.

    strict
    Run the strict validation pass and raise IncompleteSystem on failure.

    warn_unreachable
    Log bodies the traversal never reached.
    """

    strict: bool = False
    warn_unreachable: bool = True


def convert_system(
    sun_config: RawConfig,
    sun_templates: Templates,
    body_configs: Iterable[Any],
    body_templates: Templates,
    sun_name: Optional[str] = None,
    config: ConverterConfig | None = None,
) -> ResolvedSystem:
    """
    Convert raw configs into a resolved system.

    sun_name defaults to the name deduced from the sun config. When given, it
    is the name orbiting bodies refer to as their reference body.

    Raises MissingAttractor when a body refers to an unknown attractor.
    With config.strict, raises IncompleteSystem when any field stayed nan.
    """
    cfg = config or ConverterConfig()
    sun_registry = as_registry(sun_templates)
    body_registry = as_registry(body_templates)

    sun = parse_to_sun(sun_config, sun_registry)
    if sun_name is not None:
        sun.name = sun_name

    parsed = [parse_to_body(body, body_registry) for body in body_configs]
    bodies = order_orbiting_bodies(parsed, sun.name, warn_unreachable=cfg.warn_unreachable)

    filled = recompute_sois(bodies, sun)
    logger.debug("resolved %d orbiting bodies around %s, %d computed SOIs", len(bodies), sun.name, filled)

    system = ResolvedSystem(sun=sun, bodies=bodies)

    if cfg.strict:
        result = validate_system(system)
        if not result.ok:
            raise IncompleteSystem(result.errors)
        for warning in result.warnings:
            logger.warning(warning)

    return system


class SystemConverter:
    """
    Converter bound to a configuration and a pair of template registries.

    Handy when several systems share the same stock templates.
    """

    def __init__(
        self,
        sun_templates: Templates = None,
        body_templates: Templates = None,
        config: ConverterConfig | None = None,
    ) -> None:
        self._config = config or ConverterConfig()
        self._sun_templates = as_registry(sun_templates)
        self._body_templates = as_registry(body_templates)

    def convert(
        self,
        sun_config: RawConfig,
        body_configs: Iterable[Any],
        sun_name: Optional[str] = None,
    ) -> ResolvedSystem:
        """Convert one system."""
        return convert_system(
            sun_config,
            self._sun_templates,
            body_configs,
            self._body_templates,
            sun_name=sun_name,
            config=self._config,
        )
