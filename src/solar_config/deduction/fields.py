"""
Field deduction engine.

This module turns one raw body config plus an optional template into a typed
record of physical properties.

Deduction rules
1. Every "first available" choice goes through choose. None is the only absent
   marker, an authored zero or empty string wins over the template.
2. Numeric fields go through parse_float, so a field missing from both the
   config and the template ends up as nan instead of raising.
3. The template is read, never written. A template name that is not in the
   registry behaves like no template at all.

Gravitational parameter and mass are derivable from each other. Exactly one
input strategy is honored, in this order:
gravParameter, geeASL, mass, template gravitational parameter.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Union

from solar_config.config.accessor import BodyConfig, as_body_config, parse_float
from solar_config.config.colors import parse_color
from solar_config.core.constants import (
    DEFAULT_BODY_COLOR,
    EARTH_ACCELERATION,
    GRAVITY_CONSTANT,
    SUN_COLOR,
    SUN_SOI,
)
from solar_config.core.errors import ColorParseError, MissingAttractor
from solar_config.core.types import (
    CelestialBody,
    Orbit,
    OrbitingBody,
    OrbitingBodyData,
    ParsedOrbitingBody,
    TemplateBody,
)
from solar_config.templates.registry import TemplateLookup, TemplateRegistry, as_registry

logger = logging.getLogger(__name__)

RawConfig = Union[BodyConfig, Any]
Templates = Union[TemplateRegistry, TemplateLookup, None]


def choose(*values: Any) -> Any:
    """Return the first value that is not None, or None."""
    for value in values:
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class GravityDeduction:
    """
    Result of the gravitational parameter and mass deduction.

    strategy names the input that won, handy for debug logs and tests.
    One of: gravParameter, geeASL, mass, template.
    """

    std_grav_param: float
    mass: float
    strategy: str


def _lookup_template(config: BodyConfig, templates: TemplateRegistry) -> Optional[TemplateBody]:
    name = config.template_name
    if name is None:
        return None

    template = templates.get(name)
    if template is None:
        logger.warning("template %s of body %s not found, deducing without it", name, config.name)
    return template


def _template_orbit(template: Optional[TemplateBody]) -> Optional[Orbit]:
    # A sun template has no orbit.
    return getattr(template, "orbit", None)


def deduce_atmosphere_altitude(config: BodyConfig, template: Optional[TemplateBody]) -> Optional[float]:
    """
    Atmosphere altitude.

    Returns None when the config has no atmosphere section at all, which is
    not the same thing as an altitude of zero.
    """
    atmosphere = config.atmosphere
    if atmosphere is None:
        return None

    value = choose(
        atmosphere.get("atmosphereDepth"),
        atmosphere.get("altitude"),
        atmosphere.get("maxAltitude"),
        None if template is None else template.atmosphere_alt,
    )
    if value is None:
        return None
    return parse_float(value)


def deduce_grav_param_and_mass(
    config: BodyConfig,
    radius: float,
    template: Optional[TemplateBody],
) -> GravityDeduction:
    """
    Deduce the standard gravitational parameter and the mass.

    Unless mass itself was authored, mass is derived as gp / G. The template's
    mass is never copied, only its gravitational parameter.
    """
    props = config.properties

    if props.get("gravParameter") is not None:
        gp = parse_float(props["gravParameter"])
        return GravityDeduction(std_grav_param=gp, mass=gp / GRAVITY_CONSTANT, strategy="gravParameter")

    if props.get("geeASL") is not None:
        gee_asl = parse_float(props["geeASL"])
        gp = gee_asl * EARTH_ACCELERATION * radius * radius
        return GravityDeduction(std_grav_param=gp, mass=gp / GRAVITY_CONSTANT, strategy="geeASL")

    if props.get("mass") is not None:
        mass = parse_float(props["mass"])
        return GravityDeduction(std_grav_param=mass * GRAVITY_CONSTANT, mass=mass, strategy="mass")

    gp = math.nan if template is None else parse_float(template.std_grav_param)
    return GravityDeduction(std_grav_param=gp, mass=gp / GRAVITY_CONSTANT, strategy="template")


def deduce_mean_anomaly0(config: BodyConfig, template: Optional[TemplateBody]) -> float:
    """
    Mean anomaly at epoch, in radians.

    meanAnomalyAtEpoch is already radians and is used as is.
    meanAnomalyAtEpochD is degrees and is converted.
    """
    orbit = config.orbit

    if orbit.get("meanAnomalyAtEpoch") is not None:
        return parse_float(orbit["meanAnomalyAtEpoch"])

    if orbit.get("meanAnomalyAtEpochD") is not None:
        degrees = parse_float(orbit["meanAnomalyAtEpochD"])
        return degrees * math.pi / 180

    return parse_float(getattr(template, "mean_anomaly0", None))


def deduce_color(config: BodyConfig, template: Optional[TemplateBody]) -> int:
    """
    Authored orbit color, else template color, else white.

    An authored color that does not parse is treated like a missing one.
    """
    authored = config.orbit.get("color")
    if authored is not None:
        try:
            return parse_color(authored)
        except ColorParseError as exc:
            logger.warning("color of body %s ignored: %s", config.name, exc)

    if template is not None and template.color is not None:
        return int(template.color)

    return DEFAULT_BODY_COLOR


def _deduce_orbit(config: BodyConfig, template: Optional[TemplateBody]) -> Orbit:
    orbit = config.orbit
    base = _template_orbit(template)

    def pick(key: str, attr: str) -> float:
        return parse_float(choose(orbit.get(key), None if base is None else getattr(base, attr)))

    return Orbit(
        semi_major_axis=pick("semiMajorAxis", "semi_major_axis"),
        eccentricity=pick("eccentricity", "eccentricity"),
        inclination=pick("inclination", "inclination"),
        arg_of_periapsis=pick("argumentOfPeriapsis", "arg_of_periapsis"),
        asc_node_longitude=pick("longitudeOfAscendingNode", "asc_node_longitude"),
    )


def _deduce_radius(config: BodyConfig, template: Optional[TemplateBody]) -> float:
    return parse_float(choose(config.properties.get("radius"), None if template is None else template.radius))


def parse_to_sun(config: RawConfig, templates: Templates = None) -> CelestialBody:
    """
    Deduce the sun.

    Color and sphere of influence are fixed for the sun, whatever the config
    or the template says.
    """
    cfg = as_body_config(config)
    template = _lookup_template(cfg, as_registry(templates))

    radius = _deduce_radius(cfg, template)
    gravity = deduce_grav_param_and_mass(cfg, radius, template)

    logger.debug("sun %s: gravity from %s", cfg.name, gravity.strategy)

    return CelestialBody(
        name=cfg.name,
        radius=radius,
        mass=gravity.mass,
        std_grav_param=gravity.std_grav_param,
        atmosphere_alt=deduce_atmosphere_altitude(cfg, template),
        soi=SUN_SOI,
        color=SUN_COLOR,
    )


def parse_to_body(config: RawConfig, templates: Templates = None) -> ParsedOrbitingBody:
    """
    Deduce one orbiting body.

    The attractor is kept as the raw referenceBody name. Integer ids are
    assigned later by the linearizer.

    An authored sphereOfInfluence is kept. Otherwise soi stays nan until the
    SOI resolver runs.
    """
    cfg = as_body_config(config)
    template = _lookup_template(cfg, as_registry(templates))

    radius = _deduce_radius(cfg, template)
    gravity = deduce_grav_param_and_mass(cfg, radius, template)

    authored_soi = cfg.properties.get("sphereOfInfluence")
    soi = math.nan if authored_soi is None else parse_float(authored_soi)

    epoch = parse_float(choose(cfg.orbit.get("epoch"), getattr(template, "epoch", None)))

    data = OrbitingBodyData(
        name=cfg.name,
        radius=radius,
        mass=gravity.mass,
        std_grav_param=gravity.std_grav_param,
        orbit=_deduce_orbit(cfg, template),
        mean_anomaly0=deduce_mean_anomaly0(cfg, template),
        epoch=epoch,
        soi=soi,
        atmosphere_alt=deduce_atmosphere_altitude(cfg, template),
        color=deduce_color(cfg, template),
    )

    logger.debug(
        "body %s: gravity from %s, template %s, reference body %s",
        data.name,
        gravity.strategy,
        cfg.template_name,
        cfg.reference_body,
    )

    if cfg.reference_body is None:
        raise MissingAttractor("", cfg.name)

    return ParsedOrbitingBody(reference_body=cfg.reference_body, data=data)


def complete_body_to_unordered(body: OrbitingBody) -> OrbitingBodyData:
    """Drop id and attractor_id from a resolved body."""
    return OrbitingBodyData(
        name=body.name,
        radius=body.radius,
        mass=body.mass,
        std_grav_param=body.std_grav_param,
        orbit=body.orbit,
        mean_anomaly0=body.mean_anomaly0,
        epoch=body.epoch,
        soi=body.soi,
        atmosphere_alt=body.atmosphere_alt,
        color=body.color,
    )
