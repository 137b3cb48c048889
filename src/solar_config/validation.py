"""
Strict validation.

Conversion is permissive on purpose: anything that could not be deduced is a
nan and the converter keeps going. This pass is the optional stricter
consumer. It reports every unresolved numeric field so callers can refuse an
incomplete system before writing it out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Dict, List, Union

from solar_config.core.types import CelestialBody, OrbitingBody, ResolvedSystem

_BODY_FIELDS = ("radius", "mass", "std_grav_param")
_ORBITING_FIELDS = ("mean_anomaly0", "epoch", "soi")


@dataclass
class SystemValidationResult:
    """
    Result of system validation.

    ok means no blocking errors.
    errors are blocking, one per unresolved field.
    warnings are non blocking, such as a non positive mass.
    evidence maps body name to the list of unresolved field names.
    """

    ok: bool
    errors: List[str]
    warnings: List[str]
    evidence: Dict[str, object]


def _is_missing(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _missing_fields(body: Union[CelestialBody, OrbitingBody]) -> List[str]:
    missing = [name for name in _BODY_FIELDS if _is_missing(getattr(body, name))]
    if _is_missing(body.atmosphere_alt):
        missing.append("atmosphere_alt")

    if isinstance(body, OrbitingBody):
        for f in fields(body.orbit):
            if _is_missing(getattr(body.orbit, f.name)):
                missing.append(f"orbit.{f.name}")
        missing.extend(name for name in _ORBITING_FIELDS if _is_missing(getattr(body, name)))

    return missing


def validate_system(system: ResolvedSystem) -> SystemValidationResult:
    """
    Validate a resolved system.

    Validations
    1. No numeric field of any body is nan.
    2. Masses are positive, otherwise a warning. Physical plausibility is not
       enforced beyond that.
    """
    errors: List[str] = []
    warnings: List[str] = []
    evidence: Dict[str, object] = {}

    for body in [system.sun, *system.bodies]:
        missing = _missing_fields(body)
        if missing:
            evidence[body.name] = missing
            for name in missing:
                errors.append(f"body {body.name} has unresolved field {name}")

        if not _is_missing(body.mass) and body.mass <= 0:
            warnings.append(f"body {body.name} has non positive mass {body.mass}")

    ok = len(errors) == 0
    return SystemValidationResult(ok=ok, errors=errors, warnings=warnings, evidence=evidence)
