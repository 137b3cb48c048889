import math

from solar_config.core.types import CelestialBody, Orbit, OrbitingBody, ResolvedSystem
from solar_config.validation import validate_system


def make_body(**overrides) -> OrbitingBody:
    values = dict(
        id=1,
        attractor_id=0,
        name="Kerbin",
        radius=600000.0,
        mass=5.29e22,
        std_grav_param=3.53e12,
        orbit=Orbit(
            semi_major_axis=1.36e10,
            eccentricity=0.0,
            inclination=0.0,
            arg_of_periapsis=0.0,
            asc_node_longitude=0.0,
        ),
        mean_anomaly0=0.0,
        epoch=0.0,
        soi=8.4e7,
    )
    values.update(overrides)
    return OrbitingBody(**values)


def make_sun() -> CelestialBody:
    return CelestialBody(name="Sun", radius=2.6e8, mass=1.75e28, std_grav_param=1.17e18)


def test_complete_system_is_ok():
    result = validate_system(ResolvedSystem(sun=make_sun(), bodies=[make_body()]))

    assert result.ok
    assert result.errors == []


def test_nan_fields_are_reported_per_body():
    body = make_body(radius=math.nan, orbit=Orbit(semi_major_axis=1.0, eccentricity=0.0))

    result = validate_system(ResolvedSystem(sun=make_sun(), bodies=[body]))

    assert not result.ok
    assert result.evidence["Kerbin"] == [
        "radius",
        "orbit.inclination",
        "orbit.arg_of_periapsis",
        "orbit.asc_node_longitude",
    ]


def test_non_positive_mass_is_a_warning():
    body = make_body(mass=0.0)

    result = validate_system(ResolvedSystem(sun=make_sun(), bodies=[body]))

    assert result.ok
    assert any("non positive mass" in w for w in result.warnings)
