import math

import pytest

from solar_config.core.constants import DEFAULT_BODY_COLOR, GRAVITY_CONSTANT, SUN_COLOR
from solar_config.core.errors import MissingAttractor
from solar_config.core.types import CelestialBody, Orbit, OrbitingBodyData
from solar_config.deduction.fields import choose, parse_to_body, parse_to_sun
from solar_config.templates.registry import TemplateRegistry


def make_body_config(name: str = "Moho", properties=None, orbit=None, **extra):
    """
    Helper to create a minimal raw orbiting body config.

    Orbit always carries a reference body so the record is complete enough to
    be linearized later.
    """
    cfg = {
        "name": name,
        "Properties": dict(properties or {}),
        "Orbit": {"referenceBody": "Sun", **(orbit or {})},
    }
    cfg.update(extra)
    return cfg


def make_template(name: str = "Kerbin") -> OrbitingBodyData:
    return OrbitingBodyData(
        name=name,
        radius=600000.0,
        mass=5.2915158e22,
        std_grav_param=3.5316e12,
        orbit=Orbit(
            semi_major_axis=13599840256.0,
            eccentricity=0.0,
            inclination=0.0,
            arg_of_periapsis=0.0,
            asc_node_longitude=0.0,
        ),
        mean_anomaly0=3.14,
        epoch=0.0,
        soi=84159286.0,
        atmosphere_alt=70000.0,
        color=0x3366FF,
    )


def test_choose_skips_only_none():
    assert choose(None, 0, 5) == 0
    assert choose(None, "", "x") == ""
    assert choose(None, None) is None


@pytest.mark.parametrize(
    "properties",
    [
        {"gravParameter": "3.5316e12"},
        {"geeASL": "1", "radius": "600000"},
        {"mass": "5.29e22"},
    ],
)
def test_mass_times_g_equals_grav_param(properties):
    parsed = parse_to_body(make_body_config(properties=properties))

    assert math.isclose(parsed.data.mass * GRAVITY_CONSTANT, parsed.data.std_grav_param, rel_tol=1e-12)


def test_grav_param_wins_over_gee_asl_and_mass():
    cfg = make_body_config(properties={"gravParameter": "100", "geeASL": "1", "mass": "5", "radius": "10"})

    parsed = parse_to_body(cfg)

    assert parsed.data.std_grav_param == 100.0
    assert parsed.data.mass == pytest.approx(100.0 / GRAVITY_CONSTANT)


def test_gee_asl_uses_radius():
    parsed = parse_to_body(make_body_config(properties={"geeASL": "2", "radius": "10"}))

    assert parsed.data.std_grav_param == pytest.approx(2 * 9.80665 * 100)


def test_explicit_mass_beats_template():
    templates = TemplateRegistry.from_bodies([make_template()])
    cfg = make_body_config(properties={"mass": "1000"}, Template={"name": "Kerbin"})

    parsed = parse_to_body(cfg, templates)

    assert parsed.data.mass == 1000.0
    assert parsed.data.std_grav_param == pytest.approx(1000.0 * GRAVITY_CONSTANT)


def test_template_grav_param_rederives_mass():
    template = make_template()
    templates = TemplateRegistry.from_bodies([template])

    parsed = parse_to_body(make_body_config(Template={"name": "Kerbin"}), templates)

    assert parsed.data.std_grav_param == template.std_grav_param
    assert parsed.data.mass == template.std_grav_param / GRAVITY_CONSTANT


def test_missing_fields_are_nan_not_errors():
    parsed = parse_to_body(make_body_config())

    assert math.isnan(parsed.data.radius)
    assert math.isnan(parsed.data.std_grav_param)
    assert math.isnan(parsed.data.orbit.semi_major_axis)
    assert math.isnan(parsed.data.mean_anomaly0)
    assert math.isnan(parsed.data.epoch)
    assert math.isnan(parsed.data.soi)


def test_orbit_falls_back_to_template_per_element():
    templates = TemplateRegistry.from_bodies([make_template()])
    cfg = make_body_config(orbit={"eccentricity": "0.2"}, Template={"name": "Kerbin"})

    parsed = parse_to_body(cfg, templates)

    assert parsed.data.orbit.eccentricity == 0.2
    assert parsed.data.orbit.semi_major_axis == 13599840256.0


def test_authored_zero_is_not_skipped():
    templates = TemplateRegistry.from_bodies([make_template()])
    cfg = make_body_config(properties={"radius": 0}, Template={"name": "Kerbin"})

    parsed = parse_to_body(cfg, templates)

    assert parsed.data.radius == 0.0


def test_mean_anomaly_degrees_converted():
    parsed = parse_to_body(make_body_config(orbit={"meanAnomalyAtEpochD": "180"}))

    assert parsed.data.mean_anomaly0 == pytest.approx(math.pi)


def test_mean_anomaly_radians_bypass_conversion():
    cfg = make_body_config(orbit={"meanAnomalyAtEpoch": "180", "meanAnomalyAtEpochD": "90"})

    parsed = parse_to_body(cfg)

    assert parsed.data.mean_anomaly0 == 180.0


def test_atmosphere_absent_section_is_none():
    parsed = parse_to_body(make_body_config())

    assert parsed.data.atmosphere_alt is None


def test_atmosphere_priority_order():
    cfg = make_body_config(Atmosphere={"altitude": "50", "maxAltitude": "70"})

    parsed = parse_to_body(cfg)

    assert parsed.data.atmosphere_alt == 50.0


def test_atmosphere_section_falls_back_to_template():
    templates = TemplateRegistry.from_bodies([make_template()])
    cfg = make_body_config(Atmosphere={}, Template={"name": "Kerbin"})

    parsed = parse_to_body(cfg, templates)

    assert parsed.data.atmosphere_alt == 70000.0


def test_color_priority():
    templates = TemplateRegistry.from_bodies([make_template()])

    authored = parse_to_body(make_body_config(orbit={"color": "#ff0000"}, Template={"name": "Kerbin"}), templates)
    inherited = parse_to_body(make_body_config(Template={"name": "Kerbin"}), templates)
    default = parse_to_body(make_body_config())

    assert authored.data.color == 0xFF0000
    assert inherited.data.color == 0x3366FF
    assert default.data.color == DEFAULT_BODY_COLOR


def test_authored_soi_is_kept():
    parsed = parse_to_body(make_body_config(properties={"sphereOfInfluence": "12345"}))

    assert parsed.data.soi == 12345.0


def test_reference_body_is_kept_as_name():
    parsed = parse_to_body(make_body_config(orbit={"referenceBody": "Kerbin"}))

    assert parsed.reference_body == "Kerbin"


def test_unknown_template_behaves_like_no_template():
    parsed = parse_to_body(make_body_config(Template={"name": "Nope"}), TemplateRegistry())

    assert math.isnan(parsed.data.radius)


def test_sun_has_fixed_color_and_unbounded_soi():
    template = CelestialBody(name="Sun", radius=1.0, mass=1.0, std_grav_param=GRAVITY_CONSTANT, color=0x123456)
    templates = TemplateRegistry.from_bodies([template])
    cfg = {"name": "Sol", "Template": {"name": "Sun"}, "Properties": {"sphereOfInfluence": "5"}}

    sun = parse_to_sun(cfg, templates)

    assert sun.color == SUN_COLOR
    assert sun.soi == math.inf
    assert sun.id == 0
    assert sun.radius == 1.0
    assert sun.mass == pytest.approx(1.0)


def test_template_mapping_key_is_the_lookup_name():
    template = CelestialBody(name="Sun", radius=77.0, mass=1.0, std_grav_param=GRAVITY_CONSTANT)
    cfg = {"name": "X", "Template": {"name": "StockSun"}, "Properties": {}}

    sun = parse_to_sun(cfg, {"StockSun": template})

    assert sun.radius == 77.0


def test_missing_reference_body_is_fatal_and_named():
    cfg = {"name": "Drifter", "Properties": {"radius": "1"}, "Orbit": {}}

    with pytest.raises(MissingAttractor) as exc_info:
        parse_to_body(cfg)

    assert exc_info.value.body == "Drifter"
    assert "Drifter has no referenceBody" in str(exc_info.value)


def test_unparseable_color_falls_back_to_template_then_default():
    templates = TemplateRegistry.from_bodies([make_template()])

    inherited = parse_to_body(make_body_config(orbit={"color": "not a color"}, Template={"name": "Kerbin"}), templates)
    default = parse_to_body(make_body_config(orbit={"color": "#12"}))

    assert inherited.data.color == 0x3366FF
    assert default.data.color == DEFAULT_BODY_COLOR
