"""
Config package.

Input side collaborators of the converter: the raw config accessor and the
color parser.
"""

from solar_config.config.accessor import BodyConfig, as_body_config, parse_float
from solar_config.config.colors import parse_color

__all__ = ["BodyConfig", "as_body_config", "parse_color", "parse_float"]
