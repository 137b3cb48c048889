"""
Deduction package.

Per body field deduction with template fallback.
"""

from solar_config.deduction.fields import (
    choose,
    complete_body_to_unordered,
    parse_to_body,
    parse_to_sun,
)

__all__ = ["choose", "complete_body_to_unordered", "parse_to_body", "parse_to_sun"]
