"""
Shared constants (SI units unless stated otherwise).

Keeping these in one place keeps deduction, SOI math and validation consistent.
"""

import math

# Physical constants
GRAVITY_CONSTANT = 6.67430e-11  # m^3 kg^-1 s^-2
EARTH_ACCELERATION = 9.80665  # m s^-2, one "gee" at sea level

# Sphere of influence exponent, soi = a * (m / M) ** SOI_EXPONENT
SOI_EXPONENT = 2 / 5

# Colors, packed 0xRRGGBB
SUN_COLOR = 0xFFFF00
DEFAULT_BODY_COLOR = 0xFFFFFF

SUN_ID = 0
SUN_SOI = math.inf
