"""
Color string parsing.

Configs author colors in a few shapes:
- hex, "#66ccff", "#66ccffff" or "0x66ccff"
- 0 to 255 components, "RGB(102,204,255)" or "RGBA(102,204,255,255)"
- bare components, "0.4,0.8,1.0,1" (0 to 1 floats) or "102,204,255" (0 to 255)

The result is always a packed 0xRRGGBB integer. Alpha is accepted and dropped.
"""

from __future__ import annotations

import re
from typing import List

from solar_config.core.errors import ColorParseError

_FUNCTION_FORM = re.compile(r"^rgba?\((?P<body>[^)]*)\)$", re.IGNORECASE)


def _clamp_byte(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _pack(r: int, g: int, b: int) -> int:
    return (r << 16) | (g << 8) | b


def _split_components(text: str, original: str) -> List[float]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) not in (3, 4):
        raise ColorParseError(f"color {original!r} must have 3 or 4 components")
    try:
        return [float(p) for p in parts]
    except ValueError as exc:
        raise ColorParseError(f"color {original!r} has a non numeric component") from exc


def parse_color(text: str) -> int:
    """Convert an authored color string into a packed 0xRRGGBB integer."""
    raw = str(text).strip()
    lowered = raw.lower()

    if lowered.startswith("#") or lowered.startswith("0x"):
        digits = raw[1:] if lowered.startswith("#") else raw[2:]
        if len(digits) not in (6, 8):
            raise ColorParseError(f"hex color {raw!r} must have 6 or 8 digits")
        try:
            return int(digits[:6], 16)
        except ValueError as exc:
            raise ColorParseError(f"hex color {raw!r} is not valid hex") from exc

    match = _FUNCTION_FORM.match(raw)
    if match is not None:
        r, g, b = _split_components(match.group("body"), raw)[:3]
        return _pack(_clamp_byte(r), _clamp_byte(g), _clamp_byte(b))

    components = _split_components(raw, raw)
    r, g, b = components[:3]

    # Unit floats when every channel fits in [0, 1].
    if all(0.0 <= c <= 1.0 for c in (r, g, b)):
        return _pack(_clamp_byte(r * 255), _clamp_byte(g * 255), _clamp_byte(b * 255))
    return _pack(_clamp_byte(r), _clamp_byte(g), _clamp_byte(b))
