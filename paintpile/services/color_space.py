"""
Color Space — hex ↔ sRGB ↔ CIE XYZ (D65) ↔ CIE L*a*b* conversions.

All functions are pure. Malformed hex input raises InvalidColorFormat
instead of computing on garbage channels.
"""
from __future__ import annotations

import re
from typing import NamedTuple

# D65 reference white, 2° observer
REF_X = 95.047
REF_Y = 100.000
REF_Z = 108.883

LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")


class InvalidColorFormat(ValueError):
    """Raised when a string is not a 6-digit hex color."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected 6 hex digits, optional '#')")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class LAB(NamedTuple):
    L: float
    a: float
    b: float

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b}


def hex_to_rgb(hex_color: str) -> RGB:
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)
    h = hex_color.strip()
    if h.startswith("#"):
        h = h[1:]
    if not _HEX_RE.match(h):
        raise InvalidColorFormat(hex_color)
    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def is_valid_hex(hex_color: str) -> bool:
    try:
        hex_to_rgb(hex_color)
    except InvalidColorFormat:
        return False
    return True


def rgb_to_hex(rgb: RGB | tuple[int, int, int]) -> str:
    r, g, b = rgb
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(hex_color: str) -> str:
    """Canonical lowercase '#rrggbb' form of a hex color."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def _linearize(c: float) -> float:
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def rgb_to_xyz(rgb: RGB | tuple[int, int, int]) -> XYZ:
    """Convert sRGB (0-255) to CIE XYZ scaled 0-100, D65."""
    r, g, b = (_linearize(c / 255.0) * 100 for c in rgb)

    x = r * 0.4124 + g * 0.3576 + b * 0.1805
    y = r * 0.2126 + g * 0.7152 + b * 0.0722
    z = r * 0.0193 + g * 0.1192 + b * 0.9505
    return XYZ(x, y, z)


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else (LAB_KAPPA * t + 16) / 116


def xyz_to_lab(xyz: XYZ | tuple[float, float, float]) -> LAB:
    """Convert CIE XYZ (0-100 scale) to CIELAB against the D65 white point."""
    x, y, z = xyz
    fx = _lab_f(x / REF_X)
    fy = _lab_f(y / REF_Y)
    fz = _lab_f(z / REF_Z)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return LAB(L, a, b)


def rgb_to_lab(rgb: RGB | tuple[int, int, int]) -> LAB:
    return xyz_to_lab(rgb_to_xyz(rgb))


def hex_to_lab(hex_color: str) -> LAB:
    """hex → RGB → XYZ → LAB. The entry point used by all matching."""
    return xyz_to_lab(rgb_to_xyz(hex_to_rgb(hex_color)))
