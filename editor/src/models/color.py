"""
Canvas Shape Demos - Color Domain Model

Canonical color representation for render instructions and SVG export.
"""

import math
from typing import Tuple


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> Tuple[float, float, float]:
    """Convert HSB to float RGB.

    Args:
        hue: Hue in degrees (0-360)
        saturation: Saturation in percent (0-100)
        brightness: Brightness in percent (0-100)

    Returns:
        (r, g, b) floats in 0-1
    """
    h = hue / 360.0
    s = saturation / 100.0
    b = brightness / 100.0

    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = b * (1.0 - s)
    q = b * (1.0 - f * s)
    t = b * (1.0 - (1.0 - f) * s)

    sector = int(i % 6)
    if sector == 0:
        return b, t, p
    if sector == 1:
        return q, b, p
    if sector == 2:
        return p, b, t
    if sector == 3:
        return p, q, b
    if sector == 4:
        return t, p, b
    return b, p, q


class Color:
    """Immutable float RGBA color.

    Components are clamped to 0-1 on construction. Equality compares
    the float components, so render output can be compared directly.
    """

    __slots__ = ('_r', '_g', '_b', '_a')

    def __init__(self, r: float, g: float, b: float, a: float = 1.0):
        self._r = max(0.0, min(1.0, float(r)))
        self._g = max(0.0, min(1.0, float(g)))
        self._b = max(0.0, min(1.0, float(b)))
        self._a = max(0.0, min(1.0, float(a)))

    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    # ========================================
    # Factory Methods
    # ========================================

    @classmethod
    def from_rgb(cls, rgb, alpha: float = 1.0) -> 'Color':
        """Create from a float (r, g, b) tuple such as the ones in constants."""
        r, g, b = rgb
        return cls(r, g, b, alpha)

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> 'Color':
        r, g, b = hsb_to_rgb(hue, saturation, brightness)
        return cls(r, g, b, alpha)

    # ========================================
    # Conversions
    # ========================================

    def to_rgb255(self) -> Tuple[int, int, int]:
        """Truncating conversion to uint8 components."""
        return int(self._r * 255.0), int(self._g * 255.0), int(self._b * 255.0)

    def to_hex(self) -> str:
        return '#{:02X}{:02X}{:02X}'.format(*self.to_rgb255())

    def to_css(self) -> str:
        """CSS color string: rgb(...) when opaque, rgba(...) otherwise."""
        r, g, b = self.to_rgb255()
        if self._a >= 1.0:
            return f"rgb({r},{g},{b})"
        return f"rgba({r},{g},{b},{self._a:g})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self._r, self._g, self._b, self._a) == (other._r, other._g, other._b, other._a)

    def __hash__(self):
        return hash((self._r, self._g, self._b, self._a))

    def __repr__(self):
        return f"Color({self._r:.3f}, {self._g:.3f}, {self._b:.3f}, {self._a:.3f})"
