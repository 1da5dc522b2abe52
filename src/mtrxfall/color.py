"""
RGB colors and the HSL round trip used to fade them.

Conversion formulas follow https://stackoverflow.com/a/9493060
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> 'Color':
        return cls(r, g, b, a)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b, 255)

    def to_hsl(self) -> 'HslColor':
        return to_hsl(self)


@dataclass(frozen=True)
class HslColor:
    h: float  # hue in [0, 360)
    s: float  # saturation in [0, 100]
    l: float  # lightness in [0, 100]

    def to_rgb(self) -> Color:
        return to_rgb(self)


BLACK = Color(0, 0, 0)


def _channel(v: float) -> int:
    # round half away from zero; v is never negative here
    return max(0, min(255, int(math.floor(v * 255.0 + 0.5))))


def to_hsl(color: Color) -> HslColor:
    r = color.r / 255.0
    g = color.g / 255.0
    b = color.b / 255.0
    vmax = max(r, g, b)
    vmin = min(r, g, b)
    l = (vmax + vmin) / 2.0

    if vmax == vmin:
        # achromatic
        return HslColor(0.0, 0.0, l * 100.0)

    d = vmax - vmin
    s = d / (2.0 - vmax - vmin) if l > 0.5 else d / (vmax + vmin)

    if vmax == r:
        h = (g - b) / d
        if g < b:
            h += 6.0
    elif vmax == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    h /= 6.0

    return HslColor(h * 360.0, s * 100.0, l * 100.0)


def hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def to_rgb(hsl: HslColor) -> Color:
    """Inverse of to_hsl. The result is always opaque."""
    h = hsl.h / 360.0
    s = hsl.s / 100.0
    l = hsl.l / 100.0

    if s == 0:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = hue_to_rgb(p, q, h + 1.0 / 3.0)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1.0 / 3.0)

    return Color.from_rgb(_channel(r), _channel(g), _channel(b))
