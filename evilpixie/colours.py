"""Pixel formats, colour types and colour-space helpers."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "PixelFormat",
    "PenID",
    "RGBX8",
    "RGBA8",
    "Colour",
    "PenColour",
    "RGBf",
    "HSVf",
    "pixel_size",
    "blend",
    "dist_sq",
    "lerp",
    "parse_hex_colour",
    "rgb_to_hsv",
    "hsv_to_rgb",
]


class PixelFormat(IntEnum):
    """Raw pixel formats an image can hold."""

    I8 = 0
    RGBX8 = 1  # rgb only, alpha ignored
    RGBA8 = 2


class PenID(IntEnum):
    """Identifies the foreground and background pens."""

    FG = 0
    BG = 1


_PIXEL_SIZES = {
    PixelFormat.I8: 1,
    PixelFormat.RGBX8: 4,
    PixelFormat.RGBA8: 4,
}


def pixel_size(fmt: PixelFormat) -> int:
    """Return the number of bytes needed to store one pixel of ``fmt``."""
    try:
        return _PIXEL_SIZES[PixelFormat(fmt)]
    except (ValueError, KeyError):
        raise ValueError(f"unsupported pixel format: {fmt!r}") from None


@dataclass(frozen=True)
class RGBX8:
    """An opaque 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class RGBA8:
    """An 8-bit-per-channel colour with alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


def blend(src: RGBA8, dest: RGBX8 | RGBA8) -> RGBX8 | RGBA8:
    """Blend ``src`` over ``dest`` using the alpha of ``src``.

    The result has the same type as ``dest``.
    """
    t = src.a
    inv = 255 - t

    def mix(d: int, s: int) -> int:
        return (d * inv + s * t) // 255

    if isinstance(dest, RGBA8):
        return RGBA8(
            mix(dest.r, src.r), mix(dest.g, src.g), mix(dest.b, src.b), mix(dest.a, src.a)
        )
    if isinstance(dest, RGBX8):
        return RGBX8(mix(dest.r, src.r), mix(dest.g, src.g), mix(dest.b, src.b))
    raise TypeError(f"cannot blend onto {type(dest).__name__}")


@dataclass(frozen=True, order=True)
class Colour:
    """A general colour value; orders by r, g, b, then a."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def to_rgbx8(self) -> RGBX8:
        return RGBX8(self.r, self.g, self.b)

    def to_rgba8(self) -> RGBA8:
        return RGBA8(self.r, self.g, self.b, self.a)


def dist_sq(a: Colour, b: Colour) -> int:
    """Squared distance between two colours, alpha included."""
    return (
        (b.r - a.r) ** 2 + (b.g - a.g) ** 2 + (b.b - a.b) ** 2 + (b.a - a.a) ** 2
    )


def lerp(a: Colour, b: Colour, t: float) -> Colour:
    """Linearly interpolate between two colours, ``t`` in 0..1."""
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"interpolation factor out of range: {t}")
    inv = 1.0 - t
    return Colour(
        int(a.r * inv + b.r * t),
        int(a.g * inv + b.g * t),
        int(a.b * inv + b.b * t),
        int(a.a * inv + b.a * t),
    )


class PenColour:
    """A colour for drawing to either indexed or RGB images.

    The RGB value is always set; the palette index may not be. Only a pen
    with a valid index can draw onto an indexed image.
    """

    __slots__ = ("_rgb", "_idx")

    def __init__(self, rgb: Colour | None = None, idx: int = -1) -> None:
        self._rgb = Colour(255, 0, 255) if rgb is None else rgb
        self._idx = idx

    @property
    def rgb(self) -> Colour:
        return self._rgb

    @property
    def idx(self) -> int:
        if not self.idx_valid:
            raise ValueError("pen has no palette index")
        return self._idx

    @property
    def idx_valid(self) -> bool:
        return self._idx >= 0

    def to_rgbx8(self) -> RGBX8:
        return self._rgb.to_rgbx8()

    def to_rgba8(self) -> RGBA8:
        return self._rgb.to_rgba8()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PenColour):
            return NotImplemented
        if self.idx_valid and other.idx_valid and self._idx == other._idx:
            return True
        return self._rgb == other._rgb

    def __repr__(self) -> str:
        return f"PenColour({self._rgb!r}, {self._idx})"


@dataclass
class RGBf:
    """Floating-point RGB, each channel in 0..1."""

    r: float
    g: float
    b: float


@dataclass
class HSVf:
    """Floating-point HSV: hue in degrees (0..360), s and v in 0..1."""

    h: float
    s: float
    v: float


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} out of range 0..1: {value}")


_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_colour(text: str) -> Colour:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    At most eight hex digits are examined; anything after them is ignored.
    Raises ValueError on a syntax error.
    """
    if not text.startswith("#"):
        raise ValueError(f"colour must start with '#': {text!r}")
    digits = text[1:9]
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise ValueError(f"bad hex digit in colour: {text!r}")
    nb = [int(ch, 16) for ch in digits]
    if len(nb) in (3, 4):
        channels = [n << 4 | n for n in nb]
    elif len(nb) in (6, 8):
        channels = [hi << 4 | lo for hi, lo in zip(nb[0::2], nb[1::2])]
    else:
        raise ValueError(f"wrong number of hex digits in colour: {text!r}")
    if len(channels) == 3:
        channels.append(0xFF)
    return Colour(*channels)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB (0..1) to HSV, with hue in degrees."""
    _check_unit("r", r)
    _check_unit("g", g)
    _check_unit("b", b)
    fmax = max(r, g, b)
    fmin = min(r, g, b)
    delta = fmax - fmin
    if delta > 0.0:
        if fmax == r:
            h = 60.0 * ((g - b) / delta)
        elif fmax == g:
            h = 60.0 * (2.0 + ((b - r) / delta))
        else:
            h = 60.0 * (4.0 + ((r - g) / delta))
        if h < 0.0:
            h += 360.0
        s = delta / fmax
    else:
        h = 0.0
        s = 0.0
    return h, s, fmax


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV (hue in degrees, s and v in 0..1) to RGB (0..1).

    A NaN hue yields a grey.
    """
    _check_unit("s", s)
    _check_unit("v", v)
    c = v * s
    if math.isnan(h):
        r = g = b = 0.0
    else:
        if not 0.0 <= h <= 360.0:
            raise ValueError(f"hue out of range 0..360: {h}")
        hh = h / 60.0
        x = c * (1.0 - abs(math.fmod(hh, 2.0) - 1.0))
        if hh <= 1.0:
            r, g, b = c, x, 0.0
        elif hh <= 2.0:
            r, g, b = x, c, 0.0
        elif hh <= 3.0:
            r, g, b = 0.0, c, x
        elif hh <= 4.0:
            r, g, b = 0.0, x, c
        elif hh <= 5.0:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x
    m = v - c
    return r + m, g + m, b + m