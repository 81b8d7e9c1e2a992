"""Shifting pixels up or down a colour range.

A range is a sequence of :class:`~evilpixie.colours.PenColour`. Shifting a
pixel finds the first pen in the range that matches it and replaces it
with the next (or previous) pen. Pixels not in the range, and pixels
already at the end being moved towards, are left alone.
"""

from __future__ import annotations

from typing import Callable, Sequence

from .blit import clip_blit
from .box import Box
from .colours import PenColour, PixelFormat
from .img import Img, Pixel

__all__ = ["blit_range_shift_keyed", "draw_rect_range_shift"]

PenRange = Sequence[PenColour]


def _pen_value(pen: PenColour, fmt: PixelFormat) -> Pixel:
    if fmt is PixelFormat.I8:
        return pen.idx
    if fmt is PixelFormat.RGBX8:
        return pen.to_rgbx8()
    return pen.to_rgba8()


def _shifter(
    pen_range: PenRange, fmt: PixelFormat, direction: int
) -> Callable[[Pixel], Pixel]:
    """Return a function moving one pixel of format ``fmt`` along the range."""
    values = [_pen_value(pen, fmt) for pen in pen_range]
    positions: dict[Pixel, int] = {}
    for i, value in enumerate(values):
        positions.setdefault(value, i)
    last = len(values) - 1

    if direction > 0:

        def shift(pix: Pixel) -> Pixel:
            i = positions.get(pix)
            if i is not None and i < last:
                return values[i + 1]
            return pix

    else:

        def shift(pix: Pixel) -> Pixel:
            i = positions.get(pix)
            if i is not None and i > 0:
                return values[i - 1]
            return pix

    return shift


def _transparent_key(pen: PenColour, fmt: PixelFormat) -> Pixel:
    return _pen_value(pen, fmt)


def blit_range_shift_keyed(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    transparent_pen: PenColour,
    pen_range: PenRange,
    direction: int,
) -> Box:
    """Use ``srcimg`` as a mask to shift ``destimg`` pixels along a range.

    Wherever the source pixel is not ``transparent_pen`` the matching
    destination pixel is moved up the range (``direction > 0``) or down it.
    Returns the clipped destination area; with an empty range nothing is
    drawn and a zero-sized box at ``destbox``'s position is returned.
    """
    if not pen_range:
        return Box(destbox.x, destbox.y, 0, 0)

    transparent = _transparent_key(transparent_pen, srcimg.fmt)
    src, dest = clip_blit(srcimg.bounds, srcbox, destimg.bounds, destbox)
    if dest.w <= 0 or dest.h <= 0:
        return dest
    region = Box(src.x, src.y, dest.w, dest.h)
    if not srcimg.bounds.contains(region):
        raise ValueError(f"source area {region} lies outside the source image")

    shift = _shifter(pen_range, destimg.fmt, direction)
    for row in range(dest.h):
        s = (src.y + row) * srcimg.w + src.x
        d = (dest.y + row) * destimg.w + dest.x
        span = slice(d, d + dest.w)
        destimg.pixels[span] = [
            dp if sp == transparent else shift(dp)
            for sp, dp in zip(srcimg.pixels[s : s + dest.w], destimg.pixels[span])
        ]
    return dest


def draw_rect_range_shift(
    destimg: Img, rect: Box, pen_range: PenRange, direction: int
) -> Box:
    """Shift every pixel of ``rect`` (clipped to the image) along a range.

    Returns the clipped area; with an empty range nothing is drawn and a
    zero-sized box at ``rect``'s position is returned.
    """
    if not pen_range:
        return Box(rect.x, rect.y, 0, 0)

    clipped = Box(rect.x, rect.y, rect.w, rect.h)
    clipped.clip_against(destimg.bounds)
    if clipped.empty:
        return clipped

    shift = _shifter(pen_range, destimg.fmt, direction)
    for y in range(clipped.ymin, clipped.ymax + 1):
        d = y * destimg.w + clipped.x
        span = slice(d, d + clipped.w)
        destimg.pixels[span] = [shift(p) for p in destimg.pixels[span]]
    return clipped