"""Matte blits: draw every non-transparent source pixel in one colour."""

from __future__ import annotations

from typing import Callable

from .blit import clip_blit
from .box import Box
from .colours import RGBX8, PenColour, PixelFormat
from .img import Img, Pixel

__all__ = [
    "blit_matte_i8_keyed",
    "blit_matte_rgbx8_keyed",
    "blit_matte_rgba8_keyed",
    "blit_matte",
]


def _require(img: Img, fmt: PixelFormat) -> None:
    if img.fmt is not fmt:
        raise ValueError(f"expected {fmt.name} source image, got {img.fmt.name}")


def _clip(srcimg: Img, srcbox: Box, destimg: Img, destbox: Box) -> tuple[Box, Box]:
    src, dest = clip_blit(srcimg.bounds, srcbox, destimg.bounds, destbox)
    if dest.w > 0 and dest.h > 0:
        region = Box(src.x, src.y, dest.w, dest.h)
        if not srcimg.bounds.contains(region):
            raise ValueError(f"source area {region} lies outside the source image")
    return src, dest


def _matte_value(pen: PenColour, fmt: PixelFormat) -> Pixel:
    if fmt is PixelFormat.I8:
        return pen.idx
    if fmt is PixelFormat.RGBX8:
        return pen.to_rgbx8()
    return pen.to_rgba8()


def _matte(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    matte_colour: PenColour,
    opaque: Callable[[Pixel], bool],
) -> Box:
    src, dest = _clip(srcimg, srcbox, destimg, destbox)
    if dest.w <= 0 or dest.h <= 0:
        return dest
    matte = _matte_value(matte_colour, destimg.fmt)
    for row in range(dest.h):
        s = (src.y + row) * srcimg.w + src.x
        d = (dest.y + row) * destimg.w + dest.x
        span = slice(d, d + dest.w)
        destimg.pixels[span] = [
            matte if opaque(sp) else dp
            for sp, dp in zip(srcimg.pixels[s : s + dest.w], destimg.pixels[span])
        ]
    return dest


def blit_matte_i8_keyed(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    transparent_idx: int,
    matte_colour: PenColour,
) -> Box:
    """Matte of an I8 image; pixels equal to ``transparent_idx`` are skipped."""
    _require(srcimg, PixelFormat.I8)
    return _matte(
        srcimg, srcbox, destimg, destbox, matte_colour, lambda c: c != transparent_idx
    )


def blit_matte_rgbx8_keyed(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    transparent: RGBX8,
    matte_colour: PenColour,
) -> Box:
    """Matte of an RGBX8 image; pixels equal to ``transparent`` are skipped."""
    _require(srcimg, PixelFormat.RGBX8)
    return _matte(
        srcimg, srcbox, destimg, destbox, matte_colour, lambda c: c != transparent
    )


def blit_matte_rgba8_keyed(
    srcimg: Img, srcbox: Box, destimg: Img, destbox: Box, matte_colour: PenColour
) -> Box:
    """Matte of an RGBA8 image; pixels with zero alpha are skipped."""
    _require(srcimg, PixelFormat.RGBA8)
    return _matte(srcimg, srcbox, destimg, destbox, matte_colour, lambda c: c.a > 0)


def blit_matte(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    transparent_colour: PenColour,
    matte_colour: PenColour,
) -> Box:
    """Draw every non-transparent pixel of ``srcimg`` as ``matte_colour``.

    Returns the clipped destination area.
    """
    if srcimg.fmt is PixelFormat.I8:
        return blit_matte_i8_keyed(
            srcimg, srcbox, destimg, destbox, transparent_colour.idx, matte_colour
        )
    if srcimg.fmt is PixelFormat.RGBX8:
        return blit_matte_rgbx8_keyed(
            srcimg, srcbox, destimg, destbox, transparent_colour.to_rgbx8(), matte_colour
        )
    return blit_matte_rgba8_keyed(srcimg, srcbox, destimg, destbox, matte_colour)