"""Colour-keyed blits: copy an image, skipping its transparent pixels."""

from __future__ import annotations

from typing import Callable, Sequence

from .blit import clip_blit
from .box import Box
from .colours import RGBA8, RGBX8, Colour, PenColour, PixelFormat
from .img import Img, Pixel

__all__ = [
    "blit_i8_keyed",
    "blit_rgbx8_keyed",
    "blit_rgba8_keyed",
    "blit_transparent",
]

Palette = Sequence[Colour]


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


def _apply(
    srcimg: Img,
    src: Box,
    destimg: Img,
    dest: Box,
    fn: Callable[[Pixel, Pixel], Pixel],
) -> None:
    """Replace each destination pixel with ``fn(source pixel, old pixel)``."""
    if dest.w <= 0:
        return
    for row in range(dest.h):
        s = (src.y + row) * srcimg.w + src.x
        d = (dest.y + row) * destimg.w + dest.x
        span = slice(d, d + dest.w)
        destimg.pixels[span] = [
            fn(sp, dp)
            for sp, dp in zip(srcimg.pixels[s : s + dest.w], destimg.pixels[span])
        ]


def blit_i8_keyed(
    srcimg: Img,
    srcbox: Box,
    srcpalette: Palette,
    destimg: Img,
    destbox: Box,
    transparent_idx: int,
) -> Box:
    """Blit an I8 image onto any image, skipping ``transparent_idx`` pixels.

    ``srcpalette`` supplies colours when the destination is RGB.
    Returns the clipped destination area.
    """
    _require(srcimg, PixelFormat.I8)
    src, dest = _clip(srcimg, srcbox, destimg, destbox)

    convert: Callable[[int], Pixel]
    if destimg.fmt is PixelFormat.I8:
        convert = lambda c: c  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBX8:
        convert = lambda c: srcpalette[c].to_rgbx8()  # noqa: E731
    else:
        convert = lambda c: srcpalette[c].to_rgba8()  # noqa: E731

    _apply(
        srcimg,
        src,
        destimg,
        dest,
        lambda c, old: old if c == transparent_idx else convert(c),
    )
    return dest


def blit_rgba8_keyed(srcimg: Img, srcbox: Box, destimg: Img, destbox: Box) -> Box:
    """Blit an RGBA8 image onto any image, skipping fully transparent pixels.

    Onto an indexed image every drawn pixel becomes index 1.
    Returns the clipped destination area.
    """
    _require(srcimg, PixelFormat.RGBA8)
    src, dest = _clip(srcimg, srcbox, destimg, destbox)

    convert: Callable[[RGBA8], Pixel]
    if destimg.fmt is PixelFormat.I8:
        convert = lambda c: 1  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBX8:
        convert = lambda c: RGBX8(c.r, c.g, c.b)  # noqa: E731
    else:
        convert = lambda c: c  # noqa: E731

    _apply(srcimg, src, destimg, dest, lambda c, old: convert(c) if c.a > 0 else old)
    return dest


def blit_rgbx8_keyed(
    srcimg: Img, srcbox: Box, destimg: Img, destbox: Box, transparent: RGBX8
) -> Box:
    """Blit an RGBX8 image onto any image, skipping ``transparent`` pixels.

    Onto an indexed image every drawn pixel becomes index 1.
    Returns the clipped destination area.
    """
    _require(srcimg, PixelFormat.RGBX8)
    src, dest = _clip(srcimg, srcbox, destimg, destbox)

    convert: Callable[[RGBX8], Pixel]
    if destimg.fmt is PixelFormat.I8:
        convert = lambda c: 1  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBX8:
        convert = lambda c: c  # noqa: E731
    else:
        convert = lambda c: RGBA8(c.r, c.g, c.b, 255)  # noqa: E731

    _apply(
        srcimg, src, destimg, dest, lambda c, old: old if c == transparent else convert(c)
    )
    return dest


def blit_transparent(
    srcimg: Img,
    srcbox: Box,
    srcpalette: Palette,
    destimg: Img,
    destbox: Box,
    transparent_colour: PenColour,
) -> Box:
    """Blit any image, treating ``transparent_colour`` as see-through.

    RGB sources are not drawn onto indexed images; in that case nothing is
    changed and a copy of ``destbox`` is returned. Otherwise the clipped
    destination area is returned.
    """
    if srcimg.fmt is PixelFormat.I8:
        return blit_i8_keyed(
            srcimg, srcbox, srcpalette, destimg, destbox, transparent_colour.idx
        )
    if destimg.fmt is PixelFormat.I8:
        return Box(destbox.x, destbox.y, destbox.w, destbox.h)
    if srcimg.fmt is PixelFormat.RGBX8:
        return blit_rgbx8_keyed(
            srcimg, srcbox, destimg, destbox, transparent_colour.to_rgbx8()
        )
    return blit_rgba8_keyed(srcimg, srcbox, destimg, destbox)