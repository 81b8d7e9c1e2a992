"""Blits with integer magnification, used for rendering zoomed views.

A palette is any sequence of :class:`~evilpixie.colours.Colour`. Every
destination pixel at column ``x`` and row ``y`` of the clipped area takes
its value from source pixel ``(x // xzoom, y // yzoom)`` of the clipped
source area.
"""

from __future__ import annotations

from typing import Callable, Sequence

from .blit import clip_blit
from .box import Box
from .colours import RGBA8, RGBX8, Colour, PenColour, PixelFormat
from .img import Img, Pixel

__all__ = [
    "blit_zoom_keyed",
    "blit_zoom_matte_keyed",
    "blit_zoom_i8",
    "blit_zoom_rgbx8",
    "blit_zoom_rgba8",
    "blit_zoom",
]

Palette = Sequence[Colour]
_PixelFn = Callable[[Pixel, Pixel], Pixel]


def _require_src(img: Img, fmt: PixelFormat) -> None:
    if img.fmt is not fmt:
        raise ValueError(f"expected {fmt.name} source image, got {img.fmt.name}")


def _require_rgbx8_dest(img: Img) -> None:
    if img.fmt is not PixelFormat.RGBX8:
        raise ValueError(f"expected RGBX8 destination image, got {img.fmt.name}")


def _zoom(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    xzoom: int,
    yzoom: int,
    fn: _PixelFn,
) -> Box:
    """Apply ``fn(source pixel, old pixel)`` over the zoomed, clipped area."""
    if xzoom < 1 or yzoom < 1:
        raise ValueError(f"zoom factors must be >= 1, got {xzoom}, {yzoom}")
    if not srcimg.bounds.contains(srcbox):
        raise ValueError(f"source area {srcbox} lies outside the source image")
    src, dest = clip_blit(srcimg.bounds, srcbox, destimg.bounds, destbox, xzoom, yzoom)
    if dest.w <= 0 or dest.h <= 0:
        return dest
    src_pixels = srcimg.pixels
    for row in range(dest.h):
        s = (src.y + row // yzoom) * srcimg.w + src.x
        d = (dest.y + row) * destimg.w + dest.x
        span = slice(d, d + dest.w)
        destimg.pixels[span] = [
            fn(src_pixels[s + x // xzoom], old)
            for x, old in enumerate(destimg.pixels[span])
        ]
    return dest


def blit_zoom_keyed(
    srcimg: Img,
    srcbox: Box,
    srcpalette: Palette,
    destimg: Img,
    destbox: Box,
    xzoom: int,
    yzoom: int,
    transparent_colour: PenColour,
) -> Box:
    """Zoomed blit onto an RGBX8 image, skipping transparent source pixels.

    I8 sources are keyed on the pen's index and coloured via ``srcpalette``;
    RGBX8 sources are keyed on the pen's colour; RGBA8 sources skip pixels
    with zero alpha. Returns the clipped destination area.
    """
    _require_rgbx8_dest(destimg)
    fn: _PixelFn
    if srcimg.fmt is PixelFormat.I8:
        key = transparent_colour.idx
        fn = lambda c, old: old if c == key else srcpalette[c].to_rgbx8()  # noqa: E731
    elif srcimg.fmt is PixelFormat.RGBX8:
        rgb_key = transparent_colour.to_rgbx8()
        fn = lambda c, old: old if c == rgb_key else c  # noqa: E731
    else:
        fn = lambda c, old: RGBX8(c.r, c.g, c.b) if c.a > 0 else old  # noqa: E731
    return _zoom(srcimg, srcbox, destimg, destbox, xzoom, yzoom, fn)


def blit_zoom_matte_keyed(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    xzoom: int,
    yzoom: int,
    transparent_colour: PenColour,
    matte_colour: PenColour,
) -> Box:
    """Zoomed matte onto an RGBX8 image.

    Every non-transparent source pixel is drawn as ``matte_colour``.
    Returns the clipped destination area.
    """
    _require_rgbx8_dest(destimg)
    matte = matte_colour.to_rgbx8()
    opaque: Callable[[Pixel], bool]
    if srcimg.fmt is PixelFormat.I8:
        key = transparent_colour.idx
        opaque = lambda c: c != key  # noqa: E731
    elif srcimg.fmt is PixelFormat.RGBX8:
        rgb_key = transparent_colour.to_rgbx8()
        opaque = lambda c: c != rgb_key  # noqa: E731
    else:
        opaque = lambda c: c.a > 0  # noqa: E731
    return _zoom(
        srcimg,
        srcbox,
        destimg,
        destbox,
        xzoom,
        yzoom,
        lambda c, old: matte if opaque(c) else old,
    )


def blit_zoom_i8(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    palette: Palette,
    xzoom: int,
    yzoom: int,
) -> Box:
    """Zoomed copy of an I8 image onto any image.

    Indices are copied onto I8 images and looked up in ``palette`` for
    RGB images. Returns the clipped destination area.
    """
    _require_src(srcimg, PixelFormat.I8)
    fn: _PixelFn
    if destimg.fmt is PixelFormat.I8:
        fn = lambda c, old: c  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBX8:
        fn = lambda c, old: palette[c].to_rgbx8()  # noqa: E731
    else:
        fn = lambda c, old: palette[c].to_rgba8()  # noqa: E731
    return _zoom(srcimg, srcbox, destimg, destbox, xzoom, yzoom, fn)


def blit_zoom_rgbx8(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    xzoom: int,
    yzoom: int,
) -> Box:
    """Zoomed copy of an RGBX8 image onto an RGBX8 or RGBA8 image."""
    _require_src(srcimg, PixelFormat.RGBX8)
    fn: _PixelFn
    if destimg.fmt is PixelFormat.RGBX8:
        fn = lambda c, old: c  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBA8:
        fn = lambda c, old: RGBA8(c.r, c.g, c.b, 255)  # noqa: E731
    else:
        raise ValueError("cannot zoom an RGBX8 image onto an I8 image")
    return _zoom(srcimg, srcbox, destimg, destbox, xzoom, yzoom, fn)


def blit_zoom_rgba8(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    xzoom: int,
    yzoom: int,
) -> Box:
    """Zoomed copy of an RGBA8 image onto an RGBX8 or RGBA8 image.

    Onto RGBX8 the alpha is dropped, not blended.
    """
    _require_src(srcimg, PixelFormat.RGBA8)
    fn: _PixelFn
    if destimg.fmt is PixelFormat.RGBX8:
        fn = lambda c, old: RGBX8(c.r, c.g, c.b)  # noqa: E731
    elif destimg.fmt is PixelFormat.RGBA8:
        fn = lambda c, old: c  # noqa: E731
    else:
        raise ValueError("cannot zoom an RGBA8 image onto an I8 image")
    return _zoom(srcimg, srcbox, destimg, destbox, xzoom, yzoom, fn)


def blit_zoom(
    srcimg: Img,
    srcbox: Box,
    destimg: Img,
    destbox: Box,
    palette: Palette,
    xzoom: int,
    yzoom: int,
) -> Box:
    """Zoomed copy of any image; ``palette`` is used for I8 sources."""
    if srcimg.fmt is PixelFormat.I8:
        return blit_zoom_i8(srcimg, srcbox, destimg, destbox, palette, xzoom, yzoom)
    if srcimg.fmt is PixelFormat.RGBX8:
        return blit_zoom_rgbx8(srcimg, srcbox, destimg, destbox, xzoom, yzoom)
    return blit_zoom_rgba8(srcimg, srcbox, destimg, destbox, xzoom, yzoom)