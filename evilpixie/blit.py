"""Copying rectangular areas between images of the same format."""

from __future__ import annotations

from .box import Box
from .img import Img

__all__ = ["clip_blit", "blit", "blit_swap"]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def clip_blit(
    srcbounds: Box,
    srcbox: Box,
    destbounds: Box,
    destbox: Box,
    xzoom: int = 1,
    yzoom: int = 1,
) -> tuple[Box, Box]:
    """Clip a blit against the destination boundary.

    ``srcbox`` gives the blit dimensions and is assumed to be valid; only
    the position of ``destbox`` is used. Returns new (source, destination)
    boxes adjusted for the clipping. ``srcbounds`` is accepted for symmetry
    but not consulted.
    """
    if xzoom < 1 or yzoom < 1:
        raise ValueError(f"zoom factors must be >= 1, got {xzoom}, {yzoom}")
    dest = Box(destbox.x, destbox.y, srcbox.w * xzoom, srcbox.h * yzoom)
    destx, desty = dest.x, dest.y
    dest.clip_against(destbounds)

    src = Box(
        srcbox.x + _trunc_div(dest.x - destx, xzoom),
        srcbox.y + _trunc_div(dest.y - desty, yzoom),
        _trunc_div(dest.w, xzoom),
        _trunc_div(dest.h, yzoom),
    )
    return src, dest


def _prepare(srcimg: Img, srcbox: Box, destimg: Img, destbox: Box) -> tuple[Box, Box]:
    if srcimg.fmt != destimg.fmt:
        raise ValueError(
            f"cannot blit {srcimg.fmt.name} image onto {destimg.fmt.name} image"
        )
    src, dest = clip_blit(srcimg.bounds, srcbox, destimg.bounds, destbox)
    if dest.w > 0 and dest.h > 0:
        region = Box(src.x, src.y, dest.w, dest.h)
        if not srcimg.bounds.contains(region):
            raise ValueError(f"source area {region} lies outside the source image")
    return src, dest


def _row_spans(srcimg: Img, src: Box, destimg: Img, dest: Box):
    for row in range(dest.h):
        s = (src.y + row) * srcimg.w + src.x
        d = (dest.y + row) * destimg.w + dest.x
        yield slice(s, s + dest.w), slice(d, d + dest.w)


def blit(srcimg: Img, srcbox: Box, destimg: Img, destbox: Box) -> Box:
    """Copy ``srcbox`` of ``srcimg`` onto ``destimg`` at ``destbox``'s position.

    Both images must share a pixel format. Returns the area of ``destimg``
    that was written, after clipping.
    """
    src, dest = _prepare(srcimg, srcbox, destimg, destbox)
    if dest.w > 0:
        for s, d in _row_spans(srcimg, src, destimg, dest):
            destimg.pixels[d] = srcimg.pixels[s]
    return dest


def blit_swap(srcimg: Img, srcbox: Box, destimg: Img, destbox: Box) -> Box:
    """Like :func:`blit`, but exchanges the two areas instead of copying.

    Returns the area of ``destimg`` that was touched, after clipping.
    """
    src, dest = _prepare(srcimg, srcbox, destimg, destbox)
    if dest.w > 0:
        for s, d in _row_spans(srcimg, src, destimg, dest):
            a = srcimg.pixels[s]
            b = destimg.pixels[d]
            srcimg.pixels[s] = b
            destimg.pixels[d] = a
    return dest