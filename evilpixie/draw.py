"""Drawing primitives: flood fill, rectangle fill and shape walkers.

The walkers are generators that yield the coordinates a shape covers,
leaving the actual plotting to the caller.
"""

from __future__ import annotations

from typing import Iterator

from .box import Box
from .colours import PenColour, PixelFormat
from .img import Img, Pixel

__all__ = [
    "flood_fill",
    "rect_fill",
    "walk_line",
    "walk_ellipse",
    "walk_filled_ellipse",
]


def _pen_value(pen: PenColour, fmt: PixelFormat) -> Pixel:
    if fmt is PixelFormat.I8:
        return pen.idx
    if fmt is PixelFormat.RGBX8:
        return pen.to_rgbx8()
    return pen.to_rgba8()


def flood_fill(img: Img, start: tuple[int, int], pen: PenColour) -> Box:
    """Fill the 4-connected region of ``start``'s colour with ``pen``.

    Returns the bounding box of the pixels changed (empty if none).
    """
    new = _pen_value(pen, img.fmt)
    damage = Box()
    old = img[start]
    if old == new:
        return damage

    w, h = img.w, img.h
    pixels = img.pixels
    stack = [start]
    while stack:
        px, y = stack.pop()
        row = y * w
        if pixels[row + px] != old:
            continue

        left = px
        while left > 0 and pixels[row + left - 1] == old:
            left -= 1
        right = px
        while right < w - 1 and pixels[row + right + 1] == old:
            right += 1

        pixels[row + left : row + right + 1] = [new] * (right + 1 - left)
        damage.merge(Box(left, y, right + 1 - left, 1))

        for ny in (y - 1, y + 1):
            if 0 <= ny < h:
                nrow = ny * w
                stack.extend(
                    (x, ny) for x in range(left, right + 1) if pixels[nrow + x] == old
                )
    return damage


def rect_fill(destimg: Img, destbox: Box, pen: PenColour) -> Box:
    """Fill ``destbox`` (clipped to the image) with ``pen``.

    Returns the clipped area that was filled.
    """
    clipped = Box(destbox.x, destbox.y, destbox.w, destbox.h)
    clipped.clip_against(destimg.bounds)
    value = _pen_value(pen, destimg.fmt)
    if clipped.empty:
        return clipped
    for y in range(clipped.y, clipped.y + clipped.h):
        start = y * destimg.w + clipped.x
        destimg.pixels[start : start + clipped.w] = [value] * clipped.w
    return clipped


def walk_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a Bresenham line from (x0, y0) to (x1, y1)."""
    dx = x1 - x0
    dy = y1 - y0
    xinc = -1 if dx < 0 else 1
    yinc = -1 if dy < 0 else 1
    dx = abs(dx) * 2
    dy = abs(dy) * 2

    yield x0, y0
    if dx > dy:
        f = dy - dx // 2
        while x0 != x1:
            if f >= 0:
                y0 += yinc
                f -= dx
            f += dy
            x0 += xinc
            yield x0, y0
    else:
        f = dx - dy // 2
        while y0 != y1:
            if f >= 0:
                x0 += xinc
                f -= dy
            f += dx
            y0 += yinc
            yield x0, y0


def _ellipse_steps(r1: int, r2: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) offsets of one quadrant of a Bresenham ellipse."""
    x, y = 0, r2
    a2, b2 = r1 * r1, r2 * r2
    s = a2 * (1 - 2 * r2) + 2 * b2
    t = b2 - 2 * a2 * (2 * r2 - 1)
    yield x, y
    while True:
        if s < 0:
            s += 2 * b2 * (2 * x + 3)
            t += 4 * b2 * (x + 1)
            x += 1
        elif t < 0:
            s += 2 * b2 * (2 * x + 3) - 4 * a2 * (y - 1)
            t += 4 * b2 * (x + 1) - 2 * a2 * (2 * y - 3)
            x += 1
            y -= 1
        else:
            s -= 4 * a2 * (y - 1)
            t -= 2 * a2 * (2 * y - 3)
            y -= 1
        yield x, y
        if y <= 0:
            break


def walk_ellipse(xc: int, yc: int, r1: int, r2: int) -> Iterator[tuple[int, int]]:
    """Yield the outline points of an ellipse centred on (xc, yc).

    ``r1`` is the horizontal radius, ``r2`` the vertical one. Points on
    the axes may be yielded more than once.
    """
    for x, y in _ellipse_steps(r1, r2):
        yield xc - x, yc - y
        yield xc + x, yc + y
        yield xc - x, yc + y
        yield xc + x, yc - y


def walk_filled_ellipse(
    xc: int, yc: int, r1: int, r2: int
) -> Iterator[tuple[int, int, int]]:
    """Yield (x0, x1, y) horizontal spans covering a filled ellipse.

    Spans include both end points; a row may be yielded more than once.
    """
    for x, y in _ellipse_steps(r1, r2):
        yield xc - x, xc + x, yc - y
        yield xc - x, xc + x, yc + y