"""In-memory images in one of the supported pixel formats."""

from __future__ import annotations

from dataclasses import replace
from itertools import chain
from typing import Iterable, Union

from .box import Box
from .colours import RGBA8, RGBX8, PenColour, PixelFormat

__all__ = ["Img", "rotate90_clockwise"]

Pixel = Union[int, RGBX8, RGBA8]


def _blank_pixel(fmt: PixelFormat) -> Pixel:
    if fmt is PixelFormat.I8:
        return 0
    if fmt is PixelFormat.RGBX8:
        return RGBX8(0, 0, 0)
    return RGBA8(0, 0, 0, 0)


class Img:
    """A w x h image.

    ``pixels`` is a flat row-major list: ints for I8 images, RGBX8 or RGBA8
    values for the RGB formats. Pixels are addressed as ``img[x, y]``.
    """

    __slots__ = ("fmt", "w", "h", "pixels")

    def __init__(
        self,
        fmt: PixelFormat,
        w: int,
        h: int,
        initial: Iterable[Pixel] | None = None,
    ) -> None:
        self.fmt = PixelFormat(fmt)
        if w < 0 or h < 0:
            raise ValueError(f"bad image size {w}x{h}")
        self.w = w
        self.h = h
        if initial is None:
            self.pixels: list[Pixel] = [_blank_pixel(self.fmt)] * (w * h)
        else:
            self.pixels = list(initial)
            if len(self.pixels) != w * h:
                raise ValueError(
                    f"expected {w * h} pixels, got {len(self.pixels)}"
                )

    @classmethod
    def from_area(cls, other: Img, area: Box) -> Img:
        """Copy the ``area`` of ``other`` into a new image."""
        if area.w < 0 or area.h < 0:
            raise ValueError(f"bad area {area}")
        if not area.empty and not other.bounds.contains(area):
            raise ValueError(f"area {area} lies outside the image")
        pixels: list[Pixel] = []
        for y in range(area.y, area.y + area.h):
            start = y * other.w + area.x
            pixels.extend(other.pixels[start : start + area.w])
        return cls(other.fmt, area.w, area.h, pixels)

    @property
    def bounds(self) -> Box:
        return Box(0, 0, self.w, self.h)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(f"pixel ({x}, {y}) outside {self.w}x{self.h} image")
        return y * self.w + x

    def __getitem__(self, pos: tuple[int, int]) -> Pixel:
        return self.pixels[self._offset(*pos)]

    def __setitem__(self, pos: tuple[int, int], value: Pixel) -> None:
        self.pixels[self._offset(*pos)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Img):
            return NotImplemented
        return (
            self.fmt == other.fmt
            and self.w == other.w
            and self.h == other.h
            and self.pixels == other.pixels
        )

    def __repr__(self) -> str:
        return f"Img({self.fmt.name}, {self.w}, {self.h})"

    def copy(self) -> Img:
        return Img(self.fmt, self.w, self.h, self.pixels)

    def _pen_value(self, pen: PenColour) -> Pixel:
        if self.fmt is PixelFormat.I8:
            return pen.idx
        if self.fmt is PixelFormat.RGBX8:
            return pen.to_rgbx8()
        return pen.to_rgba8()

    def hline(self, pen: PenColour, xbegin: int, xend: int, y: int) -> None:
        """Draw pixels xbegin..xend-1 of row y with ``pen``."""
        value = self._pen_value(pen)
        if xend <= xbegin:
            return
        if not (0 <= y < self.h and 0 <= xbegin and xend <= self.w):
            raise IndexError(f"span {xbegin}..{xend} of row {y} outside image")
        start = y * self.w
        self.pixels[start + xbegin : start + xend] = [value] * (xend - xbegin)

    def fill_box(self, pen: PenColour, box: Box) -> Box:
        """Fill ``box`` (clipped to the image); return the area affected."""
        clipped = replace(box)
        clipped.clip_against(self.bounds)
        for y in range(clipped.ymin, clipped.ymax + 1):
            self.hline(pen, clipped.xmin, clipped.xmax + 1, y)
        return clipped

    def outline_box(self, pen: PenColour, box: Box) -> Box:
        """Draw the border of ``box`` (clipped); RGBX8 images only."""
        if self.fmt is not PixelFormat.RGBX8:
            raise ValueError("outline_box only supports RGBX8 images")
        clipped = replace(box)
        clipped.clip_against(self.bounds)
        if clipped.empty:
            return clipped
        self.hline(pen, clipped.xmin, clipped.xmax + 1, clipped.ymin)
        self.hline(pen, clipped.xmin, clipped.xmax + 1, clipped.ymax)
        value = pen.to_rgbx8()
        for y in range(clipped.ymin + 1, clipped.ymax):
            self[clipped.xmin, y] = value
            self[clipped.xmax, y] = value
        return clipped

    def _rows(self) -> list[list[Pixel]]:
        return [self.pixels[y * self.w : (y + 1) * self.w] for y in range(self.h)]

    def xflip(self) -> None:
        """Mirror the image left to right."""
        self.pixels = list(chain.from_iterable(row[::-1] for row in self._rows()))

    def yflip(self) -> None:
        """Mirror the image top to bottom."""
        self.pixels = list(chain.from_iterable(reversed(self._rows())))


def rotate90_clockwise(img: Img) -> Img:
    """Return a copy of ``img`` rotated 90 degrees clockwise."""
    dest_w, dest_h = img.h, img.w
    pixels = [
        img.pixels[(img.h - 1 - x) * img.w + y]
        for y in range(dest_h)
        for x in range(dest_w)
    ]
    return Img(img.fmt, dest_w, dest_h, pixels)