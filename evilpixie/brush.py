"""Brushes: small images used as drawing nibs."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from .box import Box
from .colours import Colour, PenColour, PixelFormat
from .img import Img, Pixel

__all__ = ["BrushStyle", "Brush"]


class BrushStyle(Enum):
    MASK = 0
    FULLCOLOUR = 1


class Brush(Img):
    """An image with a handle point, a transparent colour and a palette."""

    __slots__ = ("style", "handle", "transparent", "palette")

    def __init__(
        self,
        style: BrushStyle,
        w: int,
        h: int,
        initial: Iterable[Pixel] | None,
        transparent: PenColour,
        fmt: PixelFormat = PixelFormat.I8,
    ) -> None:
        super().__init__(fmt, w, h, initial)
        self.style = style
        self.handle: tuple[int, int] = (w // 2, h // 2)
        self.transparent = transparent
        self.palette: list[Colour] = []

    @classmethod
    def from_image(
        cls, style: BrushStyle, src: Img, area: Box, transparent: PenColour
    ) -> Brush:
        """A brush copied from ``area`` of ``src``, in the same format."""
        cut = Img.from_area(src, area)
        return cls(style, cut.w, cut.h, cut.pixels, transparent, fmt=src.fmt)

    def set_palette(self, palette: Sequence[Colour]) -> None:
        self.palette = list(palette)