"""Converting images between pixel formats and remapping to palettes.

A palette is any sequence of :class:`~evilpixie.colours.Colour`.
"""

from __future__ import annotations

from typing import Sequence

from .colours import RGBA8, RGBX8, Colour, PixelFormat, dist_sq
from .img import Img

__all__ = [
    "closest_index",
    "convert_rgba8_to_i8",
    "convert_rgbx8_to_i8",
    "convert_i8_to_rgbx8",
    "convert_i8_to_rgba8",
    "convert_rgbx8_to_rgba8",
    "convert_rgba8_to_rgbx8",
    "convert_i8_to_i8",
    "remap_i8",
    "remap_rgbx8",
    "remap_rgba8",
]

Palette = Sequence[Colour]


def _require(img: Img, fmt: PixelFormat) -> None:
    if img.fmt is not fmt:
        raise ValueError(f"expected {fmt.name} image, got {img.fmt.name}")


def _to_colour(pixel: RGBX8 | RGBA8) -> Colour:
    if isinstance(pixel, RGBA8):
        return Colour(pixel.r, pixel.g, pixel.b, pixel.a)
    return Colour(pixel.r, pixel.g, pixel.b, 255)


def closest_index(palette: Palette, colour: Colour) -> int:
    """Index of the palette entry nearest ``colour`` (first one on ties)."""
    if not palette:
        raise ValueError("palette is empty")
    return min(range(len(palette)), key=lambda i: dist_sq(palette[i], colour))


def _from_rgb_to_i8(src: Img, dest_palette: Palette) -> Img:
    pixels = [closest_index(dest_palette, _to_colour(p)) for p in src.pixels]
    return Img(PixelFormat.I8, src.w, src.h, pixels)


def convert_rgba8_to_i8(src: Img, dest_palette: Palette) -> Img:
    """Lossy: map each pixel to the nearest entry of ``dest_palette``."""
    _require(src, PixelFormat.RGBA8)
    return _from_rgb_to_i8(src, dest_palette)


def convert_rgbx8_to_i8(src: Img, dest_palette: Palette) -> Img:
    """Lossy: map each pixel to the nearest entry of ``dest_palette``."""
    _require(src, PixelFormat.RGBX8)
    return _from_rgb_to_i8(src, dest_palette)


def convert_i8_to_rgbx8(src: Img, src_palette: Palette) -> Img:
    """Look each index up in ``src_palette``, dropping alpha."""
    _require(src, PixelFormat.I8)
    pixels = [src_palette[i].to_rgbx8() for i in src.pixels]
    return Img(PixelFormat.RGBX8, src.w, src.h, pixels)


def convert_i8_to_rgba8(src: Img, src_palette: Palette) -> Img:
    """Look each index up in ``src_palette``, keeping alpha."""
    _require(src, PixelFormat.I8)
    pixels = [src_palette[i].to_rgba8() for i in src.pixels]
    return Img(PixelFormat.RGBA8, src.w, src.h, pixels)


def convert_rgbx8_to_rgba8(src: Img) -> Img:
    """Add an alpha channel, fully opaque."""
    _require(src, PixelFormat.RGBX8)
    pixels = [RGBA8(p.r, p.g, p.b, 255) for p in src.pixels]
    return Img(PixelFormat.RGBA8, src.w, src.h, pixels)


def convert_rgba8_to_rgbx8(src: Img) -> Img:
    """Discard the alpha channel."""
    _require(src, PixelFormat.RGBA8)
    pixels = [RGBX8(p.r, p.g, p.b) for p in src.pixels]
    return Img(PixelFormat.RGBX8, src.w, src.h, pixels)


def convert_i8_to_i8(src: Img, src_palette: Palette, dest_palette: Palette) -> Img:
    """Return a copy of ``src`` with indices remapped to ``dest_palette``."""
    _require(src, PixelFormat.I8)
    pixels = [closest_index(dest_palette, src_palette[i]) for i in src.pixels]
    return Img(PixelFormat.I8, src.w, src.h, pixels)


def remap_i8(img: Img, src_palette: Palette, dest_palette: Palette) -> None:
    """Remap an indexed image in place to ``dest_palette``."""
    _require(img, PixelFormat.I8)
    img.pixels = [closest_index(dest_palette, src_palette[i]) for i in img.pixels]


def remap_rgbx8(img: Img, dest_palette: Palette) -> None:
    """Replace every pixel in place with its nearest ``dest_palette`` colour."""
    _require(img, PixelFormat.RGBX8)
    img.pixels = [
        dest_palette[closest_index(dest_palette, _to_colour(p))].to_rgbx8()
        for p in img.pixels
    ]


def remap_rgba8(img: Img, dest_palette: Palette) -> None:
    """Replace every pixel in place with its nearest ``dest_palette`` colour."""
    _require(img, PixelFormat.RGBA8)
    img.pixels = [
        dest_palette[closest_index(dest_palette, _to_colour(p))].to_rgba8()
        for p in img.pixels
    ]