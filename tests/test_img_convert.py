import pytest

from evilpixie.colours import RGBA8, RGBX8, Colour, PixelFormat
from evilpixie.img import Img
from evilpixie.img_convert import (
    closest_index,
    convert_i8_to_i8,
    convert_i8_to_rgba8,
    convert_i8_to_rgbx8,
    convert_rgba8_to_i8,
    convert_rgba8_to_rgbx8,
    convert_rgbx8_to_i8,
    convert_rgbx8_to_rgba8,
    remap_i8,
    remap_rgba8,
    remap_rgbx8,
)

PALETTE = [
    Colour(0, 0, 0, 255),
    Colour(255, 255, 255, 255),
    Colour(255, 0, 0, 128),
    Colour(0, 0, 255, 255),
]


def indexed():
    return Img(PixelFormat.I8, 2, 2, [0, 1, 2, 3])


def test_closest_index_exact_match():
    for i, c in enumerate(PALETTE):
        assert closest_index(PALETTE, c) == i


def test_closest_index_nearest():
    assert closest_index(PALETTE, Colour(200, 200, 200)) == 1


def test_closest_index_tie_picks_first():
    pal = [Colour(10, 10, 10), Colour(10, 10, 10)]
    assert closest_index(pal, Colour(10, 10, 10)) == 0


def test_closest_index_empty_palette():
    with pytest.raises(ValueError):
        closest_index([], Colour())


def test_i8_to_rgba8_and_back_round_trips():
    src = indexed()
    rgba = convert_i8_to_rgba8(src, PALETTE)
    assert rgba.fmt is PixelFormat.RGBA8
    assert rgba[0, 1] == PALETTE[2].to_rgba8()
    assert convert_rgba8_to_i8(rgba, PALETTE) == src


def test_i8_to_rgbx8_and_back_round_trips():
    src = Img(PixelFormat.I8, 3, 1, [0, 1, 3])
    rgbx = convert_i8_to_rgbx8(src, PALETTE)
    assert rgbx.pixels == [PALETTE[i].to_rgbx8() for i in (0, 1, 3)]
    assert convert_rgbx8_to_i8(rgbx, PALETTE) == src


def test_rgbx8_to_rgba8_is_opaque():
    src = Img(PixelFormat.RGBX8, 2, 1, [RGBX8(1, 2, 3), RGBX8(4, 5, 6)])
    out = convert_rgbx8_to_rgba8(src)
    assert all(p.a == 255 for p in out.pixels)
    assert convert_rgba8_to_rgbx8(out) == src


def test_rgba8_to_rgbx8_drops_alpha():
    src = Img(PixelFormat.RGBA8, 1, 1, [RGBA8(9, 8, 7, 6)])
    out = convert_rgba8_to_rgbx8(src)
    assert out[0, 0] == RGBX8(9, 8, 7)


def test_i8_to_i8_with_reversed_palette():
    src = indexed()
    reversed_pal = list(reversed(PALETTE))
    out = convert_i8_to_i8(src, PALETTE, reversed_pal)
    assert [reversed_pal[i] for i in out.pixels] == [PALETTE[i] for i in src.pixels]
    assert src.pixels == [0, 1, 2, 3]


def test_remap_i8_in_place_matches_convert():
    src = indexed()
    reversed_pal = list(reversed(PALETTE))
    expected = convert_i8_to_i8(src, PALETTE, reversed_pal)
    remap_i8(src, PALETTE, reversed_pal)
    assert src == expected


def test_remap_rgbx8_results_in_palette():
    img = Img(PixelFormat.RGBX8, 3, 1, [RGBX8(250, 250, 250), RGBX8(3, 3, 3), RGBX8(0, 0, 240)])
    remap_rgbx8(img, PALETTE)
    allowed = {c.to_rgbx8() for c in PALETTE}
    assert all(p in allowed for p in img.pixels)
    assert img[0, 0] == PALETTE[1].to_rgbx8()


def test_remap_rgba8_uses_palette_alpha():
    img = Img(PixelFormat.RGBA8, 1, 1, [RGBA8(250, 0, 0, 130)])
    remap_rgba8(img, PALETTE)
    assert img[0, 0] == PALETTE[2].to_rgba8()


@pytest.mark.parametrize(
    "func, img",
    [
        (lambda i: convert_rgba8_to_i8(i, PALETTE), Img(PixelFormat.I8, 1, 1)),
        (lambda i: convert_rgbx8_to_i8(i, PALETTE), Img(PixelFormat.RGBA8, 1, 1)),
        (lambda i: convert_i8_to_rgbx8(i, PALETTE), Img(PixelFormat.RGBX8, 1, 1)),
        (convert_rgbx8_to_rgba8, Img(PixelFormat.RGBA8, 1, 1)),
        (convert_rgba8_to_rgbx8, Img(PixelFormat.I8, 1, 1)),
        (lambda i: remap_rgbx8(i, PALETTE), Img(PixelFormat.I8, 1, 1)),
    ],
)
def test_wrong_format_raises(func, img):
    with pytest.raises(ValueError):
        func(img)