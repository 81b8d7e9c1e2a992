import pytest

from evilpixie.box import Box
from evilpixie.colours import Colour, PenColour, PixelFormat, RGBA8, RGBX8
from evilpixie.img import Img, rotate90_clockwise


def numbered(w, h):
    return Img(PixelFormat.I8, w, h, range(w * h))


def test_new_images_are_zeroed():
    assert set(Img(PixelFormat.I8, 3, 2).pixels) == {0}
    assert set(Img(PixelFormat.RGBX8, 2, 2).pixels) == {RGBX8(0, 0, 0)}
    assert set(Img(PixelFormat.RGBA8, 2, 2).pixels) == {RGBA8(0, 0, 0, 0)}
    assert Img(PixelFormat.I8, 3, 2).bounds == Box(0, 0, 3, 2)


def test_initial_size_mismatch_raises():
    with pytest.raises(ValueError):
        Img(PixelFormat.I8, 2, 2, [1, 2, 3])


def test_pixel_access_and_bounds_check():
    img = numbered(3, 2)
    assert img[2, 1] == 5
    img[0, 0] = 9
    assert img.pixels[0] == 9
    with pytest.raises(IndexError):
        img[3, 0]


def test_copy_is_equal_and_independent():
    img = numbered(4, 3)
    dup = img.copy()
    assert dup == img
    dup[0, 0] = 99
    assert img[0, 0] == 0


def test_from_area_matches_source():
    img = numbered(5, 4)
    area = Box(1, 1, 3, 2)
    sub = Img.from_area(img, area)
    assert (sub.w, sub.h) == (3, 2)
    for y in range(2):
        for x in range(3):
            assert sub[x, y] == img[x + 1, y + 1]


def test_from_area_outside_raises():
    with pytest.raises(ValueError):
        Img.from_area(numbered(3, 3), Box(2, 2, 3, 3))


def test_hline():
    img = Img(PixelFormat.RGBX8, 4, 2)
    img.hline(PenColour(Colour(1, 2, 3), 5), 1, 3, 1)
    assert [img[x, 1] for x in range(4)] == [
        RGBX8(0, 0, 0), RGBX8(1, 2, 3), RGBX8(1, 2, 3), RGBX8(0, 0, 0)
    ]
    assert set(img.pixels[:4]) == {RGBX8(0, 0, 0)}


def test_fill_box_clips_and_returns_affected():
    img = Img(PixelFormat.I8, 4, 4)
    affected = img.fill_box(PenColour(Colour(), 7), Box(2, 2, 10, 10))
    assert affected == Box(2, 2, 2, 2)
    for y in range(4):
        for x in range(4):
            assert img[x, y] == (7 if affected.contains_point((x, y)) else 0)


def test_fill_box_on_indexed_needs_index():
    img = Img(PixelFormat.I8, 2, 2)
    with pytest.raises(ValueError):
        img.fill_box(PenColour(Colour(1, 1, 1)), Box(0, 0, 2, 2))


def test_fill_box_rgba_uses_pen_alpha():
    img = Img(PixelFormat.RGBA8, 2, 2)
    img.fill_box(PenColour(Colour(4, 5, 6, 7)), Box(0, 0, 2, 2))
    assert set(img.pixels) == {RGBA8(4, 5, 6, 7)}


def test_outline_box_draws_border_only():
    img = Img(PixelFormat.RGBX8, 5, 5)
    red = RGBX8(255, 0, 0)
    box = Box(0, 0, 5, 5)
    img.outline_box(PenColour(Colour(255, 0, 0)), box)
    for y in range(5):
        for x in range(5):
            on_edge = x in (0, 4) or y in (0, 4)
            assert (img[x, y] == red) == on_edge


def test_outline_box_rejects_indexed():
    with pytest.raises(ValueError):
        Img(PixelFormat.I8, 3, 3).outline_box(PenColour(Colour(), 1), Box(0, 0, 3, 3))


def test_xflip():
    img = numbered(3, 2)
    img.xflip()
    assert [img[x, 0] for x in range(3)] == [2, 1, 0]
    img.xflip()
    assert img == numbered(3, 2)


def test_yflip():
    img = numbered(2, 3)
    img.yflip()
    assert [img[0, y] for y in range(3)] == [4, 2, 0]
    img.yflip()
    assert img == numbered(2, 3)


def test_rotate_clockwise_2x2():
    img = Img(PixelFormat.I8, 2, 2, [1, 2, 3, 4])
    assert rotate90_clockwise(img).pixels == [3, 1, 4, 2]


def test_rotate_swaps_dimensions_and_four_turns_is_identity():
    img = numbered(4, 3)
    once = rotate90_clockwise(img)
    assert (once.w, once.h) == (3, 4)
    back = rotate90_clockwise(rotate90_clockwise(rotate90_clockwise(once)))
    assert back == img