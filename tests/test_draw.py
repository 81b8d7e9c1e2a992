import pytest

from evilpixie.box import Box
from evilpixie.colours import RGBA8, RGBX8, Colour, PenColour, PixelFormat
from evilpixie.draw import (
    flood_fill,
    rect_fill,
    walk_ellipse,
    walk_filled_ellipse,
    walk_line,
)
from evilpixie.img import Img


def _walled_i8():
    # 5x5 image with a wall of 1s in column 2
    pixels = []
    for _y in range(5):
        pixels.extend([0, 0, 1, 0, 0])
    return Img(PixelFormat.I8, 5, 5, pixels)


def test_flood_fill_stops_at_wall():
    img = _walled_i8()
    damage = flood_fill(img, (0, 0), PenColour(Colour(1, 2, 3), 7))
    assert damage == Box(0, 0, 2, 5)
    for y in range(5):
        assert img[0, y] == 7
        assert img[1, y] == 7
        assert img[2, y] == 1
        assert img[3, y] == 0
        assert img[4, y] == 0


def test_flood_fill_whole_image():
    img = Img(PixelFormat.RGBX8, 4, 3)
    damage = flood_fill(img, (2, 1), PenColour(Colour(9, 8, 7)))
    assert damage == img.bounds
    assert all(p == RGBX8(9, 8, 7) for p in img.pixels)


def test_flood_fill_same_colour_is_noop():
    img = _walled_i8()
    before = img.copy()
    damage = flood_fill(img, (0, 0), PenColour(Colour(), 0))
    assert damage.empty
    assert img == before


def test_flood_fill_around_obstacle():
    # ring of 1s enclosing a 0 in the middle of a 3x3
    pixels = [1, 1, 1, 1, 0, 1, 1, 1, 1]
    img = Img(PixelFormat.I8, 3, 3, pixels)
    damage = flood_fill(img, (0, 0), PenColour(Colour(), 2))
    assert damage == img.bounds
    assert img[1, 1] == 0
    assert img.pixels.count(2) == 8


def test_flood_fill_rgba8():
    img = Img(PixelFormat.RGBA8, 2, 2)
    flood_fill(img, (0, 0), PenColour(Colour(1, 2, 3, 4)))
    assert img.pixels == [RGBA8(1, 2, 3, 4)] * 4


def test_flood_fill_i8_needs_index():
    img = _walled_i8()
    with pytest.raises(ValueError):
        flood_fill(img, (0, 0), PenColour(Colour(1, 2, 3)))


def test_flood_fill_start_outside_image():
    img = _walled_i8()
    with pytest.raises(IndexError):
        flood_fill(img, (10, 0), PenColour(Colour(), 3))


def test_rect_fill_clips():
    img = Img(PixelFormat.I8, 4, 4)
    affected = rect_fill(img, Box(2, 2, 10, 10), PenColour(Colour(), 5))
    assert affected == Box(2, 2, 2, 2)
    assert img.pixels.count(5) == 4
    assert img[3, 3] == 5
    assert img[1, 1] == 0


def test_rect_fill_outside_is_empty():
    img = Img(PixelFormat.RGBX8, 4, 4)
    before = img.copy()
    affected = rect_fill(img, Box(10, 10, 2, 2), PenColour(Colour(255, 0, 0)))
    assert affected.empty
    assert img == before


def test_rect_fill_rgbx8():
    img = Img(PixelFormat.RGBX8, 3, 2)
    rect_fill(img, Box(0, 0, 3, 2), PenColour(Colour(10, 20, 30)))
    assert img.pixels == [RGBX8(10, 20, 30)] * 6


def test_walk_line_horizontal():
    assert list(walk_line(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_walk_line_diagonal():
    assert list(walk_line(0, 0, 2, 2)) == [(0, 0), (1, 1), (2, 2)]


@pytest.mark.parametrize(
    "x0,y0,x1,y1",
    [(0, 0, 7, 3), (5, 5, -2, 1), (3, -4, 1, 9), (0, 0, 0, 0), (2, 2, -6, -6)],
)
def test_walk_line_invariants(x0, y0, x1, y1):
    pts = list(walk_line(x0, y0, x1, y1))
    assert pts[0] == (x0, y0)
    assert pts[-1] == (x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(bx - ax), abs(by - ay)) == 1


def test_walk_ellipse_extremes_and_symmetry():
    xc, yc = 10, 20
    pts = set(walk_ellipse(xc, yc, 2, 2))
    for p in [(xc + 2, yc), (xc - 2, yc), (xc, yc + 2), (xc, yc - 2)]:
        assert p in pts
    for x, y in pts:
        assert (2 * xc - x, y) in pts
        assert (x, 2 * yc - y) in pts
        assert abs(x - xc) <= 2 and abs(y - yc) <= 2


def test_walk_ellipse_within_bounds():
    pts = list(walk_ellipse(0, 0, 6, 3))
    assert all(abs(x) <= 6 and abs(y) <= 3 for x, y in pts)
    assert (0, 3) in pts and (0, -3) in pts


def test_walk_filled_ellipse_spans():
    xc, yc = 4, 5
    spans = list(walk_filled_ellipse(xc, yc, 5, 3))
    rows = {y for _, _, y in spans}
    assert rows == set(range(yc - 3, yc + 4))
    for x0, x1, y in spans:
        assert x0 <= x1
        assert x0 + x1 == 2 * xc
        assert x1 - xc <= 5


def test_filled_ellipse_covers_outline():
    xc, yc = 0, 0
    widest = {}
    for x0, x1, y in walk_filled_ellipse(xc, yc, 4, 4):
        widest[y] = max(widest.get(y, 0), x1)
    for x, y in walk_ellipse(xc, yc, 4, 4):
        assert abs(x) <= widest[y]