# evilpixie

The image core of a pixel-art paint program, written in pure Python.
It has no third-party dependencies.

## What it provides

- `evilpixie.colours`
  - Colour types: `Colour`, `RGBX8`, `RGBA8`, `RGBf` and `HSVf`.
  - `PenColour`, which always holds an RGB value and may also hold a palette index.
  - The `PixelFormat` enum, with members `I8`, `RGBX8` and `RGBA8`, and `pixel_size`, which gives the byte size of a pixel in each format.
  - `parse_hex_colour`, which reads `#rgb`, `#rgba`, `#rrggbb` and `#rrggbbaa`. It raises `ValueError` on bad input.
  - `rgb_to_hsv` and `hsv_to_rgb`.
  - `blend`, `dist_sq` and `lerp`.
- `evilpixie.box`
  - `Box`, an integer rectangle.
  - `from_points`, `clip_against`, `merge`, `expand`, `translate`, `contains` and `contains_point`.
- `evilpixie.img`
  - `Img`, an image that stores its pixels in a flat list and is indexed as `img[x, y]`.
  - Copying: `from_area` and `copy`.
  - Drawing: `hline`, `fill_box` and `outline_box`. `outline_box` works on RGBX8 images only.
  - Mirroring in place: `xflip` and `yflip`.
  - `rotate90_clockwise`, which returns a rotated copy.
- `evilpixie.blit`
  - `clip_blit`.
  - `blit` and `blit_swap`, which copy or exchange areas between images of the same format.
- `evilpixie.blit_keyed`
  - Colour-keyed blits: `blit_i8_keyed`, `blit_rgbx8_keyed` and `blit_rgba8_keyed`.
  - The dispatcher `blit_transparent`.
- `evilpixie.blit_matte`
  - Matte blits, which draw every non-transparent source pixel in one colour.
  - `blit_matte` picks the right variant for the source format.
- `evilpixie.blit_zoom`
  - Integer-zoom blits: `blit_zoom`, `blit_zoom_i8`, `blit_zoom_rgbx8` and `blit_zoom_rgba8`.
  - Keyed and matte variants that draw onto RGBX8 images: `blit_zoom_keyed` and `blit_zoom_matte_keyed`.
- `evilpixie.blit_range`
  - `blit_range_shift_keyed` and `draw_rect_range_shift`.
  - Both move pixels up or down a sequence of `PenColour`s. The first works through a mask image, the second over a rectangle.
- `evilpixie.img_convert`
  - Conversions between the three pixel formats.
  - In-place remapping to a palette: `remap_i8`, `remap_rgbx8` and `remap_rgba8`.
  - `closest_index`.
  - A palette is any sequence of `Colour`.
- `evilpixie.draw`
  - `flood_fill` and `rect_fill`. Each returns the area it changed.
  - Generators that yield the points or spans a shape covers: `walk_line`, `walk_ellipse` and `walk_filled_ellipse`.
- `evilpixie.brush`
  - `Brush`, an `Img` with a handle, a transparent pen and a palette. `Brush.from_image` cuts a brush out of an image.
  - The `BrushStyle` enum.
- `evilpixie.app`
  - `standard_brushes()`, which returns the round 1x1, 3x3, 5x5 and 7x7 mask brushes.
  - `App`, which holds those brushes (`std_brush(n)`), an optional `custom_brush` and a `data_path`.
- `evilpixie.file_type`
  - `filetype_from_filename`, which guesses a `Filetype` from the file extension.

Blit and fill functions do not change the boxes you pass in. They return the clipped area they affected.

## Example

```python
from evilpixie.colours import PixelFormat, PenColour, Colour
from evilpixie.box import Box
from evilpixie.img import Img
from evilpixie.draw import flood_fill, walk_line

img = Img(PixelFormat.RGBX8, 16, 16)
img.fill_box(PenColour(Colour(255, 0, 0)), Box(2, 2, 4, 4))
damage = flood_fill(img, (0, 0), PenColour(Colour(0, 0, 255)))

for x, y in walk_line(0, 15, 15, 0):
    img[x, y] = Colour(0, 255, 0).to_rgbx8()
```

## What it does not do

The package works on images held in memory.

- It does not read or write image files. `filetype_from_filename` only looks at the name.
- It has no editor, project or layer model and no undo history.
- It has no user interface and no command-line program.

## Tests

```
pip install -e .[test]
pytest
```