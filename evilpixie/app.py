"""The GUI-neutral application core: standard and custom brushes."""

from __future__ import annotations

from .brush import Brush, BrushStyle
from .colours import Colour, PenColour

__all__ = ["App", "standard_brushes", "NUM_STD_BRUSHES", "DEFAULT_DATA_PATH"]

NUM_STD_BRUSHES = 4
DEFAULT_DATA_PATH = "./data"

_STD_BRUSH_SIZES = (1, 3, 5, 7)


def _round_mask(size: int) -> tuple[int, ...]:
    """A roughly circular mask of odd ``size``, row by row (1 = set)."""
    radius = size // 2
    limit = radius * radius + radius // 2
    return tuple(
        1 if (x - radius) ** 2 + (y - radius) ** 2 <= limit else 0
        for y in range(size)
        for x in range(size)
    )


def standard_brushes() -> list[Brush]:
    """The four round mask brushes: 1x1, 3x3, 5x5 and 7x7."""
    transparent = PenColour(Colour(0, 0, 0), 0)
    return [
        Brush(BrushStyle.MASK, size, size, _round_mask(size), transparent)
        for size in _STD_BRUSH_SIZES
    ]


class App:
    """Holds the brushes shared by all editors and the data directory.

    ``data_path`` is where static files (icons, default palette, help) live.
    """

    def __init__(self, data_path: str | None = None) -> None:
        self.custom_brush: Brush | None = None
        self.std_brushes: list[Brush] = standard_brushes()
        self.data_path = DEFAULT_DATA_PATH if data_path is None else data_path

    def std_brush(self, n: int) -> Brush:
        if not 0 <= n < NUM_STD_BRUSHES:
            raise IndexError(f"no standard brush {n}")
        return self.std_brushes[n]