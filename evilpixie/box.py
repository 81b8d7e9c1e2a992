"""Axis-aligned integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Box"]


@dataclass
class Box:
    """A rectangle with top-left corner (x, y), width w and height h.

    Points are (x, y) tuples.
    """

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @classmethod
    def from_points(cls, p1: tuple[int, int], p2: tuple[int, int]) -> Box:
        """Smallest box containing both points."""
        x1, y1 = p1
        x2, y2 = p2
        return cls(min(x1, x2), min(y1, y2), abs(x2 - x1) + 1, abs(y2 - y1) + 1)

    @property
    def empty(self) -> bool:
        return self.w == 0 or self.h == 0

    @property
    def xmin(self) -> int:
        return self.x

    @property
    def xmax(self) -> int:
        return self.x + self.w - 1

    @property
    def ymin(self) -> int:
        return self.y

    @property
    def ymax(self) -> int:
        return self.y + self.h - 1

    @property
    def top_left(self) -> tuple[int, int]:
        return (self.x, self.y)

    def translate(self, delta: tuple[int, int]) -> None:
        dx, dy = delta
        self.x += dx
        self.y += dy

    def set_empty(self) -> None:
        self.x = self.y = self.w = self.h = 0

    def expand(self, amount: int) -> None:
        """Grow the box by ``amount`` on every side."""
        self.x -= amount
        self.y -= amount
        self.w += amount * 2
        self.h += amount * 2

    def clip_against(self, other: Box) -> None:
        """Shrink this box to its intersection with ``other``."""
        left = max(self.x, other.x)
        right = min(self.x + self.w, other.x + other.w)
        top = max(self.y, other.y)
        bottom = min(self.y + self.h, other.y + other.h)
        self.x, self.y = left, top
        self.w, self.h = right - left, bottom - top
        if self.w < 0 or self.h < 0:
            self.set_empty()

    def merge(self, other: Box) -> None:
        """Grow this box to also cover ``other``."""
        if other.empty:
            return
        if self.empty:
            self.x, self.y, self.w, self.h = other.x, other.y, other.w, other.h
            return
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.xmax, other.xmax)
        bottom = max(self.ymax, other.ymax)
        self.x, self.y = left, top
        self.w = right - left + 1
        self.h = bottom - top + 1

    def contains(self, other: Box) -> bool:
        return (
            self.xmin <= other.xmin
            and self.xmax >= other.xmax
            and self.ymin <= other.ymin
            and self.ymax >= other.ymax
        )

    def contains_point(self, pt: tuple[int, int]) -> bool:
        px, py = pt
        return self.xmin <= px <= self.xmax and self.ymin <= py <= self.ymax