"""Geometric primitives for room layouts.

Coordinates are logical pixels with the origin at the top-left corner and
y growing downwards (screen space).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Position(BaseModel):
    """2D point."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Position:
        """Return a copy moved by (dx, dy)."""
        return Position(x=self.x + dx, y=self.y + dy)


class Rect(BaseModel):
    """Axis-aligned box (top-left corner plus size)."""

    x: float
    y: float
    w: float = Field(gt=0, description="Width")
    h: float = Field(gt=0, description="Height")

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    def contains(self, x: float, y: float) -> bool:
        """Half-open containment test: [x, right) x [y, bottom)."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def translate(self, dx: float, dy: float) -> Rect:
        """Return a copy moved by (dx, dy)."""
        return Rect(x=self.x + dx, y=self.y + dy, w=self.w, h=self.h)

    def shrink(self, amount: float) -> tuple[float, float, float, float]:
        """Inset every side by ``amount``.

        Returns a raw ``(x, y, w, h)`` tuple since the result may be
        degenerate for boxes smaller than ``2 * amount``.
        """
        return (
            self.x + amount,
            self.y + amount,
            self.w - amount * 2,
            self.h - amount * 2,
        )
