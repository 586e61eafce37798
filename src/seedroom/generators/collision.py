"""Collision primitives shared by every placement step."""

from __future__ import annotations

from typing import Iterable

from seedroom.models.geometry import Rect

# Clearance kept between furniture pieces.
PAD = 3

# Margins of the placement area inside the room walls.
MARGIN_LEFT = 2
MARGIN_TOP = 2
MARGIN_RIGHT = 2
MARGIN_BOTTOM = 4


def rects_overlap(a: Rect, b: Rect, pad: float = PAD) -> bool:
    """True if ``a`` and ``b`` intersect once ``pad`` is added on every side."""
    return (
        a.x < b.x + b.w + pad
        and a.x + a.w + pad > b.x
        and a.y < b.y + b.h + pad
        and a.y + a.h + pad > b.y
    )


def rect_in_bounds(r: Rect, room_w: float, room_h: float) -> bool:
    """True if ``r`` keeps the wall margins of a ``room_w`` x ``room_h`` room."""
    return (
        r.x >= MARGIN_LEFT
        and r.y >= MARGIN_TOP
        and r.x + r.w <= room_w - MARGIN_RIGHT
        and r.y + r.h <= room_h - MARGIN_BOTTOM
    )


def rect_in_vertical_bounds(r: Rect, room_h: float) -> bool:
    """Bounds test for pieces pinned into a side wall (doors)."""
    return r.y >= MARGIN_TOP and r.y + r.h <= room_h - MARGIN_BOTTOM


def collides(candidate: Rect, placed: Iterable[Rect], pad: float = PAD) -> bool:
    """True if ``candidate`` overlaps any rect in ``placed``."""
    return any(rects_overlap(candidate, p, pad) for p in placed)
