"""Character and companion placement.

The character stands on open floor; the companion (the dog) stands on a
flattened ring around the character so it appears beside, not above or
below, its owner.
"""

from __future__ import annotations

import logging
import math

from seedroom.generators.collision import collides, rect_in_bounds
from seedroom.generators.rng import Rng
from seedroom.models.geometry import Position, Rect

logger = logging.getLogger(__name__)

OPEN_FLOOR_ATTEMPTS = 50
NEARBY_ATTEMPTS = 30

# Sprite footprints (w, h).
CHARACTER_SIZE = (12, 24)
COMPANION_SIZE = (16, 12)

NEARBY_MIN_DIST = 15
NEARBY_DIST_SPREAD = 20
NEARBY_VERTICAL_SQUASH = 0.5
NEARBY_FALLBACK_OFFSET = (25, 5)


def open_floor_fallback(room_w: float, room_h: float) -> Position:
    """Horizontal centre, three quarters of the way down the room."""
    return Position(x=room_w / 2, y=room_h * 0.75)


def nearby_fallback(anchor: Position) -> Position:
    return anchor.offset(*NEARBY_FALLBACK_OFFSET)


def find_open_floor(
    rng: Rng,
    placed: list[Rect],
    w: float,
    h: float,
    room_w: float,
    room_h: float,
    floor_top: float,
) -> Position:
    """Find a free floor point for a ``w`` x ``h`` sprite.

    The returned point is the bottom-centre of the sprite (its feet).
    """
    for _ in range(OPEN_FLOOR_ATTEMPTS):
        x = 20 + rng() * (room_w - 60)
        y = floor_top + 20 + rng() * (room_h - floor_top - h - 24)
        footprint = Rect(x=x - w / 2, y=y - h, w=w, h=h)
        if not rect_in_bounds(footprint, room_w, room_h):
            continue
        if collides(footprint, placed):
            continue
        return Position(x=x, y=y)

    pos = open_floor_fallback(room_w, room_h)
    logger.debug("no open floor after %d attempts, using (%.1f, %.1f)", OPEN_FLOOR_ATTEMPTS, pos.x, pos.y)
    return pos


def find_nearby(
    rng: Rng,
    placed: list[Rect],
    anchor: Position,
    w: float,
    h: float,
    room_w: float,
    room_h: float,
    floor_top: float,
) -> Position:
    """Find a free point 15-35 units from ``anchor``."""
    for _ in range(NEARBY_ATTEMPTS):
        angle = rng() * math.pi * 2
        dist = NEARBY_MIN_DIST + rng() * NEARBY_DIST_SPREAD
        x = anchor.x + math.cos(angle) * dist
        y = anchor.y + math.sin(angle) * dist * NEARBY_VERTICAL_SQUASH
        footprint = Rect(x=x, y=y, w=w, h=h)
        if not rect_in_bounds(footprint, room_w, room_h):
            continue
        if footprint.y < floor_top:
            continue
        if collides(footprint, placed):
            continue
        return Position(x=x, y=y)

    pos = nearby_fallback(anchor)
    logger.debug("no free spot near (%.1f, %.1f), using offset fallback", anchor.x, anchor.y)
    return pos
