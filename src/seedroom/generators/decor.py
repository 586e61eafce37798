"""Decor generation: floor clutter and wall-mounted items.

Floor decor avoids furniture footprints. Wall decor lives in the wall
strip above the floor, avoids other wall decor, and keeps clear of the
window above the desk.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping

from seedroom.generators.collision import collides
from seedroom.generators.profiles import STANDALONE, RoomProfile
from seedroom.generators.rng import Rng, rand_int
from seedroom.models.catalog import (
    FLOOR_DECOR_TYPES,
    WALL_DECOR_SIZES,
    WALL_DECOR_TYPES,
    FurnitureName,
    WallDecorType,
)
from seedroom.models.geometry import Rect
from seedroom.models.layout import FloorDecorItem, WallDecorItem

logger = logging.getLogger(__name__)

FLOOR_DECOR_ATTEMPTS = 15
WALL_DECOR_ATTEMPTS = 20

# Gaps kept between neighbouring wall decor items.
WALL_DECOR_GAP_X = 4
WALL_DECOR_GAP_Y = 3

# Window above the desk: reserved span and its bottom edge.
WINDOW_WIDTH = 26
WINDOW_MARGIN = 4
WINDOW_BOTTOM = 28
DEFAULT_DESK_X = 80


def generate_floor_decor(
    rng: Rng,
    placed: list[Rect],
    room_w: float,
    room_h: float,
    floor_top: float,
    profile: RoomProfile = STANDALONE,
) -> list[FloorDecorItem]:
    """Scatter floor clutter around the placed furniture.

    Args:
        rng: Random stream.
        placed: Furniture rects to avoid.
        room_w: Room width.
        room_h: Room height.
        floor_top: Topmost y of the floor.
        profile: Controls the item count and whether blocked items are
            forced into place or dropped.

    Returns:
        Decor items in placement order.
    """
    items: list[FloorDecorItem] = []
    count = profile.floor_decor_min + rand_int(rng, profile.floor_decor_spread)

    for _ in range(count):
        decor_type = FLOOR_DECOR_TYPES[rand_int(rng, len(FLOOR_DECOR_TYPES))]
        size = 3 + rng() * 4
        spot, last = _find_floor_spot(rng, placed, size, room_w, room_h, floor_top)

        if spot is None:
            if not profile.force_floor_decor:
                logger.debug("%s: dropped %s decor, floor too crowded", profile.name, decor_type.value)
                continue
            # Forced: keep the final sample even though it touches furniture
            spot = last
            logger.debug("%s: forced %s decor at (%.1f, %.1f)", profile.name, decor_type.value, *spot)

        x, y = spot
        items.append(FloorDecorItem(type=decor_type, x=x, y=y, rot=(rng() - 0.5) * 0.5, size=size))

    return items


def _find_floor_spot(
    rng: Rng,
    placed: list[Rect],
    size: float,
    room_w: float,
    room_h: float,
    floor_top: float,
) -> tuple[tuple[float, float] | None, tuple[float, float]]:
    """Sample centre points until one clears the furniture.

    Returns ``(spot, last_sample)``; ``spot`` is None when every attempt
    collided.
    """
    x = y = 0.0
    for _ in range(FLOOR_DECOR_ATTEMPTS):
        x = 8 + rng() * (room_w - 16)
        y = floor_top + 5 + rng() * (room_h - floor_top - 10)
        footprint = Rect(x=x - size, y=y - size, w=size * 2, h=size * 2)
        if not collides(footprint, placed):
            return (x, y), (x, y)
    return None, (x, y)


def generate_wall_decor(
    rng: Rng,
    furniture: Mapping[FurnitureName, Rect],
    room_w: float,
    wall_y: float,
    profile: RoomProfile = STANDALONE,
) -> list[WallDecorItem]:
    """Hang decor on the back wall.

    Rooms without a wall strip (``wall_y <= 0``) get nothing and consume
    no random draws. Items that cannot find a spot are skipped.
    """
    if wall_y <= 0:
        return []

    items: list[WallDecorItem] = []
    window_x = _window_x(furniture)
    count = profile.wall_decor_min + rand_int(rng, profile.wall_decor_spread)

    for _ in range(count):
        decor_type = WALL_DECOR_TYPES[rand_int(rng, len(WALL_DECOR_TYPES))]
        w, h = _wall_decor_size(rng, decor_type)

        for _attempt in range(WALL_DECOR_ATTEMPTS):
            x = 6 + rand_int(rng, room_w - w - 30)
            y = 3 + rand_int(rng, wall_y - h - 16)
            if y < 0 or y + h > wall_y:
                continue
            if any(_wall_items_touch(x, y, w, h, p) for p in items):
                continue
            if _blocks_window(x, y, w, window_x):
                continue
            items.append(WallDecorItem(type=decor_type, x=x, y=y, w=w, h=h, rot=(rng() - 0.5) * 0.1))
            break
        else:
            logger.debug("%s: skipped %s wall decor, no free wall space", profile.name, decor_type.value)

    return items


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _wall_decor_size(rng: Rng, decor_type: WallDecorType) -> tuple[int, int]:
    (w_base, w_spread), h_range = WALL_DECOR_SIZES[decor_type]
    w = w_base + rng() * w_spread
    if h_range is None:
        h = w
    else:
        h_base, h_spread = h_range
        h = h_base + rng() * h_spread
    return _round_half_up(w), _round_half_up(h)


def _window_x(furniture: Mapping[FurnitureName, Rect]) -> float:
    """Left edge of the window, which tracks the desk position."""
    desk = furniture.get(FurnitureName.DESK)
    desk_x = desk.x if desk is not None else DEFAULT_DESK_X
    return 30 + (desk_x * 0.5) % 120


def _blocks_window(x: float, y: float, w: float, window_x: float) -> bool:
    return (
        x < window_x + WINDOW_WIDTH
        and x + w > window_x - WINDOW_MARGIN
        and y < WINDOW_BOTTOM
    )


def _wall_items_touch(x: float, y: float, w: float, h: float, other: WallDecorItem) -> bool:
    return (
        x < other.x + other.w + WALL_DECOR_GAP_X
        and x + w + WALL_DECOR_GAP_X > other.x
        and y < other.y + other.h + WALL_DECOR_GAP_Y
        and y + h + WALL_DECOR_GAP_Y > other.y
    )
