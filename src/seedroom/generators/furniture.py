"""Furniture placement engine.

Places furniture one piece at a time by rejection sampling:
1. Sample a candidate position according to the piece's placement rule
2. Reject it if it leaves the room margins, crosses above the floor,
   or collides with anything placed so far
3. Keep the first accepted candidate

If every attempt is rejected the piece goes to a deterministic fallback
spot near the room origin, so a layout always has its full furniture set.
Fallback pieces may overlap others.
"""

from __future__ import annotations

import logging
from typing import Iterable

from seedroom.generators.collision import (
    PAD,
    collides,
    rect_in_bounds,
    rect_in_vertical_bounds,
)
from seedroom.generators.profiles import STANDALONE, RoomProfile
from seedroom.generators.rng import Rng, rand_int
from seedroom.models.catalog import (
    FURNITURE_DEFS,
    FurnitureDef,
    FurnitureName,
    FurniturePlacement,
)
from seedroom.models.geometry import Rect
from seedroom.models.layout import DoorSide

logger = logging.getLogger(__name__)

FURNITURE_ATTEMPTS = 80

# Doors sit this far inside the side wall they are cut into.
DOOR_INSET = 1


def door_x(door_side: DoorSide, room_w: float, door_w: float) -> float:
    """X coordinate of a door pinned to ``door_side``."""
    return DOOR_INSET if door_side == "left" else room_w - door_w - DOOR_INSET


def place_furniture(
    rng: Rng,
    name: FurnitureName,
    placed: list[Rect],
    door_side: DoorSide,
    room_w: float,
    room_h: float,
    wall_y: float,
    floor_top: float,
    profile: RoomProfile = STANDALONE,
) -> Rect:
    """Place a single furniture piece.

    Args:
        rng: Random stream.
        name: Piece to place (looked up in FURNITURE_DEFS).
        placed: Rects placed so far; not modified.
        door_side: Side wall holding the door.
        room_w: Room width.
        room_h: Room height.
        wall_y: Bottom of the wall strip (0 when top-down).
        floor_top: Topmost y for floor furniture.
        profile: Standalone room or apartment sub-room sampling.

    Returns:
        The accepted rect, or the fallback rect after FURNITURE_ATTEMPTS
        rejections.
    """
    fdef = FURNITURE_DEFS[name]
    rect = _sample_placement(
        rng, name, fdef, placed, door_side, room_w, room_h, wall_y, floor_top, profile,
    )
    if rect is None:
        rect = _fallback_rect(fdef, placed, floor_top)
        logger.debug(
            "%s: no free spot for %s after %d attempts, fallback at (%.1f, %.1f)",
            profile.name, name.value, FURNITURE_ATTEMPTS, rect.x, rect.y,
        )
    return rect


def place_furniture_set(
    rng: Rng,
    names: Iterable[FurnitureName],
    placed: list[Rect],
    door_side: DoorSide,
    room_w: float,
    room_h: float,
    wall_y: float,
    floor_top: float,
    profile: RoomProfile = STANDALONE,
) -> dict[FurnitureName, Rect]:
    """Place an ordered furniture manifest.

    Each accepted rect is appended to ``placed`` (mutated in place) before
    the next piece is sampled, so later pieces avoid earlier ones.
    """
    furniture: dict[FurnitureName, Rect] = {}
    for name in names:
        rect = place_furniture(
            rng, name, placed, door_side, room_w, room_h, wall_y, floor_top, profile,
        )
        furniture[name] = rect
        placed.append(rect)
    return furniture


def _sample_placement(
    rng: Rng,
    name: FurnitureName,
    fdef: FurnitureDef,
    placed: list[Rect],
    door_side: DoorSide,
    room_w: float,
    room_h: float,
    wall_y: float,
    floor_top: float,
    profile: RoomProfile,
) -> Rect | None:
    """Rejection-sample a position; None when all attempts fail."""
    is_door = name == FurnitureName.DOOR
    sample = _sample_sub_room if profile.sub_room else _sample_standalone

    for _ in range(FURNITURE_ATTEMPTS):
        x, y = sample(rng, is_door, fdef, door_side, room_w, room_h, wall_y, floor_top)
        candidate = Rect(x=x, y=y, w=fdef.w, h=fdef.h)

        if is_door:
            if not rect_in_vertical_bounds(candidate, room_h):
                continue
        else:
            if not rect_in_bounds(candidate, room_w, room_h):
                continue
            if candidate.y < floor_top:
                continue
        if collides(candidate, placed):
            continue
        return candidate
    return None


def _sample_standalone(
    rng: Rng,
    is_door: bool,
    fdef: FurnitureDef,
    door_side: DoorSide,
    room_w: float,
    room_h: float,
    wall_y: float,
    floor_top: float,
) -> tuple[float, float]:
    """Candidate position for a room drawn with a back wall."""
    w, h = fdef.w, fdef.h

    if is_door:
        return door_x(door_side, room_w, w), max(2, wall_y - 18) + rand_int(rng, 8)

    if fdef.placement == FurniturePlacement.BACK_WALL:
        x = PAD + rand_int(rng, room_w - w - PAD * 2 - 24)
        y = floor_top + rand_int(rng, 6)
        wall_pick = rng()
        if wall_pick < 0.2:
            # Against the left wall, anywhere down the floor
            x = 2
            y = floor_top + rand_int(rng, room_h - floor_top - h - 8)
        elif wall_pick < 0.35:
            # Right wall corner
            x = room_w - w - 2
            y = floor_top + rand_int(rng, 20)
        return x, y

    if fdef.placement == FurniturePlacement.SIDE_WALL:
        x = 2 if rng() < 0.5 else room_w - w - 2
        y = floor_top + 4 + rand_int(rng, room_h - floor_top - h - 12)
        return x, y

    x = 20 + rand_int(rng, room_w - w - 44)
    y = floor_top + 16 + rand_int(rng, room_h - floor_top - h - 22)
    return x, y


def _sample_sub_room(
    rng: Rng,
    is_door: bool,
    fdef: FurnitureDef,
    door_side: DoorSide,
    room_w: float,
    room_h: float,
    wall_y: float,
    floor_top: float,
) -> tuple[float, float]:
    """Candidate position for a small apartment room."""
    w, h = fdef.w, fdef.h
    has_wall = floor_top > 10

    if is_door:
        return door_x(door_side, room_w, w), max(2, floor_top - 18) + rand_int(rng, 8)

    if fdef.placement == FurniturePlacement.BACK_WALL and has_wall:
        return 4 + rng() * (room_w - w - 8), floor_top + rand_int(rng, 6)

    if not has_wall:
        return 4 + rng() * (room_w - w - 8), 4 + rng() * (room_h - h - 8)

    x = 10 + rng() * (room_w - w - 20)
    y = floor_top + 10 + rng() * (room_h - floor_top - h - 14)
    return x, y


def _fallback_rect(fdef: FurnitureDef, placed: list[Rect], floor_top: float) -> Rect:
    """Deterministic spot near the origin, stepped by placement order."""
    return Rect(x=4 + len(placed) * 8, y=floor_top + 2, w=fdef.w, h=fdef.h)
