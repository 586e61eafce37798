"""Single-room pipeline.

Runs furniture placement, decor, and character placement against one
shared list of occupied rects. Standalone rooms and apartment sub-rooms
go through the same steps with a different RoomProfile.
"""

from __future__ import annotations

from typing import Sequence

from seedroom.generators.decor import generate_floor_decor, generate_wall_decor
from seedroom.generators.furniture import place_furniture_set
from seedroom.generators.positions import (
    CHARACTER_SIZE,
    COMPANION_SIZE,
    find_nearby,
    find_open_floor,
    nearby_fallback,
    open_floor_fallback,
)
from seedroom.generators.profiles import STANDALONE, SUB_ROOM, RoomProfile
from seedroom.generators.rng import Rng
from seedroom.models.catalog import (
    ROOM_TYPES,
    SINGLE_ROOM_FURNITURE,
    FurnitureName,
    RoomType,
)
from seedroom.models.geometry import Position, Rect
from seedroom.models.layout import DoorSide, RoomLayout

DEFAULT_ROOM_WIDTH = 240
DEFAULT_ROOM_HEIGHT = 160

# Share of the room height taken by the back wall strip.
WALL_STRIP_RATIO = 0.38
# Gap between the wall strip and the first usable floor row.
FLOOR_OFFSET = 4


def room_geometry(room_h: float, top_down: bool) -> tuple[float, float]:
    """Return ``(wall_y, floor_top)`` for a room."""
    if top_down:
        return 0, FLOOR_OFFSET
    wall_y = room_h * WALL_STRIP_RATIO
    return wall_y, wall_y + FLOOR_OFFSET


def generate_single_room_layout(
    rng: Rng,
    room_width: float = DEFAULT_ROOM_WIDTH,
    room_height: float = DEFAULT_ROOM_HEIGHT,
    top_down: bool = False,
) -> RoomLayout:
    """Generate the primary single-room view.

    Args:
        rng: Random stream; the same stream always yields the same layout.
        room_width: Room width in logical pixels.
        room_height: Room height in logical pixels.
        top_down: Draw without a back wall strip.

    Returns:
        A RoomLayout with the full furniture catalog, 2-6 floor decor
        items, and character/companion positions on open floor.
    """
    return _build_layout(
        rng, SINGLE_ROOM_FURNITURE, room_width, room_height, top_down,
        profile=STANDALONE, with_characters=True,
    )


def generate_room_contents(
    rng: Rng,
    room_type: RoomType,
    room_width: float,
    room_height: float,
    top_down: bool = True,
) -> RoomLayout:
    """Generate the interior of one apartment room.

    Uses the archetype's furniture manifest; bedrooms also get the
    entry door, placed first. Character and companion are left at a
    placeholder spot (the apartment composer overrides them for the
    bedroom).
    """
    manifest = list(ROOM_TYPES[room_type].furniture)
    if room_type == RoomType.BEDROOM:
        manifest.insert(0, FurnitureName.DOOR)

    return _build_layout(
        rng, manifest, room_width, room_height, top_down,
        profile=SUB_ROOM, with_characters=False,
    )


def place_characters(
    rng: Rng,
    placed: list[Rect],
    room_w: float,
    room_h: float,
    floor_top: float,
) -> tuple[Position, Position]:
    """Character on open floor, companion beside it."""
    char_pos = find_open_floor(rng, placed, *CHARACTER_SIZE, room_w, room_h, floor_top)
    dog_pos = find_nearby(rng, placed, char_pos, *COMPANION_SIZE, room_w, room_h, floor_top)
    return char_pos, dog_pos


def _build_layout(
    rng: Rng,
    manifest: Sequence[FurnitureName],
    room_w: float,
    room_h: float,
    top_down: bool,
    profile: RoomProfile,
    with_characters: bool,
) -> RoomLayout:
    wall_y, floor_top = room_geometry(room_h, top_down)
    door_side: DoorSide = "left" if rng() < 0.5 else "right"

    placed: list[Rect] = []
    furniture = place_furniture_set(
        rng, manifest, placed, door_side, room_w, room_h, wall_y, floor_top, profile,
    )
    decor = generate_floor_decor(rng, placed, room_w, room_h, floor_top, profile)
    wall_decor = generate_wall_decor(rng, furniture, room_w, wall_y, profile)

    if with_characters:
        char_pos, dog_pos = place_characters(rng, placed, room_w, room_h, floor_top)
    else:
        char_pos = open_floor_fallback(room_w, room_h)
        dog_pos = nearby_fallback(char_pos)

    return RoomLayout(
        furniture=furniture,
        char_pos=char_pos,
        dog_pos=dog_pos,
        decor=decor,
        wall_decor=wall_decor,
        wall_y=wall_y,
        floor_top=floor_top,
        room_width=room_w,
        room_height=room_h,
        door_side=door_side,
    )
