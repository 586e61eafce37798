"""Multi-room apartment composer.

Strategy:
1. Pick room archetypes (bedroom first, always a bathroom)
2. Size each room within its archetype template
3. Attach rooms one by one to a random side of an already placed room
4. Normalize coordinates so the plan starts at (0, 0)
5. Carve a doorway wherever two rooms share enough wall
6. Furnish every room in top-down mode
7. Place the character and companion in the bedroom

Rooms are attached overlapping by WALL_GAP, so neighbours share a wall
of that thickness. Overlap tests shrink both rooms by WALL_GAP first, so
a shared wall never counts as a collision.

Layout (three rooms):
```
+----------+------+
|          | bath |
| bedroom  |      |
|          +------+---+
|          | kitchen  |
+----------+----------+
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seedroom.generators.rng import Rng, rand_int
from seedroom.generators.room import (
    generate_room_contents,
    generate_single_room_layout,
    place_characters,
)
from seedroom.models.catalog import ROOM_TYPES, RoomType
from seedroom.models.geometry import Rect
from seedroom.models.layout import (
    Apartment,
    ApartmentRoom,
    ConnectionAxis,
    FloorPlan,
    RoomConnection,
)

logger = logging.getLogger(__name__)

WALL_GAP = 4
ATTACH_ATTEMPTS = 60

# Doorway slot length along the shared wall.
DOOR_WIDTH = 20
# Keep doorways this far from the ends of a shared wall.
DOOR_CORNER_INSET = 10
# Shared walls must overlap by more than this to count.
MIN_SHARED_WALL = 20

# Archetypes that may fill the remaining slots.
OPTIONAL_ROOMS: tuple[RoomType, ...] = (
    RoomType.LIVING,
    RoomType.HALLWAY,
    RoomType.STUDY,
    RoomType.KITCHEN,
)

MAX_ROOMS = len(ROOM_TYPES)


@dataclass
class _PlacedRoom:
    """Working record for a room while the plan is being composed."""

    id: str
    type: RoomType
    w: int
    h: int
    x: int = 0
    y: int = 0

    @property
    def rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, w=self.w, h=self.h)


@dataclass
class SharedWall:
    """A wall two rooms have in common.

    ``coord`` is the x of a vertical wall or the y of a horizontal one.
    """

    axis: ConnectionAxis
    coord: float


def generate_apartment(rng: Rng, room_count: int) -> Apartment:
    """Generate an apartment with ``room_count`` rooms.

    A count of 1 or less yields the standalone single-room view wrapped
    as a one-room apartment. Counts above the number of archetypes are
    clamped. Never raises; every bounded step has a fallback.

    Args:
        rng: Random stream.
        room_count: Requested number of rooms.

    Returns:
        Apartment with global room bounds, doorways, and the plan extent.
    """
    if room_count <= 1:
        return _single_room_apartment(rng)

    if room_count > MAX_ROOMS:
        logger.warning(
            "Requested %d rooms but only %d archetypes exist, clamping",
            room_count, MAX_ROOMS,
        )
        room_count = MAX_ROOMS

    types = pick_room_types(rng, room_count)
    rooms = [_size_room(rng, room_type) for room_type in types]

    _attach_rooms(rng, rooms)
    floor_plan = _normalize(rooms)
    connections = find_connections(rng, rooms)

    layouts = {
        room.id: generate_room_contents(rng, room.type, room.w, room.h, top_down=True)
        for room in rooms
    }

    # Only the bedroom is shown as home; give it real character positions
    home = rooms[0]
    home_layout = layouts[home.id]
    char_pos, dog_pos = place_characters(
        rng, home_layout.placed_rects(), home.w, home.h, home_layout.floor_top,
    )
    layouts[home.id] = home_layout.model_copy(update={"char_pos": char_pos, "dog_pos": dog_pos})

    return Apartment(
        rooms=[
            ApartmentRoom(id=r.id, type=r.type, bounds=r.rect, layout=layouts[r.id])
            for r in rooms
        ],
        connections=connections,
        floor_plan=floor_plan,
    )


def pick_room_types(rng: Rng, count: int) -> list[RoomType]:
    """Choose ``count`` distinct archetypes, bedroom first.

    Bedroom and bathroom are always present, kitchen from three rooms up.
    The rest are drawn without replacement from OPTIONAL_ROOMS, then all
    but the bedroom are shuffled.
    """
    types = [RoomType.BEDROOM, RoomType.BATHROOM]
    if count >= 3:
        types.append(RoomType.KITCHEN)

    while len(types) < count:
        available = [t for t in OPTIONAL_ROOMS if t not in types]
        if not available:
            break
        types.append(available[rand_int(rng, len(available))])

    for i in range(len(types) - 1, 1, -1):
        j = 1 + rand_int(rng, i)
        types[i], types[j] = types[j], types[i]

    return types[:count]


def _size_room(rng: Rng, room_type: RoomType) -> _PlacedRoom:
    tdef = ROOM_TYPES[room_type]
    w = tdef.min_w + rand_int(rng, tdef.max_w - tdef.min_w)
    h = tdef.min_h + rand_int(rng, tdef.max_h - tdef.min_h)
    return _PlacedRoom(id=room_type.value, type=room_type, w=w, h=h)


def _attach_rooms(rng: Rng, rooms: list[_PlacedRoom]) -> None:
    """Position every room after the first next to an earlier one.

    The first room stays at the origin. Mutates ``rooms`` in place.
    """
    placed = rooms[:1]

    for room in rooms[1:]:
        spot = _sample_attachment(rng, room, placed)
        if spot is None:
            last = placed[-1]
            spot = (last.x + last.w - WALL_GAP, last.y)
            room.x, room.y = spot
            logger.debug(
                "No free side for %s after %d attempts, appended right of %s",
                room.id, ATTACH_ATTEMPTS, last.id,
            )
            clashes = [p.id for p in placed if _rooms_overlap(room, p)]
            if clashes:
                logger.warning("Fallback room %s overlaps %s", room.id, ", ".join(clashes))
        else:
            room.x, room.y = spot
        placed.append(room)


def _sample_attachment(
    rng: Rng,
    room: _PlacedRoom,
    placed: list[_PlacedRoom],
) -> tuple[int, int] | None:
    """Try random (target, side) pairs; None when every attempt collides."""
    for _ in range(ATTACH_ATTEMPTS):
        target = placed[rand_int(rng, len(placed))]
        side = rand_int(rng, 4)

        if side == 0:  # right
            nx = target.x + target.w - WALL_GAP
            ny = target.y + rand_int(rng, max(0, target.h - room.h) + 1)
        elif side == 1:  # below
            nx = target.x + rand_int(rng, max(0, target.w - room.w) + 1)
            ny = target.y + target.h - WALL_GAP
        elif side == 2:  # left
            nx = target.x - room.w + WALL_GAP
            ny = target.y + rand_int(rng, max(0, target.h - room.h) + 1)
        else:  # above
            nx = target.x + rand_int(rng, max(0, target.w - room.w) + 1)
            ny = target.y - room.h + WALL_GAP

        candidate = _PlacedRoom(id=room.id, type=room.type, w=room.w, h=room.h, x=nx, y=ny)
        if not any(_rooms_overlap(candidate, p) for p in placed):
            return nx, ny
    return None


def _rooms_overlap(a: _PlacedRoom, b: _PlacedRoom) -> bool:
    """Overlap test on both rooms shrunk by WALL_GAP."""
    ax, ay, aw, ah = a.rect.shrink(WALL_GAP)
    bx, by, bw, bh = b.rect.shrink(WALL_GAP)
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def _normalize(rooms: list[_PlacedRoom]) -> FloorPlan:
    """Shift rooms so the plan starts at (0, 0); return its extent."""
    min_x = min(r.x for r in rooms)
    min_y = min(r.y for r in rooms)
    for r in rooms:
        r.x -= min_x
        r.y -= min_y
    return FloorPlan(
        width=max(r.x + r.w for r in rooms),
        height=max(r.y + r.h for r in rooms),
    )


def find_shared_wall(a: Rect, b: Rect, gap: float = WALL_GAP) -> SharedWall | None:
    """Detect a wall shared by two rooms attached with overlap ``gap``.

    Returns None unless one room's edge meets the other's opposite edge
    (within ``gap + 2``) with more than MIN_SHARED_WALL units of overlap
    along the wall.
    """
    overlap_y = min(a.bottom, b.bottom) - max(a.y, b.y)
    overlap_x = min(a.right, b.right) - max(a.x, b.x)
    tolerance = gap + 2

    if abs(a.right - (b.x + gap)) < tolerance and overlap_y > MIN_SHARED_WALL:
        return SharedWall(axis="vertical", coord=a.right)
    if abs(b.right - (a.x + gap)) < tolerance and overlap_y > MIN_SHARED_WALL:
        return SharedWall(axis="vertical", coord=b.right)
    if abs(a.bottom - (b.y + gap)) < tolerance and overlap_x > MIN_SHARED_WALL:
        return SharedWall(axis="horizontal", coord=a.bottom)
    if abs(b.bottom - (a.y + gap)) < tolerance and overlap_x > MIN_SHARED_WALL:
        return SharedWall(axis="horizontal", coord=b.bottom)
    return None


def find_connections(rng: Rng, rooms: list[_PlacedRoom]) -> list[RoomConnection]:
    """Carve a doorway into every sufficiently long shared wall."""
    connections: list[RoomConnection] = []

    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            ra, rb = a.rect, b.rect
            wall = find_shared_wall(ra, rb)
            if wall is None:
                continue

            if wall.axis == "vertical":
                lo = max(ra.y, rb.y) + DOOR_CORNER_INSET
                hi = min(ra.bottom, rb.bottom) - DOOR_CORNER_INSET
            else:
                lo = max(ra.x, rb.x) + DOOR_CORNER_INSET
                hi = min(ra.right, rb.right) - DOOR_CORNER_INSET
            if hi - lo < DOOR_WIDTH:
                continue

            offset = lo + rand_int(rng, hi - lo - DOOR_WIDTH)
            if wall.axis == "vertical":
                slot = Rect(x=wall.coord - WALL_GAP / 2, y=offset, w=WALL_GAP, h=DOOR_WIDTH)
            else:
                slot = Rect(x=offset, y=wall.coord - WALL_GAP / 2, w=DOOR_WIDTH, h=WALL_GAP)

            connections.append(RoomConnection(room_a=a.id, room_b=b.id, position=slot, axis=wall.axis))

    return connections


def _single_room_apartment(rng: Rng) -> Apartment:
    layout = generate_single_room_layout(rng)
    return Apartment(
        rooms=[
            ApartmentRoom(
                id=RoomType.BEDROOM.value,
                type=RoomType.BEDROOM,
                bounds=Rect(x=0, y=0, w=layout.room_width, h=layout.room_height),
                layout=layout,
            )
        ],
        connections=[],
        floor_plan=FloorPlan(width=layout.room_width, height=layout.room_height),
    )
