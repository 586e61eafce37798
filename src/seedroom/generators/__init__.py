"""Layout generation.

Pure functions driven by an injected random stream:
- Collision primitives: padded AABB overlap, in-bounds test
- Furniture placement: rule-driven rejection sampling with fallback
- Decor: floor clutter and wall-mounted items
- Positions: character on open floor, companion nearby
- Room pipeline: standalone rooms and apartment sub-rooms
- Apartment composer: room graph, shared walls, doorways
"""

from seedroom.generators.rng import Mulberry32, Rng, seeded_rng
from seedroom.generators.collision import PAD, collides, rect_in_bounds, rects_overlap
from seedroom.generators.profiles import STANDALONE, SUB_ROOM, RoomProfile
from seedroom.generators.furniture import place_furniture, place_furniture_set
from seedroom.generators.decor import generate_floor_decor, generate_wall_decor
from seedroom.generators.positions import find_nearby, find_open_floor
from seedroom.generators.room import (
    DEFAULT_ROOM_HEIGHT,
    DEFAULT_ROOM_WIDTH,
    generate_room_contents,
    generate_single_room_layout,
)
from seedroom.generators.apartment import (
    WALL_GAP,
    find_shared_wall,
    generate_apartment,
    pick_room_types,
)

__all__ = [
    "Mulberry32",
    "Rng",
    "seeded_rng",
    "PAD",
    "collides",
    "rect_in_bounds",
    "rects_overlap",
    "STANDALONE",
    "SUB_ROOM",
    "RoomProfile",
    "place_furniture",
    "place_furniture_set",
    "generate_floor_decor",
    "generate_wall_decor",
    "find_nearby",
    "find_open_floor",
    "DEFAULT_ROOM_HEIGHT",
    "DEFAULT_ROOM_WIDTH",
    "generate_room_contents",
    "generate_single_room_layout",
    "WALL_GAP",
    "find_shared_wall",
    "generate_apartment",
    "pick_room_types",
]
