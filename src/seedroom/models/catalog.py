"""Static catalogs: furniture, room archetypes, and decor types.

These tables are read-only and shared by every generation run.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class FurnitureName(str, Enum):
    """Furniture pieces known to the layout generator."""

    DOOR = "door"
    BED = "bed"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    DESK = "desk"
    COUCH = "couch"


class FurniturePlacement(str, Enum):
    """Sampling policy for a furniture piece.

    BACK_WALL: hugs the wall/floor boundary, sometimes snaps to a side wall
    SIDE_WALL: left or right wall, anywhere along the floor
    FLOOR: freestanding, inset from the walls
    RIGHT_WALL: door only; actual side comes from the room's door side
    """

    BACK_WALL = "backWall"
    SIDE_WALL = "sideWall"
    FLOOR = "floor"
    RIGHT_WALL = "rightWall"


class FurnitureDef(BaseModel):
    """Furniture footprint and placement rule."""

    model_config = ConfigDict(frozen=True)

    w: float = Field(gt=0)
    h: float = Field(gt=0)
    placement: FurniturePlacement


FURNITURE_DEFS: Mapping[FurnitureName, FurnitureDef] = MappingProxyType({
    FurnitureName.DOOR: FurnitureDef(w=20, h=44, placement=FurniturePlacement.RIGHT_WALL),
    FurnitureName.BED: FurnitureDef(w=50, h=26, placement=FurniturePlacement.BACK_WALL),
    FurnitureName.KITCHEN: FurnitureDef(w=46, h=22, placement=FurniturePlacement.BACK_WALL),
    FurnitureName.BATHROOM: FurnitureDef(w=44, h=22, placement=FurniturePlacement.BACK_WALL),
    FurnitureName.DESK: FurnitureDef(w=36, h=22, placement=FurniturePlacement.BACK_WALL),
    FurnitureName.COUCH: FurnitureDef(w=52, h=20, placement=FurniturePlacement.FLOOR),
})

# Placement order for a standalone room; earlier pieces claim space first.
SINGLE_ROOM_FURNITURE: tuple[FurnitureName, ...] = (
    FurnitureName.DOOR,
    FurnitureName.BED,
    FurnitureName.KITCHEN,
    FurnitureName.BATHROOM,
    FurnitureName.DESK,
    FurnitureName.COUCH,
)


class RoomType(str, Enum):
    """Room archetypes used in multi-room apartments."""

    BEDROOM = "bedroom"
    LIVING = "living"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    HALLWAY = "hallway"
    STUDY = "study"


class RoomTypeDef(BaseModel):
    """Size template and furniture manifest for a room archetype."""

    model_config = ConfigDict(frozen=True)

    min_w: int
    max_w: int
    min_h: int
    max_h: int
    furniture: tuple[FurnitureName, ...] = ()
    label: str = ""


ROOM_TYPES: Mapping[RoomType, RoomTypeDef] = MappingProxyType({
    RoomType.BEDROOM: RoomTypeDef(
        min_w=200, max_w=260, min_h=140, max_h=180,
        furniture=(FurnitureName.BED, FurnitureName.DESK),
        label="Bedroom",
    ),
    RoomType.LIVING: RoomTypeDef(
        min_w=200, max_w=280, min_h=140, max_h=180,
        furniture=(FurnitureName.COUCH, FurnitureName.DESK),
        label="Living Room",
    ),
    RoomType.KITCHEN: RoomTypeDef(
        min_w=160, max_w=220, min_h=120, max_h=160,
        furniture=(FurnitureName.KITCHEN,),
        label="Kitchen",
    ),
    RoomType.BATHROOM: RoomTypeDef(
        min_w=120, max_w=180, min_h=100, max_h=140,
        furniture=(FurnitureName.BATHROOM,),
        label="Bathroom",
    ),
    RoomType.HALLWAY: RoomTypeDef(
        min_w=80, max_w=120, min_h=140, max_h=200,
        furniture=(),
        label="Hallway",
    ),
    RoomType.STUDY: RoomTypeDef(
        min_w=140, max_w=200, min_h=120, max_h=160,
        furniture=(FurnitureName.DESK,),
        label="Study",
    ),
})


class FloorDecorType(str, Enum):
    """Small clutter scattered on the floor."""

    BOOK = "book"
    MUG = "mug"
    PLANT = "plant"
    LAUNDRY = "laundry"
    SHOE = "shoe"
    PAPER = "paper"
    BOWL = "bowl"
    CUSHION = "cushion"
    BOTTLE = "bottle"


class WallDecorType(str, Enum):
    """Items hung on the back wall."""

    POSTER = "poster"
    SHELF = "shelf"
    CLOCK = "clock"
    MIRROR = "mirror"
    PHOTO = "photo"
    COATHOOK = "coathook"
    CALENDAR = "calendar"
    PLANT_HANGING = "plant_hanging"


# Indexed by rng draws, so order matters.
FLOOR_DECOR_TYPES: tuple[FloorDecorType, ...] = tuple(FloorDecorType)
WALL_DECOR_TYPES: tuple[WallDecorType, ...] = tuple(WallDecorType)

# (base, spread) for width and height: size = base + rng() * spread.
# A height of None means square (h = w).
WALL_DECOR_SIZES: Mapping[
    WallDecorType, tuple[tuple[float, float], tuple[float, float] | None]
] = MappingProxyType({
    WallDecorType.POSTER: ((14, 10), (16, 12)),
    WallDecorType.SHELF: ((20, 16), (5, 3)),
    WallDecorType.CLOCK: ((8, 4), None),
    WallDecorType.MIRROR: ((10, 8), (14, 8)),
    WallDecorType.PHOTO: ((8, 6), (6, 5)),
    WallDecorType.COATHOOK: ((12, 6), (6, 4)),
    WallDecorType.CALENDAR: ((10, 4), (12, 4)),
    WallDecorType.PLANT_HANGING: ((10, 6), (12, 8)),
})
