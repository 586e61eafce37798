"""Layout data models."""

from seedroom.models.geometry import Position, Rect
from seedroom.models.catalog import (
    FLOOR_DECOR_TYPES,
    FURNITURE_DEFS,
    ROOM_TYPES,
    SINGLE_ROOM_FURNITURE,
    WALL_DECOR_SIZES,
    WALL_DECOR_TYPES,
    FloorDecorType,
    FurnitureDef,
    FurnitureName,
    FurniturePlacement,
    RoomType,
    RoomTypeDef,
    WallDecorType,
)
from seedroom.models.layout import (
    Apartment,
    ApartmentRoom,
    FloorDecorItem,
    FloorPlan,
    RoomConnection,
    RoomLayout,
    WallDecorItem,
)

__all__ = [
    "Position",
    "Rect",
    "FLOOR_DECOR_TYPES",
    "FURNITURE_DEFS",
    "ROOM_TYPES",
    "SINGLE_ROOM_FURNITURE",
    "WALL_DECOR_SIZES",
    "WALL_DECOR_TYPES",
    "FloorDecorType",
    "FurnitureDef",
    "FurnitureName",
    "FurniturePlacement",
    "RoomType",
    "RoomTypeDef",
    "WallDecorType",
    "Apartment",
    "ApartmentRoom",
    "FloorDecorItem",
    "FloorPlan",
    "RoomConnection",
    "RoomLayout",
    "WallDecorItem",
]
