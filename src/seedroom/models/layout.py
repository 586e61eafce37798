"""Generated layout models: single rooms and apartments.

A RoomLayout uses room-local coordinates (0,0 = top-left of the room).
An Apartment places rooms in a shared global coordinate space; each room's
``bounds`` is global while its ``layout`` stays room-local.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from seedroom.models.catalog import (
    FloorDecorType,
    FurnitureName,
    RoomType,
    WallDecorType,
)
from seedroom.models.geometry import Position, Rect

DoorSide = Literal["left", "right"]
ConnectionAxis = Literal["vertical", "horizontal"]


class FloorDecorItem(BaseModel):
    """Floor clutter: centre point, rotation (radians), and half-size."""

    type: FloorDecorType
    x: float
    y: float
    rot: float
    size: float = Field(gt=0, description="Half of the square footprint side")


class WallDecorItem(BaseModel):
    """Wall-mounted item; its box lies inside the wall strip."""

    type: WallDecorType
    x: float
    y: float
    w: float = Field(gt=0)
    h: float = Field(gt=0)
    rot: float

    def to_rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, w=self.w, h=self.h)


class RoomLayout(BaseModel):
    """Everything a renderer needs to draw one room."""

    furniture: dict[FurnitureName, Rect] = Field(
        default_factory=dict,
        description="Placed pieces; the key set depends on the room archetype",
    )
    char_pos: Position
    dog_pos: Position
    decor: list[FloorDecorItem] = Field(default_factory=list)
    wall_decor: list[WallDecorItem] = Field(default_factory=list)
    wall_y: float = Field(ge=0, description="Bottom of the wall strip; 0 in top-down mode")
    floor_top: float = Field(ge=0, description="Topmost y where floor furniture may start")
    room_width: float = Field(gt=0)
    room_height: float = Field(gt=0)
    door_side: DoorSide

    @property
    def top_down(self) -> bool:
        """True when the room has no wall strip."""
        return self.wall_y <= 0

    def placed_rects(self) -> list[Rect]:
        """Furniture rects in placement order."""
        return list(self.furniture.values())


class ApartmentRoom(BaseModel):
    """A room placed in the apartment's global coordinate space."""

    id: str
    type: RoomType
    bounds: Rect
    layout: RoomLayout


class RoomConnection(BaseModel):
    """A doorway carved into the wall shared by two rooms.

    ``position`` is the door slot in global coordinates. For a vertical
    wall the slot is thin in x and 20 units tall; for a horizontal wall
    it is 20 units wide and thin in y.
    """

    room_a: str
    room_b: str
    position: Rect
    axis: ConnectionAxis

    def other(self, room_id: str) -> str:
        """The room on the far side of this doorway from ``room_id``."""
        return self.room_b if room_id == self.room_a else self.room_a


class FloorPlan(BaseModel):
    """Overall bounding size of an apartment."""

    width: float
    height: float


class Apartment(BaseModel):
    """A set of rooms, the doorways between them, and the overall extent."""

    rooms: list[ApartmentRoom] = Field(default_factory=list)
    connections: list[RoomConnection] = Field(default_factory=list)
    floor_plan: FloorPlan

    def get_room(self, room_id: str) -> ApartmentRoom | None:
        """Find a room by id."""
        return next((r for r in self.rooms if r.id == room_id), None)

    def get_rooms_by_type(self, room_type: RoomType) -> list[ApartmentRoom]:
        """All rooms of an archetype."""
        return [r for r in self.rooms if r.type == room_type]

    @property
    def bedroom(self) -> ApartmentRoom | None:
        """The home view room (first bedroom)."""
        return next((r for r in self.rooms if r.type == RoomType.BEDROOM), None)
