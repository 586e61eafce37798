"""Room-local / global coordinate helpers.

Room layouts are room-local; apartment room bounds are global. UI code
that highlights furniture across the whole plan needs global boxes.
"""

from __future__ import annotations

from seedroom.models.catalog import FurnitureName
from seedroom.models.geometry import Position, Rect
from seedroom.models.layout import Apartment, ApartmentRoom


def to_global(room: ApartmentRoom, point: Position) -> Position:
    """Convert a room-local point to apartment coordinates."""
    return point.offset(room.bounds.x, room.bounds.y)


def to_local(room: ApartmentRoom, point: Position) -> Position:
    """Convert an apartment point to ``room``'s local coordinates."""
    return point.offset(-room.bounds.x, -room.bounds.y)


def global_furniture(apartment: Apartment) -> list[tuple[str, FurnitureName, Rect]]:
    """Every furniture box in apartment coordinates.

    Returns:
        ``(room_id, furniture_name, rect)`` triples in room order.
    """
    result = []
    for room in apartment.rooms:
        for name, rect in room.layout.furniture.items():
            result.append((room.id, name, rect.translate(room.bounds.x, room.bounds.y)))
    return result


def room_at(apartment: Apartment, x: float, y: float) -> ApartmentRoom | None:
    """Room containing the global point (x, y).

    Rooms overlap by their shared wall; the first room in plan order wins.
    """
    return next((r for r in apartment.rooms if r.bounds.contains(x, y)), None)
