"""Layout validation.

Checks generated layouts against their geometric invariants and reports
every issue instead of raising. Issues a valid generation run can still
produce (furniture overlap from the placement fallback, rooms that cannot
be reached) are warnings; anything else is an error.
"""

from __future__ import annotations

from dataclasses import dataclass

from seedroom.generators.apartment import DOOR_WIDTH, WALL_GAP
from seedroom.generators.collision import (
    rect_in_bounds,
    rect_in_vertical_bounds,
    rects_overlap,
)
from seedroom.generators.furniture import door_x
from seedroom.models.catalog import FurnitureName, RoomType
from seedroom.models.geometry import Position
from seedroom.models.layout import Apartment, RoomLayout
from seedroom.queries.connectivity import build_apartment_graph


@dataclass
class ValidationError:
    """A single validation issue."""

    severity: str  # "error" | "warning"
    element_type: str
    element_id: str
    message: str


def validate_room_layout(layout: RoomLayout, room_id: str = "room") -> list[ValidationError]:
    """Validate one room layout (room-local coordinates)."""
    errors: list[ValidationError] = []
    errors.extend(_check_furniture(layout, room_id))
    errors.extend(_check_decor(layout, room_id))
    errors.extend(_check_positions(layout, room_id))
    return errors


def _check_furniture(layout: RoomLayout, room_id: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    rw, rh = layout.room_width, layout.room_height

    for name, rect in layout.furniture.items():
        element_id = f"{room_id}/{name.value}"
        if name == FurnitureName.DOOR:
            expected = door_x(layout.door_side, rw, rect.w)
            if not rect_in_vertical_bounds(rect, rh):
                errors.append(ValidationError(
                    severity="error",
                    element_type="Furniture",
                    element_id=element_id,
                    message=(
                        f"Door (y={rect.y:g}, h={rect.h:g}) leaves the top or "
                        f"bottom margin of a {rw:g}x{rh:g} room"
                    ),
                ))
            if rect.x != expected:
                errors.append(ValidationError(
                    severity="error",
                    element_type="Furniture",
                    element_id=element_id,
                    message=(
                        f"Door at x={rect.x:g} is not pinned to the "
                        f"{layout.door_side} wall (expected x={expected:g})"
                    ),
                ))
        elif not rect_in_bounds(rect, rw, rh):
            errors.append(ValidationError(
                severity="error",
                element_type="Furniture",
                element_id=element_id,
                message=(
                    f"{name.value} ({rect.x:g}, {rect.y:g}, {rect.w:g}x{rect.h:g}) "
                    f"leaves the wall margins of a {rw:g}x{rh:g} room"
                ),
            ))

    items = list(layout.furniture.items())
    for i, (name_a, a) in enumerate(items):
        for name_b, b in items[i + 1:]:
            if rects_overlap(a, b):
                errors.append(ValidationError(
                    severity="warning",
                    element_type="Furniture",
                    element_id=f"{room_id}/{name_a.value}",
                    message=f"{name_a.value} overlaps {name_b.value} (padded)",
                ))
    return errors


def _check_decor(layout: RoomLayout, room_id: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    rw, rh = layout.room_width, layout.room_height

    for i, item in enumerate(layout.decor):
        if not (0 <= item.x <= rw and layout.floor_top <= item.y <= rh):
            errors.append(ValidationError(
                severity="warning",
                element_type="FloorDecor",
                element_id=f"{room_id}/decor[{i}]",
                message=f"{item.type.value} at ({item.x:.1f}, {item.y:.1f}) is off the floor",
            ))

    if layout.top_down and layout.wall_decor:
        errors.append(ValidationError(
            severity="error",
            element_type="WallDecor",
            element_id=f"{room_id}/wall_decor",
            message="Top-down room has wall decor but no wall strip",
        ))
    for i, item in enumerate(layout.wall_decor):
        if item.y < 0 or item.y + item.h > layout.wall_y or item.x < 0 or item.x + item.w > rw:
            errors.append(ValidationError(
                severity="error",
                element_type="WallDecor",
                element_id=f"{room_id}/wall_decor[{i}]",
                message=(
                    f"{item.type.value} ({item.x:g}, {item.y:g}, {item.w:g}x{item.h:g}) "
                    f"is outside the wall strip [0, {layout.wall_y:.1f})"
                ),
            ))
    return errors


def _check_positions(layout: RoomLayout, room_id: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for label, pos in (("character", layout.char_pos), ("companion", layout.dog_pos)):
        if not _inside_room(pos, layout):
            errors.append(ValidationError(
                severity="error",
                element_type="Position",
                element_id=f"{room_id}/{label}",
                message=f"{label} at ({pos.x:.1f}, {pos.y:.1f}) is outside the room",
            ))
    return errors


def _inside_room(pos: Position, layout: RoomLayout) -> bool:
    return 0 < pos.x < layout.room_width and 0 < pos.y < layout.room_height


def validate_apartment(apartment: Apartment) -> list[ValidationError]:
    """Validate an apartment's room graph and every room layout."""
    errors: list[ValidationError] = []
    rooms = apartment.rooms

    if not rooms:
        return [ValidationError(
            severity="error",
            element_type="Apartment",
            element_id="apartment",
            message="Apartment has no rooms",
        )]

    if rooms[0].type != RoomType.BEDROOM:
        errors.append(ValidationError(
            severity="error",
            element_type="Room",
            element_id=rooms[0].id,
            message=f"First room is {rooms[0].type.value}, expected bedroom",
        ))

    ids = [r.id for r in rooms]
    for room_id in sorted({i for i in ids if ids.count(i) > 1}):
        errors.append(ValidationError(
            severity="error",
            element_type="Room",
            element_id=room_id,
            message=f"Duplicate room id '{room_id}'",
        ))

    min_x = min(r.bounds.x for r in rooms)
    min_y = min(r.bounds.y for r in rooms)
    if min_x != 0 or min_y != 0:
        errors.append(ValidationError(
            severity="error",
            element_type="Apartment",
            element_id="apartment",
            message=f"Plan origin is ({min_x:g}, {min_y:g}), expected (0, 0)",
        ))

    plan = apartment.floor_plan
    for room in rooms:
        b = room.bounds
        if b.right > plan.width or b.bottom > plan.height:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=f"Room extends past the {plan.width:g}x{plan.height:g} floor plan",
            ))
        if room.layout.room_width != b.w or room.layout.room_height != b.h:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message="Layout size does not match room bounds",
            ))
        errors.extend(validate_room_layout(room.layout, room.id))

    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            ax, ay, aw, ah = a.bounds.shrink(WALL_GAP)
            bx, by, bw, bh = b.bounds.shrink(WALL_GAP)
            if ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by:
                errors.append(ValidationError(
                    severity="warning",
                    element_type="Room",
                    element_id=a.id,
                    message=f"Room {a.id} overlaps {b.id} beyond the shared wall",
                ))

    errors.extend(_check_connections(apartment, set(ids)))
    return errors


def _check_connections(apartment: Apartment, room_ids: set[str]) -> list[ValidationError]:
    errors: list[ValidationError] = []

    for conn in apartment.connections:
        element_id = f"{conn.room_a}<->{conn.room_b}"
        if conn.room_a == conn.room_b:
            errors.append(ValidationError(
                severity="error",
                element_type="Connection",
                element_id=element_id,
                message="Doorway connects a room to itself",
            ))
        missing = [r for r in (conn.room_a, conn.room_b) if r not in room_ids]
        if missing:
            errors.append(ValidationError(
                severity="error",
                element_type="Connection",
                element_id=element_id,
                message=f"Doorway references unknown room(s): {', '.join(missing)}",
            ))
        length = conn.position.h if conn.axis == "vertical" else conn.position.w
        if length != DOOR_WIDTH:
            errors.append(ValidationError(
                severity="error",
                element_type="Connection",
                element_id=element_id,
                message=f"Doorway is {length:g} long, expected {DOOR_WIDTH}",
            ))

    if len(apartment.rooms) > 1:
        graph = build_apartment_graph(apartment)
        for room_id in graph.isolated_rooms(apartment.rooms[0].id):
            errors.append(ValidationError(
                severity="warning",
                element_type="Room",
                element_id=room_id,
                message=f"Room {room_id} cannot be reached from {apartment.rooms[0].id}",
            ))
    return errors
