"""Placement profiles.

A standalone room is the primary, fully furnished view. Apartment
sub-rooms are smaller, drawn top-down, and may be sparser. Everything
that differs between the two lives here so the placement routines stay
shared.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomProfile:
    """Sampling and decor policy for one kind of room.

    Attributes:
        name: Profile identifier (for logs).
        sub_room: Use the apartment sub-room furniture distribution.
        floor_decor_min: Fewest floor decor items requested.
        floor_decor_spread: Number of possible counts above the minimum.
        force_floor_decor: Place a floor decor item at its last sample when
            every sample collides, instead of dropping it.
        wall_decor_min: Fewest wall decor items requested.
        wall_decor_spread: Number of possible counts above the minimum.
    """

    name: str
    sub_room: bool
    floor_decor_min: int
    floor_decor_spread: int
    force_floor_decor: bool
    wall_decor_min: int
    wall_decor_spread: int


STANDALONE = RoomProfile(
    name="standalone",
    sub_room=False,
    floor_decor_min=2,
    floor_decor_spread=5,
    force_floor_decor=True,
    wall_decor_min=2,
    wall_decor_spread=4,
)

SUB_ROOM = RoomProfile(
    name="sub_room",
    sub_room=True,
    floor_decor_min=1,
    floor_decor_spread=4,
    force_floor_decor=False,
    wall_decor_min=1,
    wall_decor_spread=3,
)
