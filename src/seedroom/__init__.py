"""Seed-based room layout generation.

Derives furniture, decor, and character positions for a single room or a
multi-room apartment from a deterministic PRNG stream.
"""

from seedroom.generators import (
    generate_apartment,
    generate_single_room_layout,
    seeded_rng,
)
from seedroom.models import Apartment, Rect, RoomLayout

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "generate_apartment",
    "generate_single_room_layout",
    "seeded_rng",
    "Apartment",
    "Rect",
    "RoomLayout",
]
