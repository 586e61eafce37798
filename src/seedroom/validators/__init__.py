"""Layout validation.

- validate_room_layout: furniture margins, door pinning, padded overlap,
  decor placement, character/companion inside the room
- validate_apartment: room graph invariants plus every room layout
"""

from seedroom.validators.layout import (
    ValidationError,
    validate_apartment,
    validate_room_layout,
)

__all__ = [
    "ValidationError",
    "validate_apartment",
    "validate_room_layout",
]
