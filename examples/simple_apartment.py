"""Four-room apartment from a fixed seed.

Generates the apartment, validates it, prints the room graph as Mermaid,
and writes the full model as JSON.

   +-----------+------+
   |  bedroom  | bath |
   |    (home) +------+
   +-----+-----+
         | kitchen ...
"""

from pathlib import Path

from seedroom.generators import generate_apartment, seeded_rng
from seedroom.queries import apartment_to_mermaid, build_apartment_graph
from seedroom.validators import validate_apartment

SEED = 7
ROOMS = 4

apartment = generate_apartment(seeded_rng(SEED), ROOMS)

# --- Validate ---
issues = validate_apartment(apartment)
errors = [e for e in issues if e.severity == "error"]
if errors:
    print("⚠️  Validation errors:")
    for e in errors:
        print(f"  [{e.severity}] {e.element_type}: {e.message}")
else:
    print(f"✅ Validation passed ({len(issues)} warnings)")

# --- Room graph ---
graph = build_apartment_graph(apartment)
print(apartment_to_mermaid(graph, show_area=True))
home = apartment.rooms[0].id
unreachable = graph.isolated_rooms(home)
if unreachable:
    print(f"   Unreachable from {home}: {', '.join(unreachable)}")

# --- Export ---
output = Path(__file__).parent / "output"
output.mkdir(exist_ok=True)
output_file = output / f"apartment_{SEED}.json"
output_file.write_text(apartment.model_dump_json(indent=2))

print(f"📁 Exported to: {output_file}")
print(f"   Rooms: {len(apartment.rooms)}")
print(f"   Doorways: {len(apartment.connections)}")
print(f"   Floor plan: {apartment.floor_plan.width:g} x {apartment.floor_plan.height:g}")
for room in apartment.rooms:
    pieces = ", ".join(name.value for name in room.layout.furniture) or "empty"
    print(f"   {room.id:<9} {room.bounds.w:g}x{room.bounds.h:g}  {pieces}")
