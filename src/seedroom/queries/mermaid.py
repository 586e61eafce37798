"""Mermaid diagram export for apartment room graphs.

Handy for eyeballing a seed's room graph without a renderer; any
Mermaid-compatible tool turns the output into SVG/PNG.
"""

from __future__ import annotations

from seedroom.models.catalog import ROOM_TYPES, RoomType
from seedroom.models.layout import Apartment
from seedroom.queries.connectivity import ApartmentGraph, build_apartment_graph

# Node shape by room type
_NODE_SHAPES = {
    "bedroom": ("([", "])"),     # stadium: the home room
    "hallway": ("[[", "]]"),     # subroutine
    "bathroom": ("(", ")"),      # rounded
    "kitchen": ("{", "}"),       # rhombus
}
_DEFAULT_SHAPE = ("[", "]")


def apartment_to_mermaid(
    source: Apartment | ApartmentGraph,
    direction: str = "LR",
    show_area: bool = False,
) -> str:
    """Convert an apartment (or its graph) to Mermaid flowchart syntax.

    Args:
        source: Apartment or a graph built from one.
        direction: Flowchart direction (LR, TB, RL, BT).
        show_area: Include room area in node labels.

    Returns:
        Mermaid flowchart string.
    """
    graph = source if isinstance(source, ApartmentGraph) else build_apartment_graph(source)
    lines = [f"flowchart {direction}"]

    for room_id, node in graph.nodes.items():
        label = ROOM_TYPES[RoomType(node.room_type)].label
        if show_area:
            label += f"\\n{node.area:.0f}"
        left, right = _NODE_SHAPES.get(node.room_type, _DEFAULT_SHAPE)
        lines.append(f"    {room_id}{left}\"{label}\"{right}")

    if graph.edges:
        lines.append("")
    for edge in graph.edges:
        lines.append(f"    {edge.from_room} ---|{edge.axis}| {edge.to_room}")

    return "\n".join(lines)
