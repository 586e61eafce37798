"""Queries over generated apartments.

- connectivity: room adjacency graph, reachability
- coordinates: room-local / global conversion, global furniture boxes
- mermaid: Mermaid diagram export
"""

from seedroom.queries.connectivity import (
    ApartmentGraph,
    GraphEdge,
    GraphNode,
    build_apartment_graph,
)
from seedroom.queries.coordinates import (
    global_furniture,
    room_at,
    to_global,
    to_local,
)
from seedroom.queries.mermaid import apartment_to_mermaid

__all__ = [
    "ApartmentGraph",
    "GraphEdge",
    "GraphNode",
    "build_apartment_graph",
    "global_furniture",
    "room_at",
    "to_global",
    "to_local",
    "apartment_to_mermaid",
]
