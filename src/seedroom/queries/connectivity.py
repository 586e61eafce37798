"""Room adjacency graph for generated apartments.

Nodes are rooms, edges are the doorways carved between them. The
composer does not guarantee that every room is reachable from the
bedroom; these helpers make that visible.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from seedroom.models.layout import Apartment


@dataclass
class GraphNode:
    """A room in the adjacency graph."""

    room_id: str
    room_type: str
    area: float


@dataclass
class GraphEdge:
    """A doorway between two rooms."""

    from_room: str
    to_room: str
    axis: str
    door_width: float


@dataclass
class ApartmentGraph:
    """Undirected room graph of one apartment."""

    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[GraphEdge] = field(default_factory=list)

    def neighbors(self, room_id: str) -> list[tuple[str, GraphEdge]]:
        """All rooms sharing a doorway with ``room_id``."""
        result = []
        for edge in self.edges:
            if edge.from_room == room_id:
                result.append((edge.to_room, edge))
            elif edge.to_room == room_id:
                result.append((edge.from_room, edge))
        return result

    def reachable_from(self, start: str) -> set[str]:
        """Rooms reachable from ``start`` (BFS)."""
        if start not in self.nodes:
            return set()
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor, _ in self.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return visited

    def has_path(self, start: str, end: str) -> bool:
        """Check if a path exists between two rooms."""
        if start not in self.nodes or end not in self.nodes:
            return False
        return end in self.reachable_from(start)

    def is_connected(self) -> bool:
        """True if every room is reachable from every other."""
        if not self.nodes:
            return True
        first = next(iter(self.nodes))
        return len(self.reachable_from(first)) == len(self.nodes)

    def isolated_rooms(self, start: str) -> list[str]:
        """Rooms that cannot be reached from ``start``, in plan order."""
        reachable = self.reachable_from(start)
        return [room_id for room_id in self.nodes if room_id not in reachable]


def build_apartment_graph(apartment: Apartment) -> ApartmentGraph:
    """Build the adjacency graph of an apartment."""
    graph = ApartmentGraph()
    for room in apartment.rooms:
        graph.nodes[room.id] = GraphNode(
            room_id=room.id,
            room_type=room.type.value,
            area=room.bounds.area,
        )
    for conn in apartment.connections:
        slot = conn.position
        graph.edges.append(GraphEdge(
            from_room=conn.room_a,
            to_room=conn.room_b,
            axis=conn.axis,
            door_width=slot.h if conn.axis == "vertical" else slot.w,
        ))
    return graph
