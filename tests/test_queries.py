"""Tests for apartment queries: room graph, coordinates, Mermaid export."""

import pytest

from seedroom.generators import generate_apartment, seeded_rng
from seedroom.models.catalog import FurnitureName, RoomType
from seedroom.models.geometry import Position, Rect
from seedroom.models.layout import (
    Apartment,
    ApartmentRoom,
    FloorPlan,
    RoomConnection,
    RoomLayout,
)
from seedroom.queries import (
    apartment_to_mermaid,
    build_apartment_graph,
    global_furniture,
    room_at,
    to_global,
    to_local,
)


def _layout(w: float, h: float, furniture: dict | None = None) -> RoomLayout:
    return RoomLayout(
        furniture=furniture or {},
        char_pos=Position(x=w / 2, y=h * 0.75),
        dog_pos=Position(x=w / 2 + 20, y=h * 0.75 + 4),
        wall_y=0,
        floor_top=4,
        room_width=w,
        room_height=h,
        door_side="left",
    )


def _room(room_type: RoomType, x: float, y: float, w: float, h: float, **kw) -> ApartmentRoom:
    return ApartmentRoom(
        id=room_type.value,
        type=room_type,
        bounds=Rect(x=x, y=y, w=w, h=h),
        layout=_layout(w, h, **kw),
    )


@pytest.fixture
def three_rooms() -> Apartment:
    """Bedroom and bathroom joined by a doorway; a kitchen with no door."""
    bed = _room(
        RoomType.BEDROOM, 0, 0, 200, 150,
        furniture={FurnitureName.BED: Rect(x=20, y=40, w=50, h=26)},
    )
    bath = _room(RoomType.BATHROOM, 196, 0, 120, 100)
    kitchen = _room(RoomType.KITCHEN, 0, 146, 160, 120)
    door = RoomConnection(
        room_a="bedroom",
        room_b="bathroom",
        position=Rect(x=198, y=30, w=4, h=20),
        axis="vertical",
    )
    return Apartment(
        rooms=[bed, bath, kitchen],
        connections=[door],
        floor_plan=FloorPlan(width=316, height=266),
    )


# ── Connectivity ──────────────────────────────────────────────────


class TestApartmentGraph:
    def test_nodes_and_edges(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert list(g.nodes) == ["bedroom", "bathroom", "kitchen"]
        assert len(g.edges) == 1
        edge = g.edges[0]
        assert edge.axis == "vertical"
        assert edge.door_width == 20

    def test_node_area(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert g.nodes["bedroom"].area == 200 * 150
        assert g.nodes["bathroom"].room_type == "bathroom"

    def test_neighbors_undirected(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert [n for n, _ in g.neighbors("bedroom")] == ["bathroom"]
        assert [n for n, _ in g.neighbors("bathroom")] == ["bedroom"]
        assert g.neighbors("kitchen") == []

    def test_reachability(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert g.reachable_from("bedroom") == {"bedroom", "bathroom"}
        assert g.has_path("bathroom", "bedroom")
        assert not g.has_path("bedroom", "kitchen")
        assert not g.has_path("bedroom", "attic")
        assert g.reachable_from("attic") == set()

    def test_isolated_rooms(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert not g.is_connected()
        assert g.isolated_rooms("bedroom") == ["kitchen"]

    def test_connected_after_adding_door(self, three_rooms):
        three_rooms.connections.append(RoomConnection(
            room_a="bedroom",
            room_b="kitchen",
            position=Rect(x=40, y=148, w=20, h=4),
            axis="horizontal",
        ))
        g = build_apartment_graph(three_rooms)
        assert g.is_connected()
        assert g.isolated_rooms("bedroom") == []

    def test_empty_graph_is_connected(self):
        g = build_apartment_graph(Apartment(floor_plan=FloorPlan(width=0, height=0)))
        assert g.is_connected()

    def test_generated_graph_matches_connections(self):
        apt = generate_apartment(seeded_rng(21), 5)
        g = build_apartment_graph(apt)
        assert len(g.nodes) == 5
        assert len(g.edges) == len(apt.connections)
        for edge in g.edges:
            assert edge.door_width == 20

    def test_connection_other(self, three_rooms):
        conn = three_rooms.connections[0]
        assert conn.other("bedroom") == "bathroom"
        assert conn.other("bathroom") == "bedroom"


# ── Coordinates ───────────────────────────────────────────────────


class TestCoordinates:
    def test_to_global_and_back(self, three_rooms):
        bath = three_rooms.get_room("bathroom")
        local = Position(x=10, y=20)
        world = to_global(bath, local)
        assert (world.x, world.y) == (206, 20)
        assert to_local(bath, world) == local

    def test_global_furniture(self, three_rooms):
        items = global_furniture(three_rooms)
        assert items == [("bedroom", FurnitureName.BED, Rect(x=20, y=40, w=50, h=26))]

    def test_global_furniture_offsets_rooms(self):
        apt = generate_apartment(seeded_rng(5), 4)
        for room_id, name, rect in global_furniture(apt):
            room = apt.get_room(room_id)
            local = room.layout.furniture[name]
            assert rect.x == local.x + room.bounds.x
            assert rect.y == local.y + room.bounds.y

    def test_room_at(self, three_rooms):
        assert room_at(three_rooms, 50, 50).id == "bedroom"
        assert room_at(three_rooms, 250, 50).id == "bathroom"
        assert room_at(three_rooms, 50, 200).id == "kitchen"
        assert room_at(three_rooms, 300, 250) is None

    def test_room_at_shared_wall_prefers_first(self, three_rooms):
        # x=198 is inside both the bedroom and the bathroom
        assert room_at(three_rooms, 198, 50).id == "bedroom"

    def test_apartment_lookups(self, three_rooms):
        assert three_rooms.bedroom.id == "bedroom"
        assert three_rooms.get_room("attic") is None
        assert [r.id for r in three_rooms.get_rooms_by_type(RoomType.KITCHEN)] == ["kitchen"]


# ── Mermaid ───────────────────────────────────────────────────────


class TestMermaid:
    def test_header(self, three_rooms):
        text = apartment_to_mermaid(three_rooms)
        assert text.splitlines()[0] == "flowchart LR"

    def test_direction(self, three_rooms):
        assert apartment_to_mermaid(three_rooms, direction="TB").startswith("flowchart TB")

    def test_nodes_use_labels(self, three_rooms):
        text = apartment_to_mermaid(three_rooms)
        assert 'bedroom(["Bedroom"])' in text
        assert 'bathroom("Bathroom")' in text
        assert 'kitchen{"Kitchen"}' in text

    def test_edges(self, three_rooms):
        text = apartment_to_mermaid(three_rooms)
        assert "bedroom ---|vertical| bathroom" in text
        assert "kitchen ---" not in text

    def test_show_area(self, three_rooms):
        text = apartment_to_mermaid(three_rooms, show_area=True)
        assert "Bedroom\\n30000" in text

    def test_accepts_graph(self, three_rooms):
        g = build_apartment_graph(three_rooms)
        assert apartment_to_mermaid(g) == apartment_to_mermaid(three_rooms)

    def test_default_shape(self):
        apt = generate_apartment(seeded_rng(3), 6)
        text = apartment_to_mermaid(apt)
        assert 'living["Living Room"]' in text
        assert 'study["Study"]' in text
        assert 'hallway[["Hallway"]]' in text
