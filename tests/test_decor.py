"""Tests for floor and wall decor generation."""

import pytest

from seedroom.generators.collision import rects_overlap
from seedroom.generators.decor import (
    WALL_DECOR_ATTEMPTS,
    _blocks_window,
    _window_x,
    generate_floor_decor,
    generate_wall_decor,
)
from seedroom.generators.profiles import STANDALONE, SUB_ROOM
from seedroom.generators.rng import seeded_rng
from seedroom.generators.room import room_geometry
from seedroom.models.catalog import FLOOR_DECOR_TYPES, FurnitureName
from seedroom.models.geometry import Rect

ROOM_W = 240
ROOM_H = 160
WALL_Y, FLOOR_TOP = room_geometry(ROOM_H, top_down=False)


def exploding_rng():
    raise AssertionError("rng should not be called")


@pytest.fixture
def full_room() -> list[Rect]:
    return [Rect(x=0, y=0, w=ROOM_W, h=ROOM_H)]


class TestFloorDecor:
    def test_standalone_count_range(self):
        counts = {
            len(generate_floor_decor(seeded_rng(s), [], ROOM_W, ROOM_H, FLOOR_TOP))
            for s in range(300)
        }
        assert counts <= {2, 3, 4, 5, 6}
        assert len(counts) > 1

    def test_sub_room_count_range(self):
        for s in range(300):
            items = generate_floor_decor(seeded_rng(s), [], 200, 140, 4, profile=SUB_ROOM)
            assert 1 <= len(items) <= 4

    def test_item_fields(self):
        for item in generate_floor_decor(seeded_rng(9), [], ROOM_W, ROOM_H, FLOOR_TOP):
            assert item.type in FLOOR_DECOR_TYPES
            assert 3 <= item.size < 7
            assert -0.25 <= item.rot <= 0.25
            assert 8 <= item.x < ROOM_W - 8
            assert FLOOR_TOP + 5 <= item.y < ROOM_H - 5

    def test_avoids_furniture(self):
        furniture = [
            Rect(x=2, y=FLOOR_TOP, w=100, h=40),
            Rect(x=150, y=100, w=60, h=30),
        ]
        for s in range(100):
            items = generate_floor_decor(seeded_rng(s), furniture, ROOM_W, ROOM_H, FLOOR_TOP, SUB_ROOM)
            for item in items:
                footprint = Rect(x=item.x - item.size, y=item.y - item.size, w=item.size * 2, h=item.size * 2)
                assert not any(rects_overlap(footprint, f) for f in furniture)

    def test_standalone_forces_blocked_items(self, full_room):
        items = generate_floor_decor(lambda: 0.0, full_room, ROOM_W, ROOM_H, FLOOR_TOP)
        # count = 2 + floor(0 * 5); both forced at the last sample
        assert len(items) == 2
        assert all(i.x == 8 for i in items)
        assert all(i.rot == -0.25 for i in items)

    def test_sub_room_drops_blocked_items(self, full_room):
        for s in range(20):
            assert generate_floor_decor(seeded_rng(s), full_room, ROOM_W, ROOM_H, 4, SUB_ROOM) == []


class TestWallDecor:
    def test_no_wall_strip(self):
        assert generate_wall_decor(exploding_rng, {}, ROOM_W, 0) == []
        assert generate_wall_decor(exploding_rng, {}, ROOM_W, 0, SUB_ROOM) == []

    def test_count_ceiling(self):
        for s in range(300):
            items = generate_wall_decor(seeded_rng(s), {}, ROOM_W, WALL_Y)
            assert len(items) <= 5
            items = generate_wall_decor(seeded_rng(s), {}, ROOM_W, WALL_Y, SUB_ROOM)
            assert len(items) <= 3

    def test_inside_wall_strip(self):
        for s in range(300):
            for item in generate_wall_decor(seeded_rng(s), {}, ROOM_W, WALL_Y):
                assert item.y >= 0
                assert item.y + item.h <= WALL_Y
                assert item.x >= 6

    def test_integer_sizes(self):
        for s in range(50):
            for item in generate_wall_decor(seeded_rng(s), {}, ROOM_W, WALL_Y):
                assert item.w == int(item.w)
                assert item.h == int(item.h)
                assert abs(item.rot) <= 0.05

    def test_items_keep_apart(self):
        for s in range(300):
            items = generate_wall_decor(seeded_rng(s), {}, ROOM_W, WALL_Y)
            for i, a in enumerate(items):
                for b in items[i + 1:]:
                    separated = (
                        a.x >= b.x + b.w + 4 or b.x >= a.x + a.w + 4
                        or a.y >= b.y + b.h + 3 or b.y >= a.y + a.h + 3
                    )
                    assert separated

    def test_window_band_kept_clear(self):
        desk = Rect(x=100, y=FLOOR_TOP, w=36, h=22)
        furniture = {FurnitureName.DESK: desk}
        win_x = _window_x(furniture)
        assert win_x == 30 + 50
        for s in range(300):
            for item in generate_wall_decor(seeded_rng(s), furniture, ROOM_W, WALL_Y):
                assert not _blocks_window(item.x, item.y, item.w, win_x)

    def test_window_defaults_without_desk(self):
        assert _window_x({}) == 30 + 40

    def test_window_wraps(self):
        desk = Rect(x=300, y=0, w=36, h=22)
        assert _window_x({FurnitureName.DESK: desk}) == 30 + 30

    def test_narrow_strip_skips_items(self):
        # Strip too short for any item; every attempt is rejected
        assert generate_wall_decor(seeded_rng(4), {}, ROOM_W, 4) == []

    def test_attempts_bounded(self):
        calls = 0

        def counting():
            nonlocal calls
            calls += 1
            return 0.0

        generate_wall_decor(counting, {}, ROOM_W, 4)
        # count, type, size draws, then 2 draws per attempt
        assert calls <= 1 + 3 * (3 + WALL_DECOR_ATTEMPTS * 2)
