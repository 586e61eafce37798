"""Tests for geometric primitives and collision tests."""

import pytest

from seedroom.generators.collision import (
    PAD,
    collides,
    rect_in_bounds,
    rect_in_vertical_bounds,
    rects_overlap,
)
from seedroom.models.geometry import Position, Rect


class TestRect:
    def test_create(self):
        r = Rect(x=1, y=2, w=3, h=4)
        assert r.right == 4
        assert r.bottom == 6
        assert r.area == 12

    def test_rejects_zero_size(self):
        with pytest.raises(ValueError):
            Rect(x=0, y=0, w=0, h=5)

    def test_translate(self):
        r = Rect(x=1, y=2, w=3, h=4).translate(10, 20)
        assert (r.x, r.y, r.w, r.h) == (11, 22, 3, 4)

    def test_shrink(self):
        assert Rect(x=0, y=0, w=100, h=50).shrink(4) == (4, 4, 92, 42)

    def test_contains_is_half_open(self):
        r = Rect(x=0, y=0, w=10, h=10)
        assert r.contains(0, 0)
        assert r.contains(9.9, 9.9)
        assert not r.contains(10, 5)


class TestPosition:
    def test_offset(self):
        p = Position(x=1, y=2).offset(25, 5)
        assert p == Position(x=26, y=7)


class TestRectsOverlap:
    def test_far_apart(self):
        a = Rect(x=0, y=0, w=10, h=10)
        b = Rect(x=50, y=50, w=10, h=10)
        assert not rects_overlap(a, b)

    def test_intersecting(self):
        a = Rect(x=0, y=0, w=10, h=10)
        b = Rect(x=5, y=5, w=10, h=10)
        assert rects_overlap(a, b)
        assert rects_overlap(b, a)

    def test_within_padding_counts(self):
        a = Rect(x=0, y=0, w=10, h=10)
        b = Rect(x=10 + PAD - 1, y=0, w=10, h=10)
        assert rects_overlap(a, b)

    def test_exactly_padding_apart_is_clear(self):
        a = Rect(x=0, y=0, w=10, h=10)
        b = Rect(x=10 + PAD, y=0, w=10, h=10)
        assert not rects_overlap(a, b)
        assert not rects_overlap(b, a)

    def test_vertical_padding(self):
        a = Rect(x=0, y=0, w=10, h=10)
        assert rects_overlap(a, Rect(x=0, y=12, w=10, h=10))
        assert not rects_overlap(a, Rect(x=0, y=13, w=10, h=10))

    def test_custom_pad(self):
        a = Rect(x=0, y=0, w=10, h=10)
        b = Rect(x=11, y=0, w=10, h=10)
        assert not rects_overlap(a, b, pad=0)
        assert rects_overlap(a, b, pad=2)


class TestRectInBounds:
    def test_inside(self):
        assert rect_in_bounds(Rect(x=2, y=2, w=236, h=154), 240, 160)

    def test_left_margin(self):
        assert not rect_in_bounds(Rect(x=1, y=10, w=10, h=10), 240, 160)

    def test_top_margin(self):
        assert not rect_in_bounds(Rect(x=10, y=1, w=10, h=10), 240, 160)

    def test_right_margin(self):
        assert not rect_in_bounds(Rect(x=229, y=10, w=10, h=10), 240, 160)

    def test_bottom_margin_is_four(self):
        assert rect_in_bounds(Rect(x=10, y=146, w=10, h=10), 240, 160)
        assert not rect_in_bounds(Rect(x=10, y=147, w=10, h=10), 240, 160)

    def test_vertical_bounds_ignore_x(self):
        door = Rect(x=1, y=40, w=20, h=44)
        assert not rect_in_bounds(door, 240, 160)
        assert rect_in_vertical_bounds(door, 160)
        assert not rect_in_vertical_bounds(Rect(x=1, y=0, w=20, h=44), 160)


class TestCollides:
    def test_empty(self):
        assert not collides(Rect(x=0, y=0, w=5, h=5), [])

    def test_any_hit(self):
        placed = [Rect(x=100, y=100, w=5, h=5), Rect(x=0, y=0, w=5, h=5)]
        assert collides(Rect(x=2, y=2, w=5, h=5), placed)
