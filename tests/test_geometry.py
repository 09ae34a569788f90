# tests/test_geometry.py
"""
Deterministic tests for geometry: padded collision, clamping, spiral offsets,
grid positions. See: docs/ALGORITHM.md S3-S4.
"""

from __future__ import annotations

import math

import pytest

from tagcloud.core.geometry import (
    clamp_top_left,
    collides_with_any,
    fits_usable_area,
    grid_positions,
    is_colliding,
    spiral_max_radius,
    spiral_offsets,
)


def test_is_colliding_separated_beyond_padding() -> None:
    assert is_colliding((0, 0, 10, 10), (20, 0, 10, 10), 8) is False
    assert is_colliding((20, 0, 10, 10), (0, 0, 10, 10), 8) is False


def test_is_colliding_gap_equal_to_padding_collides() -> None:
    assert is_colliding((0, 0, 10, 10), (20, 0, 10, 10), 10) is True
    assert is_colliding((0, 0, 10, 10), (10, 0, 10, 10), 0) is True


def test_is_colliding_diagonal() -> None:
    # gap of 5 on both axes
    assert is_colliding((0, 0, 10, 10), (15, 15, 10, 10), 8) is True
    assert is_colliding((0, 0, 10, 10), (15, 15, 10, 10), 4) is False


def test_collides_with_any() -> None:
    others = [(0, 0, 10, 10), (100, 100, 10, 10)]
    assert collides_with_any((105, 105, 5, 5), others, 0) is True
    assert collides_with_any((50, 50, 5, 5), others, 8) is False
    assert collides_with_any((50, 50, 5, 5), [], 8) is False


def test_clamp_top_left() -> None:
    assert clamp_top_left(-5, 500, 10, 10, (100, 100), 15) == (15, 75)
    assert clamp_top_left(40, 40, 10, 10, (100, 100), 15) == (40, 40)
    # Wider than the usable area: lower bound wins
    bx, _ = clamp_top_left(50, 40, 200, 10, (100, 100), 15)
    assert bx == 15


def test_fits_usable_area() -> None:
    assert fits_usable_area(70, 70, (100, 100), 15) is True
    assert fits_usable_area(70.5, 10, (100, 100), 15) is False
    assert fits_usable_area(10, 71, (100, 100), 15) is False


def test_spiral_max_radius() -> None:
    assert spiral_max_radius(100, 200) == 20
    assert spiral_max_radius(40, 40) == 0


def test_spiral_offsets() -> None:
    dx, dy = spiral_offsets(3, 100.0)
    assert len(dx) == 3 and len(dy) == 3
    assert dx[0] == 0 and dy[0] == 0
    r1 = 0.05 * 1.5
    assert dx[1] == pytest.approx(r1 * math.cos(0.05))
    assert dy[1] == pytest.approx(r1 * math.sin(0.05))


def test_spiral_offsets_capped_radius() -> None:
    dx, dy = spiral_offsets(800, 20.0)
    radii = [math.hypot(x, y) for x, y in zip(dx, dy)]
    assert max(radii) == pytest.approx(20.0)
    assert all(b >= a - 1e-9 for a, b in zip(radii, radii[1:]))


def test_spiral_offsets_empty() -> None:
    dx, dy = spiral_offsets(0, 100.0)
    assert len(dx) == 0 and len(dy) == 0


def test_grid_positions() -> None:
    assert list(grid_positions(15, 100, 30, 20)) == [15, 35]
    assert list(grid_positions(15, 50, 30, 20)) == []
    assert list(grid_positions(15, 100, 30, 0)) == []
