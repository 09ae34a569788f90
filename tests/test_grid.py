# tests/test_grid.py
"""
Grid fallback: minimum font, reduced padding, x-outer / y-inner scan order.
See: docs/ALGORITHM.md S4.
"""

from __future__ import annotations

import pytest

from tagcloud.core.grid import grid_font_px, place_grid
from tagcloud.core.types import LayoutConfig, Measurement


def _small(text: str, font_px: float) -> Measurement:
    return Measurement(width=20.0, height=10.0)


def test_grid_font_px() -> None:
    assert grid_font_px(200) == 8.0
    assert grid_font_px(1000) == pytest.approx(15.0)
    assert grid_font_px(1000, ceiling_px=9.0) == 9.0
    assert grid_font_px(200, ceiling_px=12.0) == 8.0


def test_empty_canvas_takes_first_cell() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200)
    box = place_grid("x", [], cfg, _small)
    assert box is not None
    assert (box.x, box.y) == (15.0, 15.0)
    assert box.font_size_px == 8.0
    assert box.strategy == "grid"
    assert box.padding_px == 6.0
    assert box.attempts == cfg.max_spiral_attempts


def test_scan_moves_down_before_right() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200)
    # Blocks only the top band: first free cell is further down the first column
    blocker = [(0.0, 0.0, 200.0, 40.0)]
    box = place_grid("x", blocker, cfg, _small)
    assert box is not None
    assert box.x == 15.0
    assert box.y == 55.0


def test_scan_skips_blocked_column() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200)
    blocker = [(0.0, 0.0, 40.0, 200.0)]
    box = place_grid("x", blocker, cfg, _small)
    assert box is not None
    # 40 + 6 < 55, so x=55 is the first column clear of the blocker
    assert (box.x, box.y) == (55.0, 15.0)


def test_full_grid_returns_none() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200)
    assert place_grid("x", [(0.0, 0.0, 200.0, 200.0)], cfg, _small) is None


def test_word_larger_than_canvas_returns_none() -> None:
    cfg = LayoutConfig(container_width=60, container_height=60)
    assert place_grid("x", [], cfg, lambda t, f: Measurement(50.0, 10.0)) is None
