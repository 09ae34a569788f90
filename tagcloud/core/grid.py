# tagcloud/core/grid.py
"""
Grid fallback: after the spiral gives up, scan a coarse raster (x outer, y inner)
at the minimum font with reduced padding; first free cell wins.
See: docs/ALGORITHM.md S4.
"""

from __future__ import annotations

from typing import Callable, Sequence

from tagcloud.core.config import GRID_MIN_FONT_PX, GRID_MIN_FONT_WIDTH_RATIO, GRID_PADDING_PX
from tagcloud.core.geometry import Rect, collides_with_any, grid_positions
from tagcloud.core.types import LayoutConfig, Measurement, PlacedBox


def grid_font_px(container_width: float, ceiling_px: float | None = None) -> float:
    """max(8, width * 0.015), capped at ceiling_px so the font never grows back."""
    size = max(GRID_MIN_FONT_PX, container_width * GRID_MIN_FONT_WIDTH_RATIO)
    if ceiling_px is not None:
        size = min(size, ceiling_px)
    return size


def place_grid(
    text: str,
    placed: Sequence[Rect],
    config: LayoutConfig,
    measure: Callable[[str, float], Measurement],
    ceiling_px: float | None = None,
) -> PlacedBox | None:
    """Return the first non-colliding grid cell, or None if the grid is full."""
    font_px = grid_font_px(config.container_width, ceiling_px)
    m = measure(text, font_px)
    w, h = m.width, m.height
    margin = config.boundary_margin_px
    xs = grid_positions(margin, config.container_width, w, config.grid_step_px)
    ys = grid_positions(margin, config.container_height, h, config.grid_step_px)
    for gx in xs:
        for gy in ys:
            rect = (float(gx), float(gy), w, h)
            if not collides_with_any(rect, placed, GRID_PADDING_PX):
                return PlacedBox(
                    x=float(gx),
                    y=float(gy),
                    width=w,
                    height=h,
                    font_size_px=font_px,
                    strategy="grid",
                    attempts=config.max_spiral_attempts,
                    padding_px=GRID_PADDING_PX,
                )
    return None
