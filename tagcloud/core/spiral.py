# tagcloud/core/spiral.py
"""
Spiral placement: walk an expanding spiral from the canvas center and take the
first clamped position that clears every placed rectangle. A box wider or taller
than the area inside the margins counts as a failed attempt. The font shrinks every
font_shrink_every failed attempts. See: docs/ALGORITHM.md S3.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from tagcloud.core.config import FONT_SHRINK_FLOOR_PX, LAYOUT_DEBUG
from tagcloud.core.geometry import (
    Rect,
    clamp_top_left,
    collides_with_any,
    fits_usable_area,
    spiral_max_radius,
    spiral_offsets,
)
from tagcloud.core.types import LayoutConfig, Measurement, PlacedBox, SizedWord

logger = logging.getLogger(__name__)


def _should_shrink(attempts: int, font_px: float, config: LayoutConfig) -> bool:
    """Shrink after a failure on every font_shrink_every-th attempt while above the floor."""
    if config.font_shrink_every <= 0 or not (0.0 < config.font_shrink_factor < 1.0):
        return False
    return attempts > 0 and attempts % config.font_shrink_every == 0 and font_px > FONT_SHRINK_FLOOR_PX


def place_spiral(
    sized: SizedWord,
    placed: Sequence[Rect],
    config: LayoutConfig,
    measure: Callable[[str, float], Measurement],
) -> tuple[PlacedBox | None, float]:
    """
    Search for a free spot for one word.
    Returns (PlacedBox, font_px) on success or (None, last font tried) when the
    attempt budget is exhausted. Font size never increases within the search.
    """
    text = sized.word.text
    container = (float(config.container_width), float(config.container_height))
    cx = container[0] / 2.0
    cy = container[1] / 2.0
    max_radius = spiral_max_radius(*container)
    dxs, dys = spiral_offsets(config.max_spiral_attempts, max_radius)

    font_px = sized.target_font_px
    m = measure(text, font_px)
    w, h = m.width, m.height
    shrinks = 0

    for attempts in range(len(dxs)):
        x = cx + float(dxs[attempts]) - w / 2.0
        y = cy + float(dys[attempts]) - h / 2.0
        bx, by = clamp_top_left(x, y, w, h, container, config.boundary_margin_px)
        fits = fits_usable_area(w, h, container, config.boundary_margin_px)
        if fits and not collides_with_any((bx, by, w, h), placed, config.collision_padding_px):
            if LAYOUT_DEBUG:
                logger.debug(
                    "spiral placed %r after %d attempts at %.2fpx (%d shrinks)",
                    text, attempts, font_px, shrinks,
                )
            return PlacedBox(
                x=bx,
                y=by,
                width=w,
                height=h,
                font_size_px=font_px,
                strategy="spiral",
                attempts=attempts,
                padding_px=config.collision_padding_px,
            ), font_px
        if _should_shrink(attempts, font_px, config):
            font_px *= config.font_shrink_factor
            m = measure(text, font_px)
            w, h = m.width, m.height
            shrinks += 1

    logger.debug(
        "spiral exhausted %d attempts for %r (last font %.2fpx)",
        len(dxs), text, font_px,
    )
    return None, font_px
