# tagcloud/core/layout.py
"""
Word-cloud layout orchestration with collision avoidance.
Orders words by value (highest first), threads the placed list through each
placement step, falls back from spiral to grid, and reports words it drops.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Sequence

from tagcloud.core.colors import assign_color
from tagcloud.core.error_codes import UNPLACEABLE
from tagcloud.core.grid import place_grid
from tagcloud.core.sizing import clean_value, select_and_size
from tagcloud.core.spiral import place_spiral
from tagcloud.core.text_metrics import MeasureCache
from tagcloud.core.types import (
    LayoutConfig,
    LayoutSummary,
    MetricsOracle,
    Placement,
    PlacementNotice,
    SizedWord,
    WordDatum,
)

logger = logging.getLogger(__name__)

NoticeCallback = Callable[[PlacementNotice], None]


def sanitize_config(config: LayoutConfig) -> LayoutConfig:
    """Clamp nonsensical tunables instead of rejecting them."""
    return replace(
        config,
        max_words=max(0, int(config.max_words)),
        collision_padding_px=max(0.0, float(config.collision_padding_px)),
        boundary_margin_px=max(0.0, float(config.boundary_margin_px)),
        max_spiral_attempts=max(0, int(config.max_spiral_attempts)),
        grid_step_px=max(1.0, float(config.grid_step_px)),
    )


def _place_word(
    sized: SizedWord,
    placed: tuple[Placement, ...],
    config: LayoutConfig,
    measure: MeasureCache,
) -> tuple[tuple[Placement, ...], PlacementNotice | None]:
    """
    One fold step: returns (placed + new placement, None) or (placed, notice)
    when neither the spiral nor the grid finds room.
    """
    text = sized.word.text
    rects = [(p.x, p.y, p.width, p.height) for p in placed]
    box, last_font_px = place_spiral(sized, rects, config, measure)
    if box is None:
        box = place_grid(text, rects, config, measure, ceiling_px=last_font_px)
    if box is None:
        logger.warning("Unable to place word %r; dropped from layout.", text)
        return placed, PlacementNotice(text=text, reason=UNPLACEABLE, value=clean_value(sized.word.value))

    placement = Placement(
        x=box.x,
        y=box.y,
        width=box.width,
        height=box.height,
        font_size_px=box.font_size_px,
        color=assign_color(sized.word.sentiment, sized.rank, config.color_scheme),
        word=sized.word,
        strategy=box.strategy,
        attempts=box.attempts,
        padding_px=box.padding_px,
    )
    return placed + (placement,), None


def run_layout(
    words: Sequence[WordDatum],
    config: LayoutConfig | None = None,
    metrics: MetricsOracle | None = None,
    on_notice: NoticeCallback | None = None,
) -> LayoutSummary:
    """
    Lay out words and return placements plus diagnostics.
    metrics None uses the heuristic measurement. on_notice is called for each
    word missing from the output, in processing order.
    """
    cfg = sanitize_config(config or LayoutConfig())
    words = list(words or [])
    if not words or cfg.container_width <= 0 or cfg.container_height <= 0:
        return LayoutSummary(placements=[], notices=[], n_words=len(words), n_selected=0)

    sized, notices = select_and_size(words, cfg)
    if on_notice is not None:
        for n in notices:
            on_notice(n)

    measure = MeasureCache(metrics)
    placed: tuple[Placement, ...] = ()
    for sw in sized:
        placed, notice = _place_word(sw, placed, cfg, measure)
        if notice is not None:
            notices.append(notice)
            if on_notice is not None:
                on_notice(notice)

    summary = LayoutSummary(
        placements=list(placed),
        notices=notices,
        n_words=len(words),
        n_selected=len(sized),
    )
    logger.debug(
        "layout placed %d/%d words (%d spiral, %d grid, %d oracle fallbacks)",
        summary.placed_count, summary.n_words, summary.spiral_count,
        summary.grid_count, measure.fallback_count,
    )
    return summary


def layout(
    words: Sequence[WordDatum],
    config: LayoutConfig | None = None,
    metrics: MetricsOracle | None = None,
    on_notice: NoticeCallback | None = None,
) -> list[Placement]:
    """
    Placements in placement order. Every input word missing from the result
    (unplaceable, over capacity or blank) is reported once via on_notice.
    """
    return run_layout(words, config, metrics, on_notice=on_notice).placements
