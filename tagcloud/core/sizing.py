# tagcloud/core/sizing.py
"""
Select, rank and size input words before placement.
Orders by value (stable, descending), caps by canvas capacity, and computes a
sqrt-scaled target font per word. See: docs/ALGORITHM.md S1-S2.
"""

from __future__ import annotations

import math

from tagcloud.core.config import (
    AREA_PER_WORD_PX2,
    BASE_MAX_FONT_PX,
    BASE_MAX_FONT_WIDTH_RATIO,
    BASE_MIN_FONT_PX,
    BASE_MIN_FONT_WIDTH_RATIO,
    DENSITY_FACTOR_FLOOR,
    DENSITY_WORD_SCALE,
    IMPORTANCE_FACTOR,
    IMPORTANCE_TOP_N,
)
from tagcloud.core.error_codes import INVALID_TEXT, OVER_CAPACITY
from tagcloud.core.types import LayoutConfig, PlacementNotice, SizedWord, WordDatum


def clean_value(value: object) -> float:
    """Non-numeric, non-finite and negative weights count as 0."""
    try:
        v = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return max(0.0, v)


def word_capacity(config: LayoutConfig) -> int:
    """min(max_words, floor(width * height / AREA_PER_WORD_PX2)); 0 for empty canvases."""
    if config.container_width <= 0 or config.container_height <= 0:
        return 0
    by_area = int(math.floor(config.container_width * config.container_height / AREA_PER_WORD_PX2))
    return max(0, min(config.max_words, by_area))


def rank_words(words: list[WordDatum]) -> tuple[list[WordDatum], list[PlacementNotice]]:
    """
    Drop words with blank text, then sort by value descending.
    sorted() is stable, so equal values keep input order.
    """
    valid: list[WordDatum] = []
    notices: list[PlacementNotice] = []
    for w in words:
        if not (w.text or "").strip():
            notices.append(PlacementNotice(text=w.text or "", reason=INVALID_TEXT, value=clean_value(w.value)))
            continue
        valid.append(w)
    return sorted(valid, key=lambda w: -clean_value(w.value)), notices


def font_band(container_width: float, count: int) -> tuple[float, float]:
    """
    (min_size, max_size) after the density factor.
    The band never inverts: on narrow canvases max collapses to min.
    """
    base_min = max(BASE_MIN_FONT_PX, container_width * BASE_MIN_FONT_WIDTH_RATIO)
    base_max = max(base_min, min(BASE_MAX_FONT_PX, container_width * BASE_MAX_FONT_WIDTH_RATIO))
    density = max(DENSITY_FACTOR_FLOOR, 1.0 - count / DENSITY_WORD_SCALE)
    return base_min * density, base_max * density


def target_font_px(
    value: float,
    rank: int,
    min_value: float,
    max_value: float,
    band: tuple[float, float],
    config: LayoutConfig,
) -> float:
    """size = (min + sqrt(ratio) * (max - min)) * importance, clamped to config bounds if set."""
    ratio = 1.0 if max_value == min_value else (value - min_value) / (max_value - min_value)
    min_size, max_size = band
    importance = IMPORTANCE_FACTOR if rank < IMPORTANCE_TOP_N else 1.0
    size = (min_size + math.sqrt(ratio) * (max_size - min_size)) * importance
    if config.min_font_px is not None:
        size = max(size, config.min_font_px)
    if config.max_font_px is not None:
        size = min(size, config.max_font_px)
    return size


def select_and_size(
    words: list[WordDatum],
    config: LayoutConfig,
) -> tuple[list[SizedWord], list[PlacementNotice]]:
    """
    Rank, cap and size words. Returns (sized words in placement order, notices for
    words that were ignored or cut by the cap).
    """
    if not words:
        return [], []
    ranked, notices = rank_words(list(words))
    cap = word_capacity(config)
    selected = ranked[:cap]
    for w in ranked[cap:]:
        notices.append(PlacementNotice(text=w.text, reason=OVER_CAPACITY, value=clean_value(w.value)))
    if not selected:
        return [], notices

    values = [clean_value(w.value) for w in selected]
    max_value = max(values)
    min_value = min(values)
    band = font_band(config.container_width, len(selected))
    sized = [
        SizedWord(
            word=w,
            rank=i,
            target_font_px=target_font_px(v, i, min_value, max_value, band, config),
        )
        for i, (w, v) in enumerate(zip(selected, values))
    ]
    return sized, notices
