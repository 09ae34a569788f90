# tagcloud/core/colors.py
"""
Color assignment: pure function of (sentiment, rank, scheme).
semantic: red / green / blue by sentiment. gradient: golden-angle hue walk.
default: cyclic 10-color palette. See: docs/ALGORITHM.md S5.
"""

from __future__ import annotations

from tagcloud.core.config import (
    DEFAULT_PALETTE,
    GOLDEN_ANGLE_DEG,
    GRADIENT_LIGHTNESS_PCT,
    GRADIENT_SATURATION_PCT,
    SEMANTIC_NEGATIVE_COLOR,
    SEMANTIC_NEUTRAL_COLOR,
    SEMANTIC_POSITIVE_COLOR,
)
from tagcloud.core.types import Sentiment


def semantic_color(sentiment: Sentiment | None) -> str:
    if sentiment == "negative":
        return SEMANTIC_NEGATIVE_COLOR
    if sentiment == "positive":
        return SEMANTIC_POSITIVE_COLOR
    return SEMANTIC_NEUTRAL_COLOR


def gradient_hue(index: int) -> float:
    """Golden-angle hue in [0, 360), rounded to keep the CSS string stable."""
    return round((index * GOLDEN_ANGLE_DEG) % 360.0, 3)


def gradient_color(index: int) -> str:
    return f"hsl({gradient_hue(index):g}, {GRADIENT_SATURATION_PCT}%, {GRADIENT_LIGHTNESS_PCT}%)"


def palette_color(index: int) -> str:
    return DEFAULT_PALETTE[index % len(DEFAULT_PALETTE)]


def assign_color(sentiment: Sentiment | None, index: int, scheme: str) -> str:
    """Unknown schemes use the default palette."""
    if scheme == "semantic":
        return semantic_color(sentiment)
    if scheme == "gradient":
        return gradient_color(index)
    return palette_color(index)
