# tagcloud/core/types.py
"""
Dataclasses for word input, layout options, intermediate boxes and placement output.
Schema aligns with docs/LAYOUT_SCHEMA.md.
See: docs/ALGORITHM.md, docs/LAYOUT_SCHEMA.md.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal

from tagcloud.core.config import (
    BOUNDARY_MARGIN_PX,
    COLLISION_PADDING_PX,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_CONTAINER_HEIGHT_PX,
    DEFAULT_CONTAINER_WIDTH_PX,
    FONT_SHRINK_EVERY,
    FONT_SHRINK_FACTOR,
    GRID_STEP_PX,
    MAX_SPIRAL_ATTEMPTS,
    MAX_WORDS,
)


Sentiment = Literal["positive", "negative"]
ColorScheme = Literal["semantic", "gradient", "default"]
PlacementStrategy = Literal["spiral", "grid"]
NoticeReason = Literal["unplaceable", "over_capacity", "invalid_text"]


@dataclass(frozen=True)
class WordDatum:
    """One weighted input item. sentiment None means neutral."""
    text: str
    value: float
    sentiment: Sentiment | None = None


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout options with documented defaults. See docs/ALGORITHM.md (tunables).
    min_font_px / max_font_px clamp target sizes only when set.
    """
    container_width: int = DEFAULT_CONTAINER_WIDTH_PX
    container_height: int = DEFAULT_CONTAINER_HEIGHT_PX
    max_words: int = MAX_WORDS
    color_scheme: ColorScheme = DEFAULT_COLOR_SCHEME  # type: ignore[assignment]
    min_font_px: float | None = None
    max_font_px: float | None = None
    collision_padding_px: float = COLLISION_PADDING_PX
    boundary_margin_px: float = BOUNDARY_MARGIN_PX
    max_spiral_attempts: int = MAX_SPIRAL_ATTEMPTS
    font_shrink_every: int = FONT_SHRINK_EVERY
    font_shrink_factor: float = FONT_SHRINK_FACTOR
    grid_step_px: float = GRID_STEP_PX


@dataclass(frozen=True)
class Measurement:
    """Rendered text extent in px for a (text, font size) pair."""
    width: float
    height: float


MetricsOracle = Callable[[str, float], Measurement | tuple[float, float] | dict]
"""(text, font_px) -> Measurement, (width, height) or {"width", "height"}."""


@dataclass(frozen=True)
class SizedWord:
    """A selected word with its target font size. rank is the index in sorted order."""
    word: WordDatum
    rank: int
    target_font_px: float


@dataclass(frozen=True)
class PlacedBox:
    """Uncolored rectangle found by the spiral or grid search. See docs/ALGORITHM.md S3-S4."""
    x: float
    y: float
    width: float
    height: float
    font_size_px: float
    strategy: PlacementStrategy
    attempts: int
    padding_px: float


@dataclass(frozen=True)
class Placement:
    """
    Final placement of one word. Serializes into layout.json (placements[]).
    x, y is the top-left corner; rotation_deg is always 0.
    """
    x: float
    y: float
    width: float
    height: float
    font_size_px: float
    color: str
    word: WordDatum
    strategy: PlacementStrategy = "spiral"
    attempts: int = 0
    padding_px: float = COLLISION_PADDING_PX
    rotation_deg: float = 0.0

    @property
    def text(self) -> str:
        return self.word.text


@dataclass(frozen=True)
class PlacementNotice:
    """Diagnostic for a word that is absent from the output."""
    text: str
    reason: NoticeReason
    value: float = 0.0


@dataclass
class LayoutSummary:
    """Result of one layout run: placements in placement order plus diagnostics."""
    placements: list[Placement]
    notices: list[PlacementNotice] = field(default_factory=list)
    n_words: int = 0
    n_selected: int = 0

    @property
    def placed_count(self) -> int:
        return len(self.placements)

    @property
    def spiral_count(self) -> int:
        return sum(1 for p in self.placements if p.strategy == "spiral")

    @property
    def grid_count(self) -> int:
        return sum(1 for p in self.placements if p.strategy == "grid")

    @property
    def unplaceable(self) -> list[PlacementNotice]:
        return [n for n in self.notices if n.reason == "unplaceable"]
