# tagcloud/core/config.py
"""
Central configuration for word-cloud layout.
All tunable values live here; no magic numbers in other modules.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Container -----
DEFAULT_CONTAINER_WIDTH_PX: int = 600
DEFAULT_CONTAINER_HEIGHT_PX: int = 300

AREA_PER_WORD_PX2: float = 2000.0
"""Canvas area budget per word: word cap = floor(width * height / AREA_PER_WORD_PX2). See ALGORITHM S1."""

# ----- Selection and sizing -----
MAX_WORDS: int = 50

BASE_MIN_FONT_PX: float = 12.0
BASE_MIN_FONT_WIDTH_RATIO: float = 0.02
"""Smallest target font: max(BASE_MIN_FONT_PX, width * ratio). See ALGORITHM S2."""

BASE_MAX_FONT_PX: float = 32.0
BASE_MAX_FONT_WIDTH_RATIO: float = 0.05
"""Largest target font: min(BASE_MAX_FONT_PX, width * ratio). See ALGORITHM S2."""

DENSITY_WORD_SCALE: float = 120.0
DENSITY_FACTOR_FLOOR: float = 0.8
"""density = max(DENSITY_FACTOR_FLOOR, 1 - count / DENSITY_WORD_SCALE)."""

IMPORTANCE_TOP_N: int = 3
IMPORTANCE_FACTOR: float = 1.05
"""Font boost for the first IMPORTANCE_TOP_N words in sorted order."""

# ----- Spiral search -----
COLLISION_PADDING_PX: float = 8.0
BOUNDARY_MARGIN_PX: float = 15.0

MAX_SPIRAL_ATTEMPTS: int = 800

SPIRAL_ANGLE_STEP_RAD: float = 0.05
SPIRAL_RADIUS_PER_RAD: float = 1.5
SPIRAL_RADIUS_INSET_PX: float = 30.0
"""max_radius = min(width, height) / 2 - SPIRAL_RADIUS_INSET_PX, floored at 0."""

FONT_SHRINK_EVERY: int = 100
FONT_SHRINK_FACTOR: float = 0.85
FONT_SHRINK_FLOOR_PX: float = 10.0
"""Fonts at or below this size are not shrunk further during the spiral search."""

# ----- Grid fallback -----
GRID_STEP_PX: float = 20.0
GRID_PADDING_PX: float = 6.0
"""Fixed collision padding for grid placements, independent of LayoutConfig."""

GRID_MIN_FONT_PX: float = 8.0
GRID_MIN_FONT_WIDTH_RATIO: float = 0.015
"""Grid font: max(GRID_MIN_FONT_PX, width * ratio), never above the last spiral font."""

# ----- Colors -----
DEFAULT_COLOR_SCHEME: str = "semantic"

SEMANTIC_NEGATIVE_COLOR: str = "#ff4d4f"
SEMANTIC_POSITIVE_COLOR: str = "#52c41a"
SEMANTIC_NEUTRAL_COLOR: str = "#1890ff"

GOLDEN_ANGLE_DEG: float = 137.508
GRADIENT_SATURATION_PCT: int = 70
GRADIENT_LIGHTNESS_PCT: int = 50

DEFAULT_PALETTE: tuple[str, ...] = (
    "#1890ff", "#52c41a", "#faad14", "#f5222d", "#722ed1",
    "#13c2c2", "#eb2f96", "#fa8c16", "#a0d911", "#2f54eb",
)

# ----- Text metrics -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"

HEURISTIC_WIDTH_PER_CHAR: float = 0.6
HEURISTIC_LINE_HEIGHT: float = 1.3
"""Fallback measurement: width = len(text) * size * 0.6, height = size * 1.3."""

MEASURE_EXTRA_WIDTH_PX: float = 4.0
"""Breathing room added to measured advance width by the Pillow oracle."""

# ----- Growth tags -----
GROWTH_LEVEL_SCALE: float = 10.0
"""Growth tag level (0-10) -> word value: round(level * GROWTH_LEVEL_SCALE)."""

TOP_WORDS_DEFAULT: int = 10

# ----- Reporting -----
LAYOUT_SCHEMA_VERSION: str = "1.0"

# ----- Logging / debug flags -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for the runner. Set env LOG_LEVEL=DEBUG for development."""

LAYOUT_DEBUG: bool = os.environ.get("TAGCLOUD_DEBUG", "").lower() in ("1", "true", "yes")
"""Log per-word search statistics. Set env TAGCLOUD_DEBUG=1 to enable."""
