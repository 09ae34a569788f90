# tagcloud/core/text_metrics.py
"""
Text metrics oracles: heuristic fallback, Pillow-backed measurement, and the
per-layout wrapper that memoizes queries and degrades to the heuristic.
See: docs/ALGORITHM.md (metrics).
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Callable

from tagcloud.core.config import (
    DEFAULT_FONT_FAMILY,
    HEURISTIC_LINE_HEIGHT,
    HEURISTIC_WIDTH_PER_CHAR,
    MEASURE_EXTRA_WIDTH_PX,
)
from tagcloud.core.types import Measurement, MetricsOracle

logger = logging.getLogger(__name__)

_font_warning_emitted: set[str] = set()


def heuristic_measure(text: str, font_size_px: float) -> Measurement:
    """Oracle-free estimate: len(text) * size * 0.6 wide, size * 1.3 tall."""
    return Measurement(
        width=len(text) * font_size_px * HEURISTIC_WIDTH_PER_CHAR,
        height=font_size_px * HEURISTIC_LINE_HEIGHT,
    )


def _load_font(font_family: str, font_size_px: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    global _font_warning_emitted
    from PIL import ImageFont

    size = max(1, int(round(font_size_px)))
    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except (OSError, IOError):
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text_px(text: str, font_size_px: float, font_family: str = DEFAULT_FONT_FAMILY) -> Measurement:
    """
    Measure text with Pillow. Width is the advance width plus MEASURE_EXTRA_WIDTH_PX;
    height is the line height (size * 1.3), not the ink box.
    """
    font = _load_font(font_family, font_size_px)
    width = float(font.getlength(text))
    size_used = float(getattr(font, "size", font_size_px) or font_size_px)
    scale = font_size_px / max(1.0, size_used)
    return Measurement(
        width=width * scale + MEASURE_EXTRA_WIDTH_PX,
        height=font_size_px * HEURISTIC_LINE_HEIGHT,
    )


def pillow_metrics(font_family: str = DEFAULT_FONT_FAMILY) -> Callable[[str, float], Measurement]:
    """Return a metrics oracle bound to font_family."""
    def _measure(text: str, font_size_px: float) -> Measurement:
        return measure_text_px(text, font_size_px, font_family)
    return _measure


def _coerce_measurement(raw: object) -> Measurement | None:
    """Accept Measurement, (w, h) or {"width", "height"}; None if unusable."""
    if isinstance(raw, Measurement):
        w, h = raw.width, raw.height
    elif isinstance(raw, dict):
        w, h = raw.get("width"), raw.get("height")
    elif isinstance(raw, (tuple, list)) and len(raw) == 2:
        w, h = raw
    else:
        return None
    try:
        w = float(w)  # type: ignore[arg-type]
        h = float(h)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0:
        return None
    return Measurement(width=w, height=h)


class MeasureCache:
    """
    Per-layout view of a metrics oracle. Memoizes (text, font_px) queries and
    falls back to heuristic_measure when the oracle is missing, raises, or
    returns a non-positive size. Not shared across layout calls.
    """

    def __init__(self, oracle: MetricsOracle | None = None) -> None:
        self.oracle = oracle
        self.fallback_count = 0
        self._cache: dict[tuple[str, float], Measurement] = {}
        self._warned = False

    def __call__(self, text: str, font_size_px: float) -> Measurement:
        key = (text, font_size_px)
        hit = self._cache.get(key)
        if hit is not None:
            return hit
        m = self._query(text, font_size_px)
        self._cache[key] = m
        return m

    def _query(self, text: str, font_size_px: float) -> Measurement:
        if self.oracle is None:
            return heuristic_measure(text, font_size_px)
        try:
            m = _coerce_measurement(self.oracle(text, font_size_px))
            reason = "unusable result"
        except Exception as e:
            m = None
            reason = f"{type(e).__name__}: {e}"
        if m is None:
            self.fallback_count += 1
            if not self._warned:
                self._warned = True
                logger.warning(
                    "Metrics oracle failed for %r at %.2fpx (%s); using heuristic measurement.",
                    text, font_size_px, reason,
                )
            return heuristic_measure(text, font_size_px)
        return m
