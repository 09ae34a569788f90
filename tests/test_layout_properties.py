# tests/test_layout_properties.py
"""
End-to-end layout: no overlap, boundary containment, determinism, monotonic font
decay, priority order, graceful degradation with diagnostics.
Deterministic stub oracles only; no fonts required.
"""

from __future__ import annotations

import math
from collections import defaultdict

import pytest

from tagcloud.core.layout import layout, run_layout
from tagcloud.core.types import LayoutConfig, Measurement, PlacementNotice, WordDatum
from tagcloud.core.validate import validate_layout


def fixed_metrics(text: str, font_px: float) -> dict:
    return {"width": 50, "height": 20}


class RecordingMetrics:
    """Size-proportional boxes; records (text, font_px) in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, float]] = []

    def __call__(self, text: str, font_px: float) -> Measurement:
        self.calls.append((text, font_px))
        return Measurement(width=len(text) * font_px * 0.55, height=font_px * 1.25)


def _words(n: int, value: float = 1.0, prefix: str = "tag") -> list[WordDatum]:
    return [WordDatum(f"{prefix}{i}", value) for i in range(n)]


def test_single_word_small_canvas() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200)
    out = layout([WordDatum("A", 10)], cfg)
    assert len(out) == 1
    p = out[0]
    assert p.text == "A"
    assert p.font_size_px == pytest.approx(12 * (1 - 1 / 120) * 1.05)
    assert p.rotation_deg == 0.0
    assert validate_layout(out, cfg) == []


def test_three_words_placed_in_value_order_with_non_increasing_fonts() -> None:
    words = [WordDatum("C", 1), WordDatum("A", 10), WordDatum("B", 5)]
    out = layout(words, LayoutConfig())
    assert [p.text for p in out] == ["A", "B", "C"]
    assert out[0].font_size_px >= out[1].font_size_px >= out[2].font_size_px
    assert validate_layout(out, LayoutConfig()) == []


def test_crowded_small_canvas_drops_and_reports() -> None:
    cfg = LayoutConfig(container_width=100, container_height=100)
    words = _words(200)
    received: list[PlacementNotice] = []
    out = layout(words, cfg, on_notice=received.append)
    assert len(out) < 200
    placed = {p.text for p in out}
    missing = {w.text for w in words} - placed
    assert {n.text for n in received} == missing
    assert len(received) == len(missing)
    assert validate_layout(out, cfg) == []


def test_unplaceable_words_are_reported_not_raised() -> None:
    cfg = LayoutConfig(container_width=200, container_height=100)
    words = _words(10)
    summary = run_layout(words, cfg, lambda t, f: (120.0, 30.0))
    assert summary.n_selected == 10
    assert 0 < summary.placed_count < 10
    assert len(summary.unplaceable) == 10 - summary.placed_count
    placed = {p.text for p in summary.placements}
    assert {n.text for n in summary.unplaceable} == {w.text for w in words} - placed
    assert validate_layout(summary.placements, cfg) == []


def test_second_word_pushed_out_along_spiral() -> None:
    cfg = LayoutConfig(container_width=400, container_height=300)
    out = layout([WordDatum("one", 2), WordDatum("two", 1)], cfg, fixed_metrics)
    assert len(out) == 2
    first, second = out
    assert second.attempts > first.attempts
    cx, cy = cfg.container_width / 2, cfg.container_height / 2

    def offset(p) -> float:
        return math.hypot(p.x + p.width / 2 - cx, p.y + p.height / 2 - cy)

    assert offset(second) > offset(first)
    assert validate_layout(out, cfg) == []


def test_fixed_metrics_still_valid() -> None:
    cfg = LayoutConfig(container_width=600, container_height=300)
    out = layout(_words(30), cfg, fixed_metrics)
    assert len(out) > 0
    assert all(p.width == 50 and p.height == 20 for p in out)
    assert validate_layout(out, cfg) == []


def test_deterministic_output() -> None:
    cfg = LayoutConfig(container_width=500, container_height=260, color_scheme="gradient")
    words = [WordDatum(f"w{i}", (i * 7) % 11, "positive" if i % 3 else None) for i in range(40)]
    a = layout(words, cfg, RecordingMetrics())
    b = layout(words, cfg, RecordingMetrics())
    assert a == b
    assert len(a) > 0


def test_font_never_increases_within_a_word() -> None:
    cfg = LayoutConfig(container_width=260, container_height=180)
    rec = RecordingMetrics()
    layout(_words(23, prefix="growth"), cfg, rec)
    per_word: dict[str, list[float]] = defaultdict(list)
    for text, size in rec.calls:
        per_word[text].append(size)
    assert per_word
    for sizes in per_word.values():
        assert all(b <= a for a, b in zip(sizes, sizes[1:]))


def test_higher_value_measured_first() -> None:
    rec = RecordingMetrics()
    layout([WordDatum("low", 1), WordDatum("high", 9)], LayoutConfig(), rec)
    assert rec.calls[0][0] == "high"
    first_low = next(i for i, (t, _) in enumerate(rec.calls) if t == "low")
    last_high = max(i for i, (t, _) in enumerate(rec.calls) if t == "high")
    assert last_high < first_low


def test_semantic_colors_follow_sentiment() -> None:
    words = [WordDatum("good", 3, "positive"), WordDatum("bad", 2, "negative"), WordDatum("meh", 1)]
    out = layout(words, LayoutConfig())
    colors = {p.text: p.color for p in out}
    assert colors == {"good": "#52c41a", "bad": "#ff4d4f", "meh": "#1890ff"}


def test_empty_inputs_return_empty() -> None:
    assert layout([], LayoutConfig()) == []
    assert layout([WordDatum("a", 1)], LayoutConfig(container_width=0)) == []
    assert layout([WordDatum("a", 1)], LayoutConfig(container_height=-10)) == []
    summary = run_layout([WordDatum("a", 1)], LayoutConfig(container_width=0))
    assert summary.placed_count == 0 and summary.n_words == 1


def test_negative_values_and_blank_text_do_not_crash() -> None:
    words = [WordDatum("neg", -5), WordDatum("", 100), WordDatum("pos", 3)]
    summary = run_layout(words, LayoutConfig())
    assert [p.text for p in summary.placements] == ["pos", "neg"]
    assert [n.reason for n in summary.notices] == ["invalid_text"]
    received: list[PlacementNotice] = []
    assert [p.text for p in layout(words, LayoutConfig(), on_notice=received.append)] == ["pos", "neg"]
    assert [(n.text, n.reason) for n in received] == [("", "invalid_text")]


def test_broken_oracle_degrades_to_heuristic() -> None:
    def broken(text: str, font_px: float) -> Measurement:
        raise OSError("font subsystem unavailable")

    cfg = LayoutConfig(container_width=200, container_height=200)
    out = layout([WordDatum("abc", 1)], cfg, broken)
    assert len(out) == 1
    assert out[0].width == pytest.approx(3 * out[0].font_size_px * 0.6)


def test_zero_spiral_budget_uses_grid() -> None:
    cfg = LayoutConfig(container_width=200, container_height=200, max_spiral_attempts=0, grid_step_px=0)
    out = layout([WordDatum("a", 1), WordDatum("b", 1)], cfg, fixed_metrics)
    assert [p.strategy for p in out] == ["grid", "grid"]
    assert (out[0].x, out[0].y) == (15.0, 15.0)
    assert all(p.padding_px == 6.0 for p in out)
    assert validate_layout(out, cfg) == []


def test_summary_counts() -> None:
    summary = run_layout(_words(8), LayoutConfig(), fixed_metrics)
    assert summary.n_words == 8
    assert summary.n_selected == 8
    assert summary.placed_count == summary.spiral_count + summary.grid_count
    assert summary.placed_count + len(summary.notices) == 8


def test_word_wider_than_canvas_stays_inside_margins() -> None:
    cfg = LayoutConfig(container_width=120, container_height=100)
    out = layout([WordDatum("abcdefghijklmno", 1)], cfg)
    assert len(out) == 1
    assert out[0].strategy == "spiral"
    assert out[0].font_size_px < 12 * (1 - 1 / 120) * 1.05
    assert validate_layout(out, cfg) == []


def test_word_wider_than_canvas_falls_back_to_grid() -> None:
    cfg = LayoutConfig(container_width=120, container_height=100, font_shrink_every=0)
    out = layout([WordDatum("abcdefghijklmno", 1)], cfg)
    assert [p.strategy for p in out] == ["grid"]
    assert (out[0].x, out[0].y) == (15.0, 15.0)
    assert out[0].font_size_px == 8.0
    assert validate_layout(out, cfg) == []
