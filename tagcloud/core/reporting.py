# tagcloud/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json (exact schema), run_metadata.json.
See: docs/LAYOUT_SCHEMA.md.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from tagcloud.core.config import (
    AREA_PER_WORD_PX2,
    FONT_SHRINK_FLOOR_PX,
    GRID_MIN_FONT_PX,
    GRID_PADDING_PX,
    LAYOUT_SCHEMA_VERSION,
    REPORTS_DIR,
    SPIRAL_ANGLE_STEP_RAD,
    SPIRAL_RADIUS_INSET_PX,
    SPIRAL_RADIUS_PER_RAD,
    TOP_WORDS_DEFAULT,
)
from tagcloud.core.error_codes import user_message
from tagcloud.core.layout import sanitize_config
from tagcloud.core.tags import GrowthTagWord, split_by_sentiment, top_words
from tagcloud.core.types import LayoutConfig, LayoutSummary, Placement, PlacementNotice
from tagcloud.core.validate import validate_layout


def placement_to_dict(p: Placement) -> dict:
    """One entry of layout.json placements[]. See: docs/LAYOUT_SCHEMA.md."""
    return {
        "word": {
            "text": p.word.text,
            "value": p.word.value,
            "sentiment": p.word.sentiment,
        },
        "x": p.x,
        "y": p.y,
        "width": p.width,
        "height": p.height,
        "font_size_px": p.font_size_px,
        "color": p.color,
        "rotation_deg": p.rotation_deg,
        "strategy": p.strategy,
        "attempts": p.attempts,
        "padding_px": p.padding_px,
    }


def notice_to_dict(n: PlacementNotice) -> dict:
    return {
        "text": n.text,
        "reason": n.reason,
        "value": n.value,
        "message": user_message(n.reason),
    }


def growth_tag_to_dict(t: GrowthTagWord) -> dict:
    return {
        "text": t.word.text,
        "value": t.word.value,
        "sentiment": t.word.sentiment,
        "frequency": t.frequency,
    }


def growth_to_dict(tags: list[GrowthTagWord], n: int = TOP_WORDS_DEFAULT) -> dict:
    """Top-n growth tags overall and per sentiment, for layout.json growth."""
    positive, negative = split_by_sentiment(tags)
    return {
        "top": [growth_tag_to_dict(t) for t in top_words(tags, n)],
        "positive": [growth_tag_to_dict(t) for t in top_words(positive, n)],
        "negative": [growth_tag_to_dict(t) for t in top_words(negative, n)],
    }


def layout_to_dict(
    summary: LayoutSummary,
    config: LayoutConfig,
    growth: list[GrowthTagWord] | None = None,
) -> dict:
    """
    Exact structure for layout.json. summary.violations holds the validate_layout
    audit (empty for a valid layout). growth is present only for growth-tag input.
    """
    data = {
        "schema_version": LAYOUT_SCHEMA_VERSION,
        "container": {
            "width": config.container_width,
            "height": config.container_height,
        },
        "config": asdict(config),
        "placements": [placement_to_dict(p) for p in summary.placements],
        "notices": [notice_to_dict(n) for n in summary.notices],
        "summary": {
            "n_words": summary.n_words,
            "n_selected": summary.n_selected,
            "placed_count": summary.placed_count,
            "spiral_count": summary.spiral_count,
            "grid_count": summary.grid_count,
            "unplaceable_count": len(summary.unplaceable),
            "violations": validate_layout(summary.placements, sanitize_config(config)),
        },
    }
    if growth is not None:
        data["growth"] = growth_to_dict(growth)
    return data


def run_metadata_dict(
    run_name: str,
    words_source: str,
    metrics_source: str,
    config: LayoutConfig,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "words_source": words_source,
        "metrics_source": metrics_source,
        "layout_config": asdict(config),
        "constants": {
            "AREA_PER_WORD_PX2": AREA_PER_WORD_PX2,
            "SPIRAL_ANGLE_STEP_RAD": SPIRAL_ANGLE_STEP_RAD,
            "SPIRAL_RADIUS_PER_RAD": SPIRAL_RADIUS_PER_RAD,
            "SPIRAL_RADIUS_INSET_PX": SPIRAL_RADIUS_INSET_PX,
            "FONT_SHRINK_FLOOR_PX": FONT_SHRINK_FLOOR_PX,
            "GRID_MIN_FONT_PX": GRID_MIN_FONT_PX,
            "GRID_PADDING_PX": GRID_PADDING_PX,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(
    report_dir: Path,
    summary: LayoutSummary,
    config: LayoutConfig,
    growth: list[GrowthTagWord] | None = None,
) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(summary, config, growth)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    words_source: str,
    metrics_source: str,
    config: LayoutConfig,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, words_source, metrics_source, config)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
