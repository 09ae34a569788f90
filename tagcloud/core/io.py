# tagcloud/core/io.py
"""
Load word lists, growth-tag states and layout options from files.
Words: JSON (list, or {"words": [...]}) or CSV with text,value[,sentiment] columns.
Options: JSON object with snake_case or camelCase keys.
See: docs/LAYOUT_SCHEMA.md (inputs).
"""

from __future__ import annotations

import csv
import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from tagcloud.core.tags import normalize_sentiment
from tagcloud.core.types import LayoutConfig, WordDatum

CONFIG_KEY_ALIASES: dict[str, str] = {
    "maxWords": "max_words",
    "containerWidth": "container_width",
    "containerHeight": "container_height",
    "width": "container_width",
    "height": "container_height",
    "colorScheme": "color_scheme",
    "minFontPx": "min_font_px",
    "maxFontPx": "max_font_px",
    "collisionPaddingPx": "collision_padding_px",
    "boundaryMarginPx": "boundary_margin_px",
    "maxSpiralAttempts": "max_spiral_attempts",
    "fontShrinkEvery": "font_shrink_every",
    "fontShrinkFactor": "font_shrink_factor",
    "gridStepPx": "grid_step_px",
}


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _read_text(path: str | Path, repo_root: Path | None, what: str) -> tuple[Path, str]:
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"{what} file not found: {resolved}")
    return resolved, resolved.read_text(encoding="utf-8")


def word_from_mapping(item: Mapping[str, Any]) -> WordDatum:
    """Build a WordDatum from {"text", "value", "sentiment"|"type"}; value is kept raw."""
    text = item.get("text")
    if text is None:
        raise ValueError(f"Word entry has no 'text': {dict(item)!r}")
    value = item.get("value", 0)
    try:
        value = float(value)
    except (TypeError, ValueError):
        value = 0.0
    sentiment = item.get("sentiment", item.get("type"))
    return WordDatum(text=str(text), value=value, sentiment=normalize_sentiment(sentiment))


def parse_words_json(data: Any) -> list[WordDatum]:
    if isinstance(data, dict):
        data = data.get("words")
    if not isinstance(data, list):
        raise ValueError("Words JSON must be a list or an object with a 'words' list")
    return [word_from_mapping(item) for item in data]


def parse_words_csv(text: str) -> list[WordDatum]:
    reader = csv.DictReader(text.splitlines())
    if reader.fieldnames is None or "text" not in reader.fieldnames:
        raise ValueError("Words CSV needs a header with at least a 'text' column")
    return [word_from_mapping(row) for row in reader]


def load_words(path: str | Path, repo_root: Path | None = None) -> list[WordDatum]:
    """
    Read words from .json or .csv. Raises FileNotFoundError if missing,
    ValueError if the content has the wrong shape.
    """
    resolved, text = _read_text(path, repo_root, "Words")
    if resolved.suffix.lower() == ".csv":
        return parse_words_csv(text)
    return parse_words_json(json.loads(text))


def load_growth_states(path: str | Path, repo_root: Path | None = None) -> list[dict]:
    """Read growth states: a list, or an object with a 'states' list."""
    _, text = _read_text(path, repo_root, "Growth states")
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("states")
    if not isinstance(data, list):
        raise ValueError("Growth states JSON must be a list or an object with a 'states' list")
    return data


def config_from_dict(data: Mapping[str, Any], base: LayoutConfig | None = None) -> LayoutConfig:
    """Overlay known keys (snake_case or camelCase) on base; unknown keys raise ValueError."""
    known = {f.name for f in fields(LayoutConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = CONFIG_KEY_ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown layout option: {key!r}")
        kwargs[name] = value
    base = base or LayoutConfig()
    merged = {f.name: getattr(base, f.name) for f in fields(LayoutConfig)}
    merged.update(kwargs)
    return LayoutConfig(**merged)


def load_layout_config(path: str | Path, repo_root: Path | None = None) -> LayoutConfig:
    _, text = _read_text(path, repo_root, "Layout config")
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Layout config JSON must be an object")
    return config_from_dict(data)
