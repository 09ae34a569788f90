# tagcloud/core/runner.py
"""
CLI entrypoint: load words (or growth-tag states), run the layout, write
layout.json and run_metadata.json under reports/<run_name>/.
See: docs/LAYOUT_SCHEMA.md.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from tagcloud.core.config import DEFAULT_FONT_FAMILY, LOG_LEVEL, REPORTS_DIR
from tagcloud.core.io import load_growth_states, load_layout_config, load_words
from tagcloud.core.layout import run_layout
from tagcloud.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from tagcloud.core.tags import words_from_growth_states
from tagcloud.core.text_metrics import pillow_metrics
from tagcloud.core.types import LayoutConfig


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Deterministic word-cloud layout.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--words", type=str, default=None, help="Words file (.json or .csv)")
    src.add_argument("--growth-states", type=str, default=None, dest="growth_states", help="Growth tag states JSON")
    p.add_argument("--config", type=str, default=None, help="Layout options JSON (snake_case or camelCase keys)")
    p.add_argument("--width", type=int, default=None, help="Container width (px)")
    p.add_argument("--height", type=int, default=None, help="Container height (px)")
    p.add_argument("--max-words", type=int, default=None, dest="max_words", help="Max words rendered")
    p.add_argument(
        "--color-scheme", type=str, default=None, dest="color_scheme",
        choices=("semantic", "gradient", "default"), help="Color scheme",
    )
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Font for Pillow metrics")
    p.add_argument("--heuristic-metrics", action="store_true", dest="heuristic_metrics", help="Skip Pillow; estimate text size")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace, repo_root: Path) -> LayoutConfig:
    """Config file first, then explicit CLI flags on top."""
    config = load_layout_config(args.config, repo_root=repo_root) if args.config else LayoutConfig()
    overrides = {
        "container_width": args.width,
        "container_height": args.height,
        "max_words": args.max_words,
        "color_scheme": args.color_scheme,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    growth = None
    if args.words:
        words = load_words(args.words, repo_root=repo_root)
        words_source = args.words
    else:
        states = load_growth_states(args.growth_states, repo_root=repo_root)
        growth = words_from_growth_states(states)
        words = [t.word for t in growth]
        words_source = args.growth_states

    config = _build_config(args, repo_root)
    if args.heuristic_metrics:
        metrics = None
        metrics_source = "heuristic"
    else:
        metrics = pillow_metrics(args.font_family)
        metrics_source = f"pillow:{args.font_family}"

    summary = run_layout(words, config, metrics)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    layout_path = write_layout_json(report_dir, summary, config, growth)
    meta_path = write_run_metadata_json(report_dir, args.run_name, words_source, metrics_source, config)

    for p in (layout_path, meta_path):
        print(p)
    print(f"Placed: {summary.placed_count} / {summary.n_words}")


if __name__ == "__main__":
    main()
