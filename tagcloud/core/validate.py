# tagcloud/core/validate.py
"""
Audit a finished layout: every placement inside the margin box, no two padded
boxes intersecting. Returns human-readable violations (empty list = valid).
See: docs/ALGORITHM.md (invariants).
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import Polygon, box

from tagcloud.core.types import LayoutConfig, Placement

CONTAINMENT_TOLERANCE_PX: float = 1e-6


def placement_box(p: Placement, padding: float = 0.0) -> Polygon:
    """
    Axis-aligned box of a placement grown by padding / 2 on every side.
    Two such boxes intersect exactly when the padded collision test fires.
    """
    half = padding / 2.0
    return box(p.x - half, p.y - half, p.x + p.width + half, p.y + p.height + half)


def margin_box(config: LayoutConfig) -> Polygon:
    m = config.boundary_margin_px
    return box(m, m, config.container_width - m, config.container_height - m)


def check_boundary(
    placements: Sequence[Placement],
    config: LayoutConfig,
    tolerance_px: float = CONTAINMENT_TOLERANCE_PX,
) -> list[str]:
    """Placements not covered by the margin box (with tolerance)."""
    area = margin_box(config).buffer(tolerance_px, join_style=2)
    out: list[str] = []
    for p in placements:
        if not area.covers(placement_box(p)):
            out.append(f"boundary: {p.text!r} at ({p.x:.2f}, {p.y:.2f}) size {p.width:.2f}x{p.height:.2f}")
    return out


def check_overlap(placements: Sequence[Placement], tolerance_px: float = CONTAINMENT_TOLERANCE_PX) -> list[str]:
    """
    Pairs whose padded boxes intersect. Each pair uses the padding enforced when the
    later placement was made (grid placements use a reduced padding).
    """
    out: list[str] = []
    for j, later in enumerate(placements):
        pad = max(0.0, later.padding_px - tolerance_px)
        later_box = placement_box(later, pad)
        for earlier in placements[:j]:
            if later_box.intersects(placement_box(earlier, pad)):
                out.append(f"overlap: {earlier.text!r} / {later.text!r} (padding {later.padding_px:g}px)")
    return out


def validate_layout(placements: Sequence[Placement], config: LayoutConfig) -> list[str]:
    """All boundary and overlap violations for a layout."""
    return check_boundary(placements, config) + check_overlap(placements)
