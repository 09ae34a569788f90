# tagcloud/core/geometry.py
"""
Geometry helpers: padded rectangle collision, boundary clamping, spiral offset
table, grid cell enumeration. Rectangles are (x, y, width, height), top-left origin.
See: docs/ALGORITHM.md S3-S4.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from tagcloud.core.config import (
    SPIRAL_ANGLE_STEP_RAD,
    SPIRAL_RADIUS_INSET_PX,
    SPIRAL_RADIUS_PER_RAD,
)

Rect = tuple[float, float, float, float]


def is_colliding(r1: Rect, r2: Rect, padding: float) -> bool:
    """
    Separating-axis test with padding. Rectangles whose gap on some axis is
    strictly greater than padding do not collide; touching at exactly padding does.
    """
    x1, y1, w1, h1 = r1
    x2, y2, w2, h2 = r2
    return not (
        x1 + w1 + padding < x2
        or x2 + w2 + padding < x1
        or y1 + h1 + padding < y2
        or y2 + h2 + padding < y1
    )


def collides_with_any(rect: Rect, others: Iterable[Rect], padding: float) -> bool:
    return any(is_colliding(rect, o, padding) for o in others)


def clamp_top_left(
    x: float,
    y: float,
    width: float,
    height: float,
    container: tuple[float, float],
    margin: float,
) -> tuple[float, float]:
    """
    Clamp top-left into [margin, container - size - margin] per axis.
    If the box is larger than the usable area the lower bound wins.
    """
    cw, ch = container
    bx = max(margin, min(x, cw - width - margin))
    by = max(margin, min(y, ch - height - margin))
    return bx, by


def fits_usable_area(width: float, height: float, container: tuple[float, float], margin: float) -> bool:
    """True when a box of this size fits inside the margins at all."""
    cw, ch = container
    return width <= cw - 2.0 * margin and height <= ch - 2.0 * margin


def spiral_max_radius(container_width: float, container_height: float) -> float:
    """min(width, height) / 2 - inset, floored at 0."""
    return max(0.0, min(container_width, container_height) / 2.0 - SPIRAL_RADIUS_INSET_PX)


def spiral_offsets(n_attempts: int, max_radius: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Center offsets (dx, dy) for attempts 0..n-1 of the archimedean spiral:
    angle = k * step, radius = min(angle * growth, max_radius).
    """
    if n_attempts <= 0:
        return np.zeros(0), np.zeros(0)
    angles = np.arange(n_attempts, dtype=float) * SPIRAL_ANGLE_STEP_RAD
    radii = np.minimum(angles * SPIRAL_RADIUS_PER_RAD, max_radius)
    return radii * np.cos(angles), radii * np.sin(angles)


def grid_positions(margin: float, container_dim: float, footprint: float, step: float) -> np.ndarray:
    """Positions margin, margin + step, ... strictly below container_dim - footprint - margin."""
    stop = container_dim - footprint - margin
    if step <= 0 or stop <= margin:
        return np.zeros(0)
    return np.arange(margin, stop, step, dtype=float)
