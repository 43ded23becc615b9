"""
Geometry Builder
================

Derives draw-ready ring geometry from an ordered category list.

This module handles:
    - Concentric inner/outer bounding boxes for the current surface size
    - One filled ArcPath per category
    - One Sector per category, in the 12-o'clock clockwise convention

Layout:
    outer_r = min(width, height) / 2
    inner_r = outer_r - stroke_width
    sweep_i = amount_i / total * 360

    Slices are laid out consecutively starting at -90° (12 o'clock in the
    drawing convention) and proceed clockwise. Each sector stores
    start = drawing_offset + 90, which composes directly with the angle
    computed by the hit tester.

Degenerate Case:
    No categories, or a total of zero, produces exactly one full-circle
    sector with no backing category so the ring still renders in the
    neutral color.

The builder is pure: it owns no state and the result depends only on
its arguments.

Example:
    from donut_chart.geometry import build_geometry

    geometry = build_geometry(categories, width=400, height=300, stroke_width=60)
    for path, sector in zip(geometry.paths, geometry.sectors):
        ...
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from donut_chart.models.chart import Category
from donut_chart.models.geometry import ArcPath, Bounds, ChartGeometry, Sector


logger = logging.getLogger(__name__)

# Drawing angle of 12 o'clock (0° is the positive x-axis, clockwise on screen)
START_OFFSET_DEGREES = -90.0

DEFAULT_ARC_STEP_DEGREES = 2.0


def build_geometry(
    categories: Sequence[Category],
    width: float,
    height: float,
    stroke_width: float,
    arc_step: float = DEFAULT_ARC_STEP_DEGREES,
) -> ChartGeometry:
    """
    Build ring geometry for the given categories and surface size.

    Args:
        categories: Ordered categories (as produced by the aggregator)
        width: Surface width in pixels
        height: Surface height in pixels
        stroke_width: Ring thickness in pixels
        arc_step: Angular sampling step used to flatten arcs

    Returns:
        ChartGeometry with bounds, paths and sectors

    Raises:
        ValueError: If the size or stroke width is negative or not finite
    """
    _validate(width, height, stroke_width, arc_step)

    center_x = width / 2
    center_y = height / 2
    outer_r = min(width, height) / 2
    # An oversized stroke collapses the hole and draws a full pie
    inner_r = max(0.0, outer_r - stroke_width)

    inner_bounds = Bounds.around(center_x, center_y, inner_r)
    outer_bounds = Bounds.around(center_x, center_y, outer_r)

    amounts = np.array([c.amount for c in categories], dtype=float)
    total = float(amounts.sum()) if len(amounts) else 0.0

    if total > 0:
        ends = np.cumsum(amounts / total * 360.0)
        # Pin the last non-empty slice to 360 so rounding leaves no gap
        ends[np.flatnonzero(amounts)[-1]:] = 360.0
        starts = np.concatenate(([0.0], ends[:-1]))
        sweeps = ends - starts
        indices: List = list(range(len(categories)))
    else:
        sweeps = np.array([360.0])
        starts = np.array([0.0])
        indices = [None]

    paths = []
    sectors = []
    for start, sweep, index in zip(starts, sweeps, indices):
        start = float(start)
        sweep = float(sweep)
        offset = start + START_OFFSET_DEGREES

        paths.append(
            ArcPath(
                vertices=_ring_segment(
                    center_x, center_y, inner_r, outer_r, offset, sweep, arc_step
                ),
                offset=offset,
                sweep=sweep,
                category_index=index,
            )
        )
        sectors.append(
            Sector(start_angle=start % 360.0, sweep_angle=sweep, category_index=index)
        )

    logger.debug(
        f"Built geometry: size={width}x{height}, stroke={stroke_width}, "
        f"sectors={len(sectors)}, total={total:.2f}"
    )

    return ChartGeometry(
        width=width,
        height=height,
        stroke_width=stroke_width,
        inner_bounds=inner_bounds,
        outer_bounds=outer_bounds,
        paths=tuple(paths),
        sectors=tuple(sectors),
    )


def _validate(width: float, height: float, stroke_width: float, arc_step: float) -> None:
    for name, value in (("width", width), ("height", height), ("stroke_width", stroke_width)):
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be finite and non-negative, got {value}")
    if not math.isfinite(arc_step) or arc_step <= 0:
        raise ValueError(f"arc_step must be positive, got {arc_step}")


def _arc(
    center_x: float,
    center_y: float,
    radius: float,
    start: float,
    sweep: float,
    step: float,
) -> np.ndarray:
    """Sample an arc as (N, 2) points; a negative sweep runs counter-clockwise."""
    count = max(2, int(math.ceil(abs(sweep) / step)) + 1)
    angles = np.radians(np.linspace(start, start + sweep, count))
    return np.column_stack(
        (center_x + radius * np.cos(angles), center_y + radius * np.sin(angles))
    )


def _ring_segment(
    center_x: float,
    center_y: float,
    inner_r: float,
    outer_r: float,
    offset: float,
    sweep: float,
    step: float,
) -> np.ndarray:
    outer = _arc(center_x, center_y, outer_r, offset, sweep, step)
    inner = _arc(center_x, center_y, inner_r, offset + sweep, -sweep, step)

    vertices = np.vstack((outer, inner))
    vertices.setflags(write=False)
    return vertices
