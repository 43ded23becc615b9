"""
Geometry Models
===============

This module defines the derived geometry of the ring chart.

Conventions:
    - All coordinates are in SURFACE SPACE (pixels), origin at top-left,
      X increases rightward, Y increases downward.
    - Drawing angles follow the screen convention: 0° on the positive
      x-axis, increasing clockwise (because Y points down).
    - Sector angles are normalized so that 0° is at 12 o'clock and
      angles increase clockwise. This is the convention used by hit
      testing.

Supported Geometries:
    - Point: 2D coordinate
    - Bounds: Square bounding box of a circle
    - Sector: Angular span assigned to one category
    - ArcPath: Filled ring segment, flattened to a polygon
    - ChartGeometry: Everything above for one surface size

Note:
    Every object here is immutable. A rebuild replaces the whole
    ChartGeometry; nothing is patched in place.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from pydantic import BaseModel, Field


class Point(BaseModel):
    """
    2D point in surface coordinates.

    Attributes:
        x: Horizontal coordinate (pixels)
        y: Vertical coordinate (pixels)
    """

    x: float = Field(
        ...,
        description="Horizontal coordinate (pixels from left)",
    )

    y: float = Field(
        ...,
        description="Vertical coordinate (pixels from top)",
    )


@dataclass(frozen=True, slots=True)
class Bounds:
    """Square bounding box of a circle centered on the surface."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def around(cls, center_x: float, center_y: float, radius: float) -> "Bounds":
        return cls(
            left=center_x - radius,
            top=center_y - radius,
            right=center_x + radius,
            bottom=center_y + radius,
        )

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def radius(self) -> float:
        return (self.right - self.left) / 2


@dataclass(frozen=True, slots=True)
class Sector:
    """
    Angular span assigned to one category.

    Attributes:
        start_angle: Degrees clockwise from 12 o'clock, in [0, 360)
        sweep_angle: Span in degrees, in [0, 360]
        category_index: Index into the category list, or None for the
            synthetic full-circle sector drawn when there is no data
    """

    start_angle: float
    sweep_angle: float
    category_index: Optional[int] = None

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep_angle / 2

    def contains(self, angle: float) -> bool:
        """Inclusive on both ends; adjacent sectors share a boundary."""
        return self.start_angle <= angle <= self.end_angle

    def __repr__(self) -> str:
        return (
            f"Sector(start={self.start_angle:.2f}, "
            f"sweep={self.sweep_angle:.2f}, "
            f"index={self.category_index})"
        )


@dataclass(frozen=True, slots=True, eq=False)
class ArcPath:
    """
    Filled ring segment between the outer and inner circle.

    The outer arc is traversed clockwise, then the inner arc
    counter-clockwise; the polygon is implicitly closed.

    Attributes:
        vertices: Read-only (N, 2) float array of polygon vertices
        offset: Drawing start angle (0° on +x axis, clockwise)
        sweep: Span in degrees
        category_index: Index into the category list, or None
    """

    vertices: np.ndarray
    offset: float
    sweep: float
    category_index: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"ArcPath(offset={self.offset:.2f}, sweep={self.sweep:.2f}, "
            f"vertices={len(self.vertices)}, index={self.category_index})"
        )


@dataclass(frozen=True, slots=True)
class ChartGeometry:
    """
    Draw-ready geometry for one (categories, size, stroke width) triple.

    paths[i] and sectors[i] describe the same slice of the ring.
    """

    width: float
    height: float
    stroke_width: float
    inner_bounds: Bounds
    outer_bounds: Bounds
    paths: Tuple[ArcPath, ...]
    sectors: Tuple[Sector, ...]

    @property
    def center(self) -> Tuple[float, float]:
        return self.outer_bounds.center_x, self.outer_bounds.center_y
