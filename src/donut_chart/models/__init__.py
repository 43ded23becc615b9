"""
Data Models
===========

Value objects for the ring chart engine.

This module re-exports all data models for convenient access.

Models:
    Chart:
        - RawEntry: Labeled amount supplied by the host
        - RGBColor: Category fill color
        - Category: Aggregated slice (name, amount, color)
        - SavedState: Persistable {categories, stroke_width} snapshot

    Geometry:
        - Point, Bounds: Geometric primitives
        - Sector: Angular index entry used by hit testing
        - ArcPath: Filled ring segment for painting
        - ChartGeometry: Cached geometry for one surface size

    Input:
        - PointerAction, PointerEvent: Host pointer events
"""

from donut_chart.models.chart import (
    NEUTRAL_COLOR,
    Category,
    RawEntry,
    RGBColor,
    SavedState,
)
from donut_chart.models.geometry import ArcPath, Bounds, ChartGeometry, Point, Sector
from donut_chart.models.input import PointerAction, PointerEvent

__all__ = [
    # Chart
    "RawEntry",
    "RGBColor",
    "NEUTRAL_COLOR",
    "Category",
    "SavedState",
    # Geometry
    "Point",
    "Bounds",
    "Sector",
    "ArcPath",
    "ChartGeometry",
    # Input
    "PointerAction",
    "PointerEvent",
]
