"""
donut_chart
===========

Segmented ring chart engine with tap-to-category hit testing.

This package aggregates labeled amounts into colored categories, lays
them out as slices of a ring, paints the ring onto a host canvas and
maps taps on the ring back to the category under the pointer.

Components:
    - aggregation: Raw entries -> ordered, colored categories
    - geometry: Ring layout (paths + sectors) and hit testing
    - rendering: Canvas protocol and OpenCV raster canvas
    - surface: Stateful controller driven by host events

Example:
    from donut_chart.models import RawEntry, Point
    from donut_chart.surface import ChartSurface

    surface = ChartSurface(stroke_width=60)
    surface.set_data([RawEntry(amount=100, category="Food")])
    surface.on_resize(400, 400)
    surface.set_on_category_selected(lambda c: print(c.name))
    surface.on_tap_up(Point(x=200, y=30))
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
