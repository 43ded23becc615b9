"""
Surface Module
==============

Event-driven widget shell for the ring chart.

Components:
    - ChartSurface: Owns categories + geometry cache, handles host events
    - SurfaceState: Lifecycle states of the surface
    - TapDetector: Single-tap recognition from raw pointer events
"""

from donut_chart.surface.controller import ChartSurface, SurfaceState
from donut_chart.surface.gestures import TapDetector

__all__ = ["ChartSurface", "SurfaceState", "TapDetector"]
