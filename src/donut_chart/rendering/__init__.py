"""
Rendering Module
================

Paint targets for ring geometry.

Components:
    - Canvas: Protocol the surface controller paints onto
    - RasterCanvas: OpenCV-backed image canvas
    - RecordingCanvas: Draw-call recorder for tests
"""

from donut_chart.rendering.canvas import Canvas, RasterCanvas, RecordingCanvas

__all__ = ["Canvas", "RasterCanvas", "RecordingCanvas"]
