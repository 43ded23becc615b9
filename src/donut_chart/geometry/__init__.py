"""
Geometry Module
===============

Ring layout and hit testing.

This module provides:
    - build_geometry: Bounds, arc paths and angular sectors for a surface
    - locate: Map a surface point back to its category
"""

from donut_chart.geometry.builder import build_geometry
from donut_chart.geometry.hit_test import angle_at, locate, point_at, ring_radii

__all__ = [
    "build_geometry",
    "locate",
    "angle_at",
    "point_at",
    "ring_radii",
]
