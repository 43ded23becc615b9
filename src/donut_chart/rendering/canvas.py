"""
Canvas
======

Paint targets for the ring chart.

This module provides the Canvas protocol and two implementations:
    - RasterCanvas: numpy image filled with OpenCV (production/demo output)
    - RecordingCanvas: records draw calls, deterministic for testing

Design Rules:
    - The surface controller only ever calls ``draw_path``
    - Canvases do not know about categories, sectors or hit testing
"""

import logging
from typing import List, Protocol, Tuple

import cv2
import numpy as np

from donut_chart.models.chart import RGBColor
from donut_chart.models.geometry import ArcPath


logger = logging.getLogger(__name__)


class Canvas(Protocol):
    """
    Protocol for paint targets.

    Implemented by:
        - RasterCanvas (OpenCV raster output)
        - RecordingCanvas (tests)
    """

    def draw_path(self, path: ArcPath, color: RGBColor) -> None:
        """
        Fill a closed path with a solid color.

        Args:
            path: Ring segment to fill
            color: Fill color
        """
        ...


class RasterCanvas:
    """
    In-memory BGR image canvas.

    Paths are filled with ``cv2.fillPoly`` using anti-aliased edges.
    Vertices are rounded to the pixel grid.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        image: (height, width, 3) uint8 BGR array
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: RGBColor = RGBColor(r=255, g=255, b=255),
    ) -> None:
        """
        Initialize a blank canvas.

        Args:
            width: Image width in pixels (>= 1)
            height: Image height in pixels (>= 1)
            background: Fill color of the blank image
        """
        if width < 1 or height < 1:
            raise ValueError("canvas width and height must be >= 1")

        self.width = width
        self.height = height
        self.background = background
        self.image = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        self.image[:, :] = self.background.to_bgr()

    def draw_path(self, path: ArcPath, color: RGBColor) -> None:
        # An empty slice encloses no area; fillPoly would still stroke its edge
        if path.sweep == 0:
            return
        points = np.round(path.vertices).astype(np.int32)
        cv2.fillPoly(self.image, [points], color.to_bgr(), lineType=cv2.LINE_AA)

    def pixel(self, x: int, y: int) -> RGBColor:
        """Color at (x, y), in RGB."""
        b, g, r = self.image[y, x]
        return RGBColor(r=int(r), g=int(g), b=int(b))

    def to_png(self) -> bytes:
        """Encode the image as PNG bytes."""
        ok, buffer = cv2.imencode(".png", self.image)
        if not ok:
            raise RuntimeError("cv2.imencode failed to encode PNG")
        return buffer.tobytes()


class RecordingCanvas:
    """
    Canvas that records every draw call.

    Attributes:
        calls: (path, color) pairs in paint order
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[ArcPath, RGBColor]] = []

    def draw_path(self, path: ArcPath, color: RGBColor) -> None:
        self.calls.append((path, color))

    @property
    def colors(self) -> List[RGBColor]:
        return [color for _, color in self.calls]
