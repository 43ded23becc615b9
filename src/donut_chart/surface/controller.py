"""
Surface Controller
==================

Stateful shell around the ring chart.

The controller owns the current category list and the cached geometry,
and is driven by plain method calls from a host event loop:

    set_data / set_stroke_width  -> invalidate geometry, request layout
    on_resize                    -> rebuild geometry for the new size
    on_draw                      -> paint cached paths
    on_pointer_event / on_tap_up -> hit test, fire selection callback
    save_state / restore_state   -> {categories, stroke_width} snapshot

States:
    UNINITIALIZED: No surface size known yet, nothing to paint
    RESTORING:     Saved state applied before the first size arrives
    SIZED:         A size is known; geometry is valid or rebuilt lazily

Cache Swap:
    A rebuild constructs a complete ChartGeometry before assigning it, so
    readers only ever see the old cache or the new one. The selection
    callback fires after hit testing is finished and may safely call
    back into set_data.
"""

import logging
import math
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from donut_chart.aggregation import aggregate
from donut_chart.config import settings
from donut_chart.geometry import build_geometry, locate
from donut_chart.models.chart import Category, RawEntry, RGBColor, SavedState
from donut_chart.models.geometry import ChartGeometry, Point
from donut_chart.models.input import PointerEvent
from donut_chart.rendering.canvas import Canvas
from donut_chart.surface.gestures import TapDetector


logger = logging.getLogger(__name__)


CategoryCallback = Callable[[Category], None]


class SurfaceState(str, Enum):
    """Lifecycle states of the chart surface."""

    UNINITIALIZED = "UNINITIALIZED"
    RESTORING = "RESTORING"
    SIZED = "SIZED"


class ChartSurface:
    """
    Ring chart widget controller.

    Attributes:
        state: Current lifecycle state
        categories: Current ordered categories (read-only view)
        stroke_width: Current ring thickness
        geometry: Cached geometry, or None before the first build
    """

    def __init__(
        self,
        stroke_width: Optional[float] = None,
        on_invalidate: Optional[Callable[[], None]] = None,
        arc_step: Optional[float] = None,
        neutral_color: Optional[RGBColor] = None,
        touch_slop: Optional[float] = None,
        tap_timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the controller. Omitted arguments come from settings.

        Args:
            stroke_width: Ring thickness in pixels
            on_invalidate: Host hook asking for a layout/redraw pass
            arc_step: Arc sampling step in degrees
            neutral_color: Fill for paths without a backing category
            touch_slop: Max pointer travel for a tap (pixels)
            tap_timeout: Max tap duration (seconds)
        """
        self._stroke_width = _checked_stroke_width(
            settings.chart.stroke_width if stroke_width is None else stroke_width
        )
        self._arc_step = settings.chart.arc_step_degrees if arc_step is None else arc_step
        self._neutral_color = (
            RGBColor.from_list(settings.chart.neutral_color)
            if neutral_color is None
            else neutral_color
        )
        self._on_invalidate = on_invalidate
        self._tap_detector = TapDetector(
            touch_slop=settings.interaction.touch_slop_px if touch_slop is None else touch_slop,
            tap_timeout=settings.interaction.tap_timeout_sec if tap_timeout is None else tap_timeout,
        )

        self._state = SurfaceState.UNINITIALIZED
        self._categories: Tuple[Category, ...] = ()
        self._size: Optional[Tuple[float, float]] = None
        self._geometry: Optional[ChartGeometry] = None
        self._dirty = False
        self._on_category_selected: Optional[CategoryCallback] = None

        logger.info(
            f"ChartSurface initialized: stroke_width={self._stroke_width}, "
            f"arc_step={self._arc_step}°"
        )

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SurfaceState:
        return self._state

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    @property
    def size(self) -> Optional[Tuple[float, float]]:
        return self._size

    @property
    def geometry(self) -> Optional[ChartGeometry]:
        return self._geometry

    # -------------------------------------------------------------------------
    # Data and style
    # -------------------------------------------------------------------------

    def set_data(self, entries: Sequence[RawEntry]) -> None:
        """
        Replace the data set.

        Args:
            entries: Raw labeled amounts; aggregated into categories
        """
        entries = list(entries)
        self._categories = tuple(aggregate(entries))
        logger.info(f"Data set: {len(entries)} entries -> {len(self._categories)} categories")
        self._invalidate()

    def set_stroke_width(self, value: float) -> None:
        """
        Replace the ring thickness.

        Raises:
            ValueError: If value is not finite or not positive
        """
        self._stroke_width = _checked_stroke_width(value)
        self._invalidate()

    def set_on_category_selected(self, callback: Optional[CategoryCallback]) -> None:
        """Register the selection callback; replaces any previous one. None clears."""
        self._on_category_selected = callback

    # -------------------------------------------------------------------------
    # Host events
    # -------------------------------------------------------------------------

    def on_resize(self, width: float, height: float) -> None:
        """
        Handle a surface size change.

        Raises:
            ValueError: If width or height is negative or not finite
        """
        if not (math.isfinite(width) and math.isfinite(height)) or width < 0 or height < 0:
            raise ValueError(f"surface size must be non-negative, got {width}x{height}")

        if self._state == SurfaceState.RESTORING:
            logger.info("Restored state received its first surface size")

        self._size = (width, height)
        self._state = SurfaceState.SIZED
        self._rebuild()

    def on_draw(self, canvas: Canvas) -> int:
        """
        Paint the cached ring onto ``canvas``.

        Returns:
            Number of paths painted (0 while no size is known)
        """
        geometry = self._current_geometry()
        if geometry is None:
            logger.debug(f"Draw skipped in state {self._state.value}")
            return 0

        for path in geometry.paths:
            canvas.draw_path(path, self._color_for(path.category_index))

        return len(geometry.paths)

    def on_pointer_event(self, event: PointerEvent) -> Optional[Category]:
        """
        Feed a raw pointer event; a completed tap is hit tested.

        Returns:
            The selected category when the event completes a tap on one
        """
        tap = self._tap_detector.feed(event)
        if tap is None:
            return None
        return self.on_tap_up(tap)

    def on_tap_up(self, point: Point) -> Optional[Category]:
        """
        Resolve a single tap to a category and notify the callback.

        Returns:
            The category under ``point``, or None for a miss
        """
        geometry = self._current_geometry()
        if geometry is None:
            return None

        category = locate(
            point,
            geometry.width,
            geometry.height,
            geometry.stroke_width,
            geometry.sectors,
            self._categories,
        )

        if category is not None and self._on_category_selected is not None:
            self._on_category_selected(category)

        return category

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save_state(self) -> SavedState:
        """Snapshot categories and stroke width. Geometry is not included."""
        return SavedState(categories=list(self._categories), stroke_width=self._stroke_width)

    def restore_state(self, state: SavedState) -> None:
        """
        Apply a snapshot produced by :meth:`save_state`.

        Geometry is rebuilt on the next resize, or lazily on the next
        draw/tap if a size is already known.
        """
        self._categories = tuple(state.categories)
        self._stroke_width = _checked_stroke_width(state.stroke_width)
        self._tap_detector.reset()

        if self._size is None:
            self._state = SurfaceState.RESTORING
            self._geometry = None

        logger.info(
            f"State restored: {len(self._categories)} categories, "
            f"stroke_width={self._stroke_width}, state={self._state.value}"
        )
        self._invalidate()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _invalidate(self) -> None:
        self._dirty = True
        if self._on_invalidate is not None:
            self._on_invalidate()

    def _current_geometry(self) -> Optional[ChartGeometry]:
        if self._dirty and self._size is not None:
            self._rebuild()
        if self._state != SurfaceState.SIZED:
            return None
        return self._geometry

    def _rebuild(self) -> None:
        width, height = self._size
        geometry = build_geometry(
            self._categories,
            width,
            height,
            self._stroke_width,
            arc_step=self._arc_step,
        )
        self._geometry = geometry
        self._dirty = False

    def _color_for(self, index: Optional[int]) -> RGBColor:
        if index is None or index >= len(self._categories):
            return self._neutral_color
        return self._categories[index].color


def _checked_stroke_width(value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"stroke_width must be finite and positive, got {value}")
    return float(value)
