"""
Tap Detection
=============

Recognizes single taps from raw pointer events.

A tap is a DOWN followed by an UP that:
    - stays within ``touch_slop`` pixels of the DOWN position, and
    - completes within ``tap_timeout`` seconds.

Any MOVE beyond the slop, a CANCEL, or a late UP abandons the tap.
The detector tracks a single pointer; a second DOWN restarts tracking.
"""

import logging
import math
from typing import Optional

from donut_chart.models.geometry import Point
from donut_chart.models.input import PointerAction, PointerEvent


logger = logging.getLogger(__name__)


class TapDetector:
    """
    Single-pointer tap recognizer.

    Attributes:
        touch_slop: Max travel in pixels for a tap
        tap_timeout: Max DOWN→UP duration in seconds
    """

    def __init__(self, touch_slop: float = 8.0, tap_timeout: float = 0.5) -> None:
        if touch_slop < 0:
            raise ValueError("touch_slop must be non-negative")
        if tap_timeout <= 0:
            raise ValueError("tap_timeout must be positive")

        self.touch_slop = touch_slop
        self.tap_timeout = tap_timeout
        self._down: Optional[PointerEvent] = None

    @property
    def tracking(self) -> bool:
        """Whether a candidate tap is in progress."""
        return self._down is not None

    def feed(self, event: PointerEvent) -> Optional[Point]:
        """
        Process one pointer event.

        Args:
            event: Next event from the host

        Returns:
            The UP position when the event completes a tap, else None
        """
        if event.action == PointerAction.DOWN:
            self._down = event
            return None

        down = self._down
        if down is None:
            return None

        if event.action == PointerAction.CANCEL:
            self._down = None
            return None

        if self._moved_too_far(down, event):
            logger.debug("Tap abandoned: pointer moved beyond slop")
            self._down = None
            return None

        if event.action == PointerAction.UP:
            self._down = None
            if event.timestamp - down.timestamp > self.tap_timeout:
                logger.debug("Tap abandoned: pointer held past timeout")
                return None
            return Point(x=event.x, y=event.y)

        return None

    def reset(self) -> None:
        self._down = None

    def _moved_too_far(self, down: PointerEvent, event: PointerEvent) -> bool:
        return math.hypot(event.x - down.x, event.y - down.y) > self.touch_slop
