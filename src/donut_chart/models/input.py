"""
Pointer Input Models
====================

Pointer events delivered by the host event loop.

Only the subset needed for tap recognition is modelled: a pointer goes
DOWN, may MOVE, and finally goes UP or is CANCELled by the host.
"""

from dataclasses import dataclass
from enum import Enum


class PointerAction(str, Enum):
    """Pointer event kinds."""

    DOWN = "DOWN"
    MOVE = "MOVE"
    UP = "UP"
    CANCEL = "CANCEL"


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """
    Single pointer event in surface coordinates.

    Attributes:
        action: Event kind
        x: Horizontal position (pixels)
        y: Vertical position (pixels)
        timestamp: Monotonic event time in seconds
    """

    action: PointerAction
    x: float
    y: float
    timestamp: float
