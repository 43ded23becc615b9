"""
Chart Data Models
=================

This module defines the value objects that flow between the host and the
ring chart engine.

Input Contract (from host):
    [
        {"amount": 100, "category": "Food"},
        {"amount": 50, "category": "Transport"},
        ...
    ]

Output Contract (selection callback):
    Category(name="Food", amount=100.0, color=RGBColor(r=242, g=13, b=13))

Amounts:
    Amounts must be finite and non-negative. A negative amount would
    produce an inverted sweep, so it is rejected when the entry is built
    rather than silently wrapped around the ring.

Example:
    from donut_chart.models.chart import RawEntry, SavedState

    entry = RawEntry(amount=120, category="Food")
    blob = surface.save_state().to_bytes()
    restored = SavedState.from_bytes(blob)
"""

import colorsys
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RawEntry(BaseModel):
    """
    Single labeled amount supplied by the host.

    Attributes:
        amount: Non-negative, finite amount
        category: Category label (exact string match when grouping)
    """

    model_config = ConfigDict(frozen=True)

    amount: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount contributed to the category (finite, >= 0)",
    )

    category: str = Field(
        ...,
        description="Category label",
    )


class RGBColor(BaseModel):
    """
    24-bit RGB color.

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "RGBColor":
        """
        Convert an HSL triple to RGB.

        Args:
            hue: Hue in degrees [0, 360)
            saturation: Saturation in [0, 1]
            lightness: Lightness in [0, 1]
        """
        r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
        return cls(r=_channel(r), g=_channel(g), b=_channel(b))

    @classmethod
    def from_list(cls, rgb: List[int]) -> "RGBColor":
        """Build from an ``[r, g, b]`` list (as found in config)."""
        r, g, b = rgb
        return cls(r=r, g=g, b=b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_bgr(self) -> tuple:
        """Channel order expected by OpenCV."""
        return (self.b, self.g, self.r)


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


NEUTRAL_COLOR = RGBColor(r=136, g=136, b=136)


class Category(BaseModel):
    """
    Aggregated, named, colored slice of the total amount.

    One per distinct label in the current data set. The full list is
    replaced on every data update; categories are never edited in place.

    Attributes:
        name: Category label (unique within a list)
        amount: Summed amount of all entries with this label
        color: Fill color assigned at aggregation time
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Category label")

    amount: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Summed amount for this label",
    )

    color: RGBColor = Field(..., description="Fill color of the category sector")


class SavedState(BaseModel):
    """
    Minimal snapshot needed to restore identical output after the drawing
    surface is torn down and recreated.

    Geometry is NOT part of the snapshot; it is rebuilt from categories
    and the next known surface size.

    Attributes:
        categories: Ordered category list
        stroke_width: Ring thickness at the time of saving
    """

    model_config = ConfigDict(frozen=True)

    categories: List[Category] = Field(default_factory=list)

    stroke_width: float = Field(..., gt=0, allow_inf_nan=False)

    def to_bytes(self) -> bytes:
        """Serialize to an opaque blob for the host's state store."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, blob: bytes) -> "SavedState":
        """Inverse of :meth:`to_bytes`."""
        return cls.model_validate_json(blob)
