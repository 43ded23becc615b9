#!/usr/bin/env python3
"""
Payload Render Script
=====================

Standalone host for the ring chart engine.

This script:
    1. Loads a JSON payload of spending records
    2. Maps each record to a RawEntry (amount + category)
    3. Drives a ChartSurface through resize and draw
    4. Writes the rendered ring as a PNG
    5. Optionally simulates a tap and logs the selected category

Payload Format:
    [
        {"id": 1, "name": "Groceries", "amount": 1200,
         "category": "Food", "time": 1623250800},
        ...
    ]

Usage:
    python scripts/render_payload.py data/payload.json --out chart.png
    python scripts/render_payload.py data/payload.json --tap 400,60
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, Field

from donut_chart.config import settings, setup_logging
from donut_chart.models import Category, Point, RawEntry, RGBColor
from donut_chart.rendering import RasterCanvas
from donut_chart.surface import ChartSurface


logger = logging.getLogger(__name__)


class PayloadRecord(BaseModel):
    """Single spending record as stored in the payload file."""

    id: int
    name: str
    amount: float = Field(..., ge=0)
    category: str
    time: int

    def to_raw_entry(self) -> RawEntry:
        return RawEntry(amount=self.amount, category=self.category)


def load_payload(path: Path) -> List[PayloadRecord]:
    with open(path, "r") as f:
        data = json.load(f)
    return [PayloadRecord.model_validate(item) for item in data]


def parse_point(value: str) -> Tuple[float, float]:
    x, _, y = value.partition(",")
    try:
        return float(x), float(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {value!r}")


def on_selected(category: Category) -> None:
    logger.info(
        f"Selected: {category.name} amount={category.amount:g} "
        f"color={category.color.to_hex()}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a payload as a ring chart")
    parser.add_argument("payload", type=Path, help="Path to payload JSON")
    parser.add_argument("--out", type=Path, default=Path("chart.png"), help="PNG output path")
    parser.add_argument("--width", type=int, default=settings.render.width)
    parser.add_argument("--height", type=int, default=settings.render.height)
    parser.add_argument("--stroke", type=float, default=settings.chart.stroke_width)
    parser.add_argument("--tap", type=parse_point, help="Simulated tap position X,Y")
    args = parser.parse_args()

    setup_logging(settings)

    if not args.payload.exists():
        logger.error(f"Payload not found: {args.payload}")
        return 1

    records = load_payload(args.payload)
    logger.info(f"Loaded {len(records)} records from {args.payload}")

    surface = ChartSurface(stroke_width=args.stroke)
    surface.set_on_category_selected(on_selected)
    surface.set_data([record.to_raw_entry() for record in records])
    surface.on_resize(args.width, args.height)

    canvas = RasterCanvas(
        args.width,
        args.height,
        background=RGBColor.from_list(settings.render.background),
    )
    painted = surface.on_draw(canvas)
    args.out.write_bytes(canvas.to_png())
    logger.info(f"Painted {painted} segments -> {args.out}")

    if args.tap is not None:
        x, y = args.tap
        if surface.on_tap_up(Point(x=x, y=y)) is None:
            logger.info(f"Tap at ({x:g}, {y:g}) is outside every category")

    return 0


if __name__ == "__main__":
    sys.exit(main())
