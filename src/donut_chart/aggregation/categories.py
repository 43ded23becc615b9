"""
Category Aggregation
====================

Groups raw entries into per-category totals.

This module:
    - Groups RawEntry records by exact label
    - Sums amounts per label
    - Assigns each group a color from an evenly spread hue wheel
    - Orders groups by descending amount (stable on ties)

Color Scheme:
    hue = 360 * index / count, saturation = 0.9, lightness = 0.5

    The index is the group's position in first-seen order, BEFORE sorting.
    A category keeps the same color regardless of where its amount places
    it in the displayed order.
"""

import logging
import math
from typing import Dict, Iterable, List

from donut_chart.models.chart import Category, RawEntry, RGBColor


logger = logging.getLogger(__name__)

SATURATION = 0.9
LIGHTNESS = 0.5


def category_color(index: int, count: int) -> RGBColor:
    """
    Color for group ``index`` out of ``count`` groups.

    Args:
        index: Group index in first-seen order
        count: Total number of groups (must be >= 1)

    Returns:
        RGB color on the fixed saturation/lightness hue wheel
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    return RGBColor.from_hsl(360.0 * index / count, SATURATION, LIGHTNESS)


def aggregate(entries: Iterable[RawEntry]) -> List[Category]:
    """
    Aggregate raw entries into an ordered category list.

    Args:
        entries: Raw labeled amounts, in host order

    Returns:
        Categories sorted by amount descending; equal amounts keep
        the order in which their labels were first seen

    Raises:
        ValueError: If a category total or the grand total overflows to inf
    """
    totals: Dict[str, float] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0.0) + entry.amount

    grand_total = sum(totals.values())
    if not math.isfinite(grand_total):
        raise ValueError(f"amounts overflow the float range (total={grand_total})")

    count = len(totals)
    grouped = [
        Category(name=name, amount=amount, color=category_color(index, count))
        for index, (name, amount) in enumerate(totals.items())
    ]

    categories = sorted(grouped, key=lambda c: c.amount, reverse=True)

    logger.debug(f"Aggregated {count} categories, total={grand_total:.2f}")

    return categories
