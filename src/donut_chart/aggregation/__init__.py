"""
Aggregation Module
==================

Turns the host's raw entries into ordered, colored categories.
"""

from donut_chart.aggregation.categories import aggregate, category_color

__all__ = ["aggregate", "category_color"]
