"""
Test Configuration
==================

Pytest fixtures and test configuration for the ring chart engine.
"""

import pytest


@pytest.fixture
def abc_entries():
    """A=100, B=50, C=50: sectors of 180°, 90° and 90°."""
    from donut_chart.models.chart import RawEntry

    return [
        RawEntry(amount=100, category="A"),
        RawEntry(amount=50, category="B"),
        RawEntry(amount=50, category="C"),
    ]


@pytest.fixture
def spending_entries():
    """Uneven spending data with repeated labels."""
    from donut_chart.models.chart import RawEntry

    rows = [
        (1200, "Food"),
        (450, "Transport"),
        (380, "Food"),
        (610, "Health"),
        (450, "Entertainment"),
        (300, "Transport"),
        (900, "Utilities"),
    ]
    return [RawEntry(amount=amount, category=label) for amount, label in rows]


@pytest.fixture
def surface():
    """Unsized surface with an explicit stroke width and neutral color."""
    from donut_chart.models.chart import NEUTRAL_COLOR
    from donut_chart.surface import ChartSurface

    return ChartSurface(stroke_width=80, neutral_color=NEUTRAL_COLOR)


@pytest.fixture
def sized_abc_surface(surface, abc_entries):
    """400x400 surface showing the A/B/C data set (outer 200, inner 120)."""
    surface.set_data(abc_entries)
    surface.on_resize(400, 400)
    return surface
