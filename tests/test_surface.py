"""
Surface Controller Tests
========================

State machine, painting, tap dispatch and persistence.
"""

import math

import pytest

from donut_chart.geometry import point_at
from donut_chart.models.chart import NEUTRAL_COLOR, RawEntry, RGBColor, SavedState
from donut_chart.models.geometry import Point
from donut_chart.models.input import PointerAction, PointerEvent
from donut_chart.rendering import RecordingCanvas
from donut_chart.surface import ChartSurface, SurfaceState


# 400x400 surface, stroke 80: ring band is [120, 200] around (200, 200)
TAP_A = point_at(45.0, 160, 200, 200)
TAP_B = point_at(225.0, 160, 200, 200)
TAP_HOLE = Point(x=200, y=200)


class TestLifecycle:
    """Tests for state transitions."""

    def test_starts_uninitialized(self, surface):
        assert surface.state == SurfaceState.UNINITIALIZED
        assert surface.geometry is None
        assert surface.size is None

    def test_draw_before_resize_paints_nothing(self, surface, abc_entries):
        surface.set_data(abc_entries)
        canvas = RecordingCanvas()

        assert surface.on_draw(canvas) == 0
        assert canvas.calls == []

    def test_tap_before_resize_misses(self, surface, abc_entries):
        surface.set_data(abc_entries)
        assert surface.on_tap_up(TAP_A) is None

    def test_resize_enters_sized(self, sized_abc_surface):
        assert sized_abc_surface.state == SurfaceState.SIZED
        assert sized_abc_surface.size == (400, 400)
        assert len(sized_abc_surface.geometry.sectors) == 3

    def test_resize_replaces_geometry_wholesale(self, sized_abc_surface):
        old = sized_abc_surface.geometry
        old_sectors = old.sectors

        sized_abc_surface.on_resize(200, 100)

        new = sized_abc_surface.geometry
        assert new is not old
        assert old.sectors is old_sectors
        assert old.outer_bounds.radius == 200
        assert new.outer_bounds.radius == 50

    def test_negative_size_rejected(self, surface):
        with pytest.raises(ValueError):
            surface.on_resize(-1, 100)

    def test_invalidate_hook_called_on_changes(self, abc_entries):
        calls = []
        surface = ChartSurface(stroke_width=40, on_invalidate=lambda: calls.append(1))

        surface.set_data(abc_entries)
        surface.set_stroke_width(20)
        surface.restore_state(surface.save_state())

        assert len(calls) == 3


class TestData:
    """Tests for data and stroke width updates."""

    def test_set_data_aggregates(self, surface, spending_entries):
        surface.set_data(spending_entries)

        assert [c.name for c in surface.categories][:2] == ["Food", "Utilities"]
        assert len(surface.categories) == 5

    def test_set_data_accepts_any_iterable(self, surface, abc_entries):
        surface.set_data(e for e in abc_entries)
        assert [c.name for c in surface.categories] == ["A", "B", "C"]

    def test_set_data_replaces_previous_list(self, sized_abc_surface):
        sized_abc_surface.set_data([RawEntry(amount=5, category="Only")])

        assert [c.name for c in sized_abc_surface.categories] == ["Only"]
        assert sized_abc_surface.on_tap_up(TAP_B).name == "Only"

    def test_set_data_rebuilds_before_next_paint(self, sized_abc_surface):
        sized_abc_surface.set_data([RawEntry(amount=5, category="Only")])
        canvas = RecordingCanvas()

        assert sized_abc_surface.on_draw(canvas) == 1
        assert len(sized_abc_surface.geometry.sectors) == 1

    def test_overflowing_data_keeps_previous_categories(self, sized_abc_surface):
        huge = [RawEntry(amount=1e308, category="X"), RawEntry(amount=1e308, category="Y")]

        with pytest.raises(ValueError):
            sized_abc_surface.set_data(huge)

        assert [c.name for c in sized_abc_surface.categories] == ["A", "B", "C"]

    def test_stroke_width_change_rebuilds_lazily(self, sized_abc_surface):
        sized_abc_surface.set_stroke_width(20)
        sized_abc_surface.on_draw(RecordingCanvas())

        assert sized_abc_surface.stroke_width == 20
        assert sized_abc_surface.geometry.stroke_width == 20
        assert sized_abc_surface.geometry.inner_bounds.radius == 180
        # Old band midpoint now falls in the hole
        assert sized_abc_surface.on_tap_up(TAP_A) is None

    @pytest.mark.parametrize("value", [0, -3, math.inf, math.nan])
    def test_invalid_stroke_width_rejected(self, surface, value):
        with pytest.raises(ValueError):
            surface.set_stroke_width(value)
        assert surface.stroke_width == 80

    def test_invalid_constructor_stroke_width_rejected(self):
        with pytest.raises(ValueError):
            ChartSurface(stroke_width=0)


class TestDrawing:
    """Tests for on_draw."""

    def test_paints_each_category_color_in_order(self, sized_abc_surface):
        canvas = RecordingCanvas()

        assert sized_abc_surface.on_draw(canvas) == 3
        assert canvas.colors == [c.color for c in sized_abc_surface.categories]

    def test_paints_cached_paths(self, sized_abc_surface):
        canvas = RecordingCanvas()
        sized_abc_surface.on_draw(canvas)

        painted = [path for path, _ in canvas.calls]
        assert painted == list(sized_abc_surface.geometry.paths)

    def test_empty_data_paints_neutral_ring(self, surface):
        surface.set_data([])
        surface.on_resize(300, 300)
        canvas = RecordingCanvas()

        assert surface.on_draw(canvas) == 1
        assert canvas.colors == [NEUTRAL_COLOR]

    def test_custom_neutral_color(self):
        neutral = RGBColor(r=10, g=20, b=30)
        surface = ChartSurface(stroke_width=10, neutral_color=neutral)
        surface.on_resize(100, 100)
        canvas = RecordingCanvas()

        surface.on_draw(canvas)
        assert canvas.colors == [neutral]


class TestSelection:
    """Tests for tap dispatch to the selection callback."""

    def test_tap_invokes_callback_once(self, sized_abc_surface):
        selected = []
        sized_abc_surface.set_on_category_selected(selected.append)

        result = sized_abc_surface.on_tap_up(TAP_A)

        assert result.name == "A"
        assert [c.name for c in selected] == ["A"]
        assert selected[0].amount == 100
        assert selected[0].color == result.color

    def test_miss_does_not_invoke_callback(self, sized_abc_surface):
        selected = []
        sized_abc_surface.set_on_category_selected(selected.append)

        assert sized_abc_surface.on_tap_up(TAP_HOLE) is None
        assert sized_abc_surface.on_tap_up(Point(x=1, y=1)) is None
        assert selected == []

    def test_callback_slot_is_last_write_wins(self, sized_abc_surface):
        first, second = [], []
        sized_abc_surface.set_on_category_selected(first.append)
        sized_abc_surface.set_on_category_selected(second.append)

        sized_abc_surface.on_tap_up(TAP_B)

        assert first == []
        assert [c.name for c in second] == ["B"]

    def test_callback_can_be_cleared(self, sized_abc_surface):
        selected = []
        sized_abc_surface.set_on_category_selected(selected.append)
        sized_abc_surface.set_on_category_selected(None)

        assert sized_abc_surface.on_tap_up(TAP_A).name == "A"
        assert selected == []

    def test_tap_without_callback_still_resolves(self, sized_abc_surface):
        assert sized_abc_surface.on_tap_up(TAP_B).name == "B"

    def test_callback_may_replace_data(self, sized_abc_surface):
        def replace(category):
            sized_abc_surface.set_data([RawEntry(amount=1, category=f"after-{category.name}")])

        sized_abc_surface.set_on_category_selected(replace)

        assert sized_abc_surface.on_tap_up(TAP_A).name == "A"
        sized_abc_surface.set_on_category_selected(None)
        assert sized_abc_surface.on_tap_up(TAP_A).name == "after-A"

    def test_empty_data_tap_misses(self, surface):
        selected = []
        surface.set_on_category_selected(selected.append)
        surface.set_data([])
        surface.on_resize(400, 400)

        assert surface.on_tap_up(TAP_A) is None
        assert selected == []


class TestPointerEvents:
    """Tests for raw pointer event handling."""

    def test_down_up_selects(self, sized_abc_surface):
        selected = []
        sized_abc_surface.set_on_category_selected(selected.append)

        assert sized_abc_surface.on_pointer_event(
            PointerEvent(PointerAction.DOWN, TAP_A.x, TAP_A.y, 1.0)
        ) is None
        category = sized_abc_surface.on_pointer_event(
            PointerEvent(PointerAction.UP, TAP_A.x + 2, TAP_A.y, 1.1)
        )

        assert category.name == "A"
        assert [c.name for c in selected] == ["A"]

    def test_drag_does_not_select(self, sized_abc_surface):
        selected = []
        sized_abc_surface.set_on_category_selected(selected.append)

        sized_abc_surface.on_pointer_event(PointerEvent(PointerAction.DOWN, TAP_A.x, TAP_A.y, 1.0))
        sized_abc_surface.on_pointer_event(PointerEvent(PointerAction.MOVE, TAP_B.x, TAP_B.y, 1.05))
        result = sized_abc_surface.on_pointer_event(
            PointerEvent(PointerAction.UP, TAP_B.x, TAP_B.y, 1.1)
        )

        assert result is None
        assert selected == []


class TestPersistence:
    """Tests for save_state / restore_state."""

    def test_snapshot_contents(self, sized_abc_surface):
        state = sized_abc_surface.save_state()

        assert isinstance(state, SavedState)
        assert state.stroke_width == 80
        assert [c.name for c in state.categories] == ["A", "B", "C"]
        assert "sectors" not in state.model_dump()

    def test_restore_before_size_enters_restoring(self, sized_abc_surface):
        blob = sized_abc_surface.save_state().to_bytes()

        recreated = ChartSurface(stroke_width=10)
        recreated.restore_state(SavedState.from_bytes(blob))

        assert recreated.state == SurfaceState.RESTORING
        assert recreated.stroke_width == 80
        assert recreated.categories == sized_abc_surface.categories
        assert recreated.geometry is None
        assert recreated.on_draw(RecordingCanvas()) == 0

    def test_restored_surface_matches_source_after_resize(self, sized_abc_surface):
        recreated = ChartSurface(stroke_width=10)
        recreated.restore_state(SavedState.from_bytes(sized_abc_surface.save_state().to_bytes()))
        recreated.on_resize(400, 400)

        source_canvas, restored_canvas = RecordingCanvas(), RecordingCanvas()
        sized_abc_surface.on_draw(source_canvas)
        recreated.on_draw(restored_canvas)

        assert recreated.state == SurfaceState.SIZED
        assert restored_canvas.colors == source_canvas.colors
        assert recreated.geometry.sectors == sized_abc_surface.geometry.sectors
        assert recreated.on_tap_up(TAP_B).name == "B"

    def test_restore_while_sized_rebuilds_lazily(self, sized_abc_surface, spending_entries):
        donor = ChartSurface(stroke_width=30)
        donor.set_data(spending_entries)

        sized_abc_surface.restore_state(donor.save_state())

        assert sized_abc_surface.state == SurfaceState.SIZED
        assert sized_abc_surface.on_draw(RecordingCanvas()) == 5
        assert sized_abc_surface.geometry.stroke_width == 30
