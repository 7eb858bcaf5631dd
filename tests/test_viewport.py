#!/usr/bin/env python3
"""
Tests for viewport state transitions and the derived chart view.
"""
from datetime import timedelta

from riskview.metrics import DerivedMetrics
from riskview.models import ChartPoint, DataPoint
from riskview.viewport import (
    ViewportController,
    ViewportState,
    apply_zoom,
    build_view,
    pick_range,
    replace_dataset,
    to_chart_points,
)
from riskview.zoom import FULL, ZoomWindow

from conftest import daily_dataset

ZOOM_IN = -1
ZOOM_OUT = 1


class TestTransitions:
    def test_initial_state(self):
        s = ViewportState()
        assert s.range_key == "ALL"
        assert s.slice is FULL

    def test_pick_range_discards_zoom(self):
        s = ViewportState("ALL", ZoomWindow(10, 40))
        out = pick_range(s, "1M")
        assert out == ViewportState("1M", FULL)

    def test_pick_same_range_still_resets(self):
        s = ViewportState("3M", ZoomWindow(10, 40))
        assert pick_range(s, "3M").slice is FULL

    def test_pick_unknown_range(self):
        assert pick_range(ViewportState("1W"), "2Y").range_key == "ALL"

    def test_apply_zoom_narrows(self):
        s = apply_zoom(ViewportState(), ZOOM_IN, 100)
        assert s.slice == ZoomWindow(2, 99)
        assert s.range_key == "ALL"

    def test_apply_zoom_noop_returns_same_state(self):
        s = ViewportState("1W", ZoomWindow(1, 3))
        assert apply_zoom(s, ZOOM_IN, 4) is s

    def test_replace_with_shorter_dataset_resets(self):
        s = ViewportState("ALL", ZoomWindow(10, 40))
        assert replace_dataset(s, 4) == ViewportState("ALL", FULL)

    def test_replace_with_long_enough_dataset_keeps_zoom(self):
        s = ViewportState("ALL", ZoomWindow(10, 40))
        assert replace_dataset(s, 41) is s

    def test_replace_with_longer_dataset_moves_window_to_newest_point(self):
        s = ViewportState("1M", ZoomWindow(10, 40))
        assert replace_dataset(s, 43) == ViewportState("1M", ZoomWindow(12, 42))

    def test_replace_keeps_window_range_when_data_grows(self):
        s = ViewportState("ALL", ZoomWindow(0, 30))
        assert replace_dataset(s, 35).slice == ZoomWindow(4, 34)


class TestBuildView:
    def test_chart_points(self):
        pts = to_chart_points([DataPoint("2026-10-19T00:00:00Z", 1.5)])
        assert pts == [ChartPoint(display_label="Oct 19", raw_value=1.5, raw_timestamp="2026-10-19T00:00:00Z")]

    def test_empty_dataset(self, now):
        view = build_view([], ViewportState("1M"), now=now)
        assert view.points == []
        assert view.metrics == DerivedMetrics(0.0, 0.0, 0.0, 0.0)
        assert view.filtered_length == 0

    def test_range_then_zoom(self, hundred_days, now):
        view = build_view(hundred_days, ViewportState("1M", ZoomWindow(20, 29)), now=now)
        assert view.filtered_length == 30
        assert [p.raw_value for p in view.points] == [p.value for p in hundred_days[-10:]]
        assert view.metrics.latest_value == hundred_days[-1].value
        assert view.metrics.previous_value == hundred_days[-2].value

    def test_stale_slice_shows_whole_range(self, hundred_days, now):
        view = build_view(hundred_days, ViewportState("1W", ZoomWindow(10, 40)), now=now)
        assert len(view.points) == 7

    def test_idempotent(self, hundred_days, now):
        s = ViewportState("3M", ZoomWindow(50, 89))
        assert build_view(hundred_days, s, now=now) == build_view(hundred_days, s, now=now)


class TestViewportController:
    def test_month_then_ten_zoom_ins(self, hundred_days, now):
        c = ViewportController(hundred_days, now=now)
        c.select_range("1M")
        assert len(c.view().points) == 30
        for _ in range(10):
            c.zoom(ZOOM_IN)
        start, end = c.state.slice.start, c.state.slice.end
        assert end == 29
        assert 24 <= end - start <= 25
        assert len(c.view().points) == end - start + 1

    def test_range_pick_discards_zoom(self, hundred_days, now):
        c = ViewportController(hundred_days, now=now)
        c.zoom(ZOOM_IN)
        assert c.state.slice != FULL
        c.select_range("3M")
        assert c.state.slice is FULL
        assert len(c.view().points) == 90

    def test_dataset_replacement_resets_out_of_bounds_zoom(self, now):
        c = ViewportController(daily_dataset(100), now=now)
        c.state = ViewportState("ALL", ZoomWindow(10, 40))
        c.set_dataset(daily_dataset(4))
        assert c.state == ViewportState("ALL", FULL)

    def test_zoom_disabled_on_tiny_dataset(self, now):
        c = ViewportController(daily_dataset(4), now=now)
        before = c.state
        c.zoom(ZOOM_IN)
        c.zoom(ZOOM_OUT)
        assert c.state is before

    def test_zoom_out_after_zoom_in_returns_to_full(self, hundred_days, now):
        c = ViewportController(hundred_days, now=now)
        c.zoom(ZOOM_IN)
        c.zoom(ZOOM_OUT)
        assert c.state.slice is FULL

    def test_invalid_initial_range(self):
        assert ViewportController([], range_key="10Y").state.range_key == "ALL"

    def test_growing_dataset_keeps_newest_point_visible(self, now):
        c = ViewportController(daily_dataset(100), now=now)
        for _ in range(10):
            c.zoom(ZOOM_IN)
        before = c.state.slice
        grown = daily_dataset(101, end=now + timedelta(days=1))
        c.set_dataset(grown)
        after = c.state.slice
        assert after.end == 100
        assert after.end - after.start == before.end - before.start
        points = c.view().points
        assert points[-1].raw_timestamp == grown[-1].ts
        assert c.view().metrics.latest_value == grown[-1].value

    def test_view_anchors_window_left_over_from_older_data(self, now):
        data = daily_dataset(101, end=now + timedelta(days=1))
        view = build_view(data, ViewportState("ALL", ZoomWindow(80, 99)))
        assert len(view.points) == 20
        assert view.points[-1].raw_timestamp == data[-1].ts
