#!/usr/bin/env python3
"""
Tests for the right-anchored zoom controller.
"""
import pytest

from riskview.zoom import (
    FULL,
    MIN_WINDOW,
    ZOOM_IN_FACTOR,
    ZOOM_OUT_FACTOR,
    ZoomWindow,
    fits,
    on_zoom,
    reanchor,
    resolve_bounds,
    visible,
    zoom_factor,
)

ZOOM_IN = -1
ZOOM_OUT = 1


def _range(s, length):
    start, end = resolve_bounds(s, length)
    return end - start


class TestZoomFactor:
    def test_scroll_down_zooms_out(self):
        assert zoom_factor(120) == ZOOM_OUT_FACTOR

    def test_scroll_up_zooms_in(self):
        assert zoom_factor(-120) == ZOOM_IN_FACTOR

    def test_zero_delta_zooms_in(self):
        assert zoom_factor(0) == ZOOM_IN_FACTOR


class TestOnZoom:
    @pytest.mark.parametrize("length", [0, 1, 4])
    def test_disabled_below_minimum_window(self, length):
        assert on_zoom(ZOOM_IN, FULL, length) is FULL
        w = ZoomWindow(1, 3)
        assert on_zoom(ZOOM_OUT, w, length) is w

    def test_first_zoom_in_from_full(self):
        # 99 * 0.98 = 97.02 -> 97
        assert on_zoom(ZOOM_IN, FULL, 100) == ZoomWindow(2, 99)

    def test_zoom_out_back_to_full(self):
        # 97 * 1.02 = 98.94 -> 99, the full span
        assert on_zoom(ZOOM_OUT, ZoomWindow(2, 99), 100) is FULL

    def test_zoom_out_at_full_is_noop(self):
        assert on_zoom(ZOOM_OUT, FULL, 100) is FULL

    def test_zoom_out_widens_window(self):
        # 50 * 1.02 = 51
        assert on_zoom(ZOOM_OUT, ZoomWindow(49, 99), 100) == ZoomWindow(48, 99)

    def test_unchanged_range_returns_same_object(self):
        w = ZoomWindow(94, 99)
        assert on_zoom(ZOOM_IN, w, 100) is w

    def test_window_re_anchors_to_latest_point(self):
        # a window not ending on the last point is moved to it
        assert on_zoom(ZOOM_IN, ZoomWindow(10, 60), 100) == ZoomWindow(50, 99)

    def test_five_point_dataset_stays_full(self):
        assert on_zoom(ZOOM_IN, FULL, 5) is FULL
        assert on_zoom(ZOOM_OUT, FULL, 5) is FULL

    def test_zoom_in_sequence_is_monotonic_and_anchored(self):
        length = 100
        s = FULL
        prev = _range(s, length)
        for _ in range(300):
            s = on_zoom(ZOOM_IN, s, length)
            r = _range(s, length)
            assert r <= prev
            assert r >= MIN_WINDOW
            assert resolve_bounds(s, length)[1] == length - 1
            prev = r
        assert prev < 99

    def test_zoom_out_sequence_reaches_full(self):
        length = 100
        s = ZoomWindow(49, 99)
        prev = _range(s, length)
        for _ in range(100):
            s = on_zoom(ZOOM_OUT, s, length)
            r = _range(s, length)
            assert r >= prev
            prev = r
            if s is FULL:
                break
        assert s is FULL

    def test_successive_events_compound(self):
        once = on_zoom(ZOOM_IN, FULL, 1000)
        twice = on_zoom(ZOOM_IN, once, 1000)
        assert _range(once, 1000) == 979     # 999 * 0.98 = 979.02
        assert _range(twice, 1000) == 959    # 979 * 0.98 = 959.42

    def test_idempotent(self):
        w = ZoomWindow(40, 99)
        assert on_zoom(ZOOM_IN, w, 100) == on_zoom(ZOOM_IN, w, 100)


class TestHelpers:
    def test_reanchor_moves_window_to_latest_point(self):
        assert reanchor(ZoomWindow(10, 40), 51) == ZoomWindow(20, 50)

    def test_reanchor_unchanged_returns_same_object(self):
        w = ZoomWindow(10, 40)
        assert reanchor(w, 41) is w
        assert reanchor(FULL, 3) is FULL

    def test_reanchor_out_of_bounds_resets(self):
        assert reanchor(ZoomWindow(10, 40), 4) is FULL

    def test_fits(self):
        assert fits(FULL, 0)
        assert fits(ZoomWindow(10, 40), 41)
        assert not fits(ZoomWindow(10, 40), 4)

    def test_visible(self):
        pts = list(range(10))
        assert visible(pts, FULL) is pts
        assert visible(pts, ZoomWindow(6, 9)) == [6, 7, 8, 9]
