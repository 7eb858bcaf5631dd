# riskview/zoom.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, TypeVar, Union

MIN_WINDOW      = 5
ZOOM_IN_FACTOR  = 0.98
ZOOM_OUT_FACTOR = 1.02

T = TypeVar("T")


class Viewport(Enum):
    FULL = "full"

    def __repr__(self) -> str:
        return "FULL"


FULL = Viewport.FULL


@dataclass(frozen=True)
class ZoomWindow:
    start: int
    end: int


ViewportSlice = Union[Viewport, ZoomWindow]


def zoom_factor(delta: float) -> float:
    """Wheel scrolled down (positive delta) widens the view, anything else narrows it."""
    return ZOOM_OUT_FACTOR if delta > 0 else ZOOM_IN_FACTOR


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def resolve_bounds(current: ViewportSlice, length: int) -> Tuple[int, int]:
    if current is FULL:
        return 0, length - 1
    return current.start, current.end


def on_zoom(delta: float, current: ViewportSlice, length: int) -> ViewportSlice:
    """
    Anchored exponential zoom. The right edge stays on the most recent point;
    each event scales the visible range by ±2% of its current size.
    Returns `current` itself when nothing moves.
    """
    if length < MIN_WINDOW:
        return current

    start, end = resolve_bounds(current, length)
    current_range = end - start

    new_range = _round_half_up(current_range * zoom_factor(delta))
    new_range = max(MIN_WINDOW, min(length - 1, new_range))
    if new_range == current_range:
        return current

    new_end   = length - 1
    new_start = max(0, new_end - new_range)
    if new_start == 0:
        return FULL
    return ZoomWindow(new_start, new_end)


def fits(current: ViewportSlice, length: int) -> bool:
    if current is FULL:
        return True
    return 0 <= current.start <= current.end <= length - 1


def reanchor(current: ViewportSlice, length: int) -> ViewportSlice:
    """
    Fit a slice to data of `length` points. A window that still fits keeps
    its range and moves its right edge to the newest point; one that no
    longer fits falls back to FULL. Returns `current` itself when nothing moves.
    """
    if current is FULL:
        return current
    if not fits(current, length):
        return FULL
    new_end = length - 1
    if current.end == new_end:
        return current
    # end < length-1 here, so the moved window still starts at index >= 1
    return ZoomWindow(new_end - (current.end - current.start), new_end)


def visible(points: List[T], current: ViewportSlice) -> List[T]:
    if current is FULL:
        return points
    return points[current.start:current.end + 1]
