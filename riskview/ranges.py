# riskview/ranges.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from riskview.models import Dataset


@dataclass(frozen=True)
class RangeSpec:
    label: str
    days: Optional[int]


RANGES = {
    "1W":  RangeSpec("1W", 7),
    "1M":  RangeSpec("1M", 30),
    "3M":  RangeSpec("3M", 90),
    "6M":  RangeSpec("6M", 180),
    "1Y":  RangeSpec("1Y", 365),
    "ALL": RangeSpec("ALL", None),   # unbounded
}

DEFAULT_RANGE = "ALL"


def range_spec(key: str) -> RangeSpec:
    return RANGES.get(key, RANGES[DEFAULT_RANGE])


def parse_timestamps(dataset: Dataset) -> pd.DatetimeIndex:
    """UTC-aware index of the dataset's timestamps. Naive strings are read as UTC."""
    return pd.DatetimeIndex(pd.to_datetime([p.ts for p in dataset], utc=True, format="ISO8601"))


def _utc(ts) -> pd.Timestamp:
    ts = pd.Timestamp(ts)
    return ts.tz_localize("UTC") if ts.tzinfo is None else ts.tz_convert("UTC")


def select_range(dataset: Dataset, key: str, now=None) -> Dataset:
    spec = range_spec(key)
    if spec.days is None or not dataset:
        return dataset
    now = _utc(now) if now is not None else pd.Timestamp.now(tz="UTC")
    cutoff = now - pd.Timedelta(days=spec.days)
    keep = parse_timestamps(dataset) >= cutoff
    return [p for p, k in zip(dataset, keep) if k]
