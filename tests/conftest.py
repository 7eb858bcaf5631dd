from datetime import datetime, timedelta, timezone

import pytest

from riskview.models import DataPoint

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def daily_dataset(n: int, end: datetime = NOW, start_value: float = 100.0):
    """n daily points at midnight UTC, the last one on `end`'s date."""
    last = end.replace(hour=0, minute=0, second=0, microsecond=0)
    return [
        DataPoint(ts=(last - timedelta(days=n - 1 - i)).strftime("%Y-%m-%dT%H:%M:%SZ"), value=start_value + i)
        for i in range(n)
    ]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def hundred_days():
    return daily_dataset(100)
