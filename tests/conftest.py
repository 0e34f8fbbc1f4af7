from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Sequence

import pytest

from viewgrowth.core.samples import Sample

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_samples(
    values: Sequence[int],
    start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc),
    step: timedelta = timedelta(days=1),
) -> List[Sample]:
    return [Sample(start + i * step, v) for i, v in enumerate(values)]


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def split_samples() -> List[Sample]:
    """Two old videos (100, 200) and two recent ones (1000, 1200)."""
    old = make_samples([100, 200], start=datetime(2024, 1, 1, tzinfo=timezone.utc))
    new = make_samples([1000, 1200], start=datetime(2025, 5, 1, tzinfo=timezone.utc))
    return old + new
