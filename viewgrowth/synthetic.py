"""
viewgrowth.synthetic
====================

Seeded synthetic channel data for demos, notebooks and tests.

Videos are spread uniformly over the last `span_days` days with view counts
drawn uniformly from [0, max_views). An optional `growth` factor multiplies
the views of videos newer than `growth_after_days`, which makes the
significance test's HIGHER / LOWER paths easy to exercise.

Examples
--------
>>> from datetime import datetime, timezone
>>> now = datetime(2025, 1, 1, tzinfo=timezone.utc)
>>> a = synthetic_samples(50, seed=7, now=now)
>>> b = synthetic_samples(50, seed=7, now=now)
>>> a == b, len(a)
(True, 50)
>>> items = synthetic_video_items(3, seed=1, now=now)
>>> sorted(items[0])
['snippet', 'statistics']
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from viewgrowth.core.samples import Sample, as_utc, sort_samples
from viewgrowth.runtime.cutoffs import utc_now


def synthetic_samples(
    count: int = 100,
    *,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    span_days: int = 365,
    max_views: int = 1_000_000,
    growth: float = 1.0,
    growth_after_days: int = 90,
) -> List[Sample]:
    """Return `count` samples in ascending timestamp order."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if span_days <= 0 or max_views <= 0:
        raise ValueError("span_days and max_views must be positive")
    if growth < 0:
        raise ValueError(f"growth must be non-negative, got {growth}")

    rng = np.random.default_rng(seed)
    now = as_utc(now or utc_now())
    days_ago = rng.integers(0, span_days, size=count)
    views = rng.integers(0, max_views, size=count)

    samples = []
    for d, v in zip(days_ago, views):
        value = int(v)
        if d < growth_after_days:
            value = int(round(value * growth))
        samples.append(Sample(now - timedelta(days=int(d)), value))
    return sort_samples(samples)


def synthetic_video_items(
    count: int = 100,
    *,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    **kwargs: Any,
) -> List[Dict[str, Any]]:
    """Same data shaped like video-platform API items (string view counts)."""
    return [
        {
            "snippet": {
                "title": f"Synthetic Video #{i + 1}",
                "publishedAt": s.timestamp.isoformat().replace("+00:00", "Z"),
            },
            "statistics": {"viewCount": str(s.value)},
        }
        for i, s in enumerate(synthetic_samples(count, seed=seed, now=now, **kwargs))
    ]
