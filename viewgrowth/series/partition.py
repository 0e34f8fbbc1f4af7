"""
viewgrowth.series.partition
===========================

Split a sample set into "before" and "after" segments at a cutoff instant.

`before` holds samples strictly earlier than the cutoff, `after` holds the
rest (the cutoff itself belongs to `after`). Input order does not matter;
both segments come back in ascending timestamp order.

Examples
--------
>>> from datetime import datetime
>>> from viewgrowth.core.samples import Sample
>>> samples = [Sample(datetime(2024, 3, 1), 30), Sample(datetime(2024, 1, 1), 10),
...            Sample(datetime(2024, 2, 1), 20)]
>>> before, after = partition(samples, datetime(2024, 2, 1))
>>> before.values, after.values
([10], [20, 30])
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable, Tuple

from viewgrowth.core.names import SegmentName
from viewgrowth.core.samples import Sample, Segment, as_utc, sort_samples


def partition(samples: Iterable[Sample], cutoff: datetime) -> Tuple[Segment, Segment]:
    """Return (before, after) with before < cutoff <= after."""
    cutoff = as_utc(cutoff)
    ordered = sort_samples(samples)
    before = tuple(s for s in ordered if s.timestamp < cutoff)
    after = tuple(s for s in ordered if s.timestamp >= cutoff)
    return Segment(SegmentName.BEFORE, before), Segment(SegmentName.AFTER, after)
