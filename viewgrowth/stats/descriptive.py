"""
viewgrowth.stats.descriptive
============================

Descriptive statistics of a segment: count, mean and unbiased sample variance.

Examples
--------
>>> from datetime import datetime
>>> from viewgrowth.core.names import SegmentName
>>> from viewgrowth.core.samples import Sample, Segment
>>> seg = Segment(SegmentName.BEFORE, (Sample(datetime(2024, 1, 1), 100),
...                                    Sample(datetime(2024, 1, 2), 200)))
>>> describe(seg)
SegmentStats(count=2, mean=150.0, variance=5000.0)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence, Union

from viewgrowth.core.errors import InsufficientData
from viewgrowth.core.names import SegmentName
from viewgrowth.core.samples import Segment

MIN_SAMPLES = 2

Number = Union[int, float]


@dataclass(frozen=True)
class SegmentStats:
    """Summary of one segment. `variance` is the unbiased (n - 1) estimator."""

    count: int
    mean: float
    variance: float

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)


def segment_mean(values: Sequence[Number]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def sample_variance(
    values: Sequence[Number],
    mean: float,
    segment: Union[SegmentName, str] = "segment",
) -> float:
    """Σ(x - mean)² / (n - 1). Raises `InsufficientData` below two values."""
    n = len(values)
    if n < MIN_SAMPLES:
        raise InsufficientData(segment, n)
    return sum((x - mean) ** 2 for x in values) / (n - 1)


def describe(segment: Segment) -> SegmentStats:
    """Count, mean and variance of `segment`; at least two samples required."""
    values = segment.values
    if len(values) < MIN_SAMPLES:
        raise InsufficientData(segment.name, len(values))
    mean = segment_mean(values)
    return SegmentStats(
        count=len(values),
        mean=float(mean),
        variance=float(sample_variance(values, mean, segment.name)),
    )
