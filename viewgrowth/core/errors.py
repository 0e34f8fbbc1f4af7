"""
viewgrowth.core.errors
======================

Exceptions raised by the growth analysis engine.

`InsufficientData` is structural: the same samples will never produce enough
data on a retry, so callers report it instead of retrying.
`InvalidConfiguration` also subclasses `ValueError` so generic argument
validation handlers keep working.

Examples
--------
>>> err = InsufficientData("before", 1)
>>> err.segment, err.count
('before', 1)
>>> isinstance(InvalidConfiguration("bad"), ValueError)
True
"""

from __future__ import annotations
from typing import Union

from viewgrowth.core.names import SegmentName


class GrowthAnalysisError(Exception):
    """Base class for all viewgrowth errors."""


class InsufficientData(GrowthAnalysisError):
    """A segment holds fewer than two samples, so its variance is undefined."""

    def __init__(self, segment: Union[SegmentName, str], count: int) -> None:
        self.segment = (
            segment.value if isinstance(segment, SegmentName) else str(segment)
        )
        self.count = int(count)
        super().__init__(
            f"Segment '{self.segment}' has {self.count} sample(s); at least 2 are required"
        )


class InvalidConfiguration(GrowthAnalysisError, ValueError):
    """An analysis parameter is out of range."""
