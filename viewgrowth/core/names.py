"""
viewgrowth.core.names
=====================

Typed names shared across the package.

- `Verdict`: outcome of the significance test.
- `SegmentName`: which side of the cutoff a segment lies on.
- `Timeframe`: the fixed look-back windows offered for a cutoff.
- `AnalysisStatus`: whether an analysis produced a verdict.
- `SamplesVersion`: NewType wrapper for a sample-set content hash.

Examples
--------
>>> from viewgrowth.core.names import Verdict, Timeframe
>>> Verdict.HIGHER.value
'higher'
>>> Timeframe("3months").months
3
"""

from __future__ import annotations
from enum import Enum
from typing import NewType


class Verdict(str, Enum):
    """Outcome of comparing the "after" mean against the "before" mean.

    - HIGHER: after is significantly above before
    - LOWER: after is significantly below before
    - NO_DIFFERENCE: the gap is within the critical value
    """

    HIGHER = "higher"
    LOWER = "lower"
    NO_DIFFERENCE = "no_difference"

    def flipped(self) -> "Verdict":
        """Return the verdict seen from the other segment."""
        if self is Verdict.HIGHER:
            return Verdict.LOWER
        if self is Verdict.LOWER:
            return Verdict.HIGHER
        return self


class SegmentName(str, Enum):
    BEFORE = "before"
    AFTER = "after"


class Timeframe(str, Enum):
    """Look-back windows for placing a cutoff relative to "now".

    `ALL` places the cutoff at the Unix epoch so every sample falls after it.
    """

    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"
    ALL = "all"

    @property
    def months(self) -> int:
        return _TIMEFRAME_MONTHS[self]


_TIMEFRAME_MONTHS = {
    Timeframe.ONE_MONTH: 1,
    Timeframe.THREE_MONTHS: 3,
    Timeframe.SIX_MONTHS: 6,
    Timeframe.ONE_YEAR: 12,
    Timeframe.ALL: 0,
}


class AnalysisStatus(str, Enum):
    OK = "ok"
    INSUFFICIENT_DATA = "insufficient_data"


# Hex digest identifying the content of a sample set.
SamplesVersion = NewType("SamplesVersion", str)
