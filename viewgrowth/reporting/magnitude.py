"""
viewgrowth.reporting.magnitude
==============================

Pick a unit / thousands / millions / billions scale for a number and format
it with a fixed number of decimals and a suffix.

Thresholds compare the absolute value, so negative numbers scale like their
positive counterparts and keep their sign in the output.

Examples
--------
>>> scale_for(2_500_000)
MagnitudeScale(divisor=1000000.0, suffix='M')
>>> format_magnitude(2_500_000)
'2.50M'
>>> format_magnitude(999)
'999.00'
>>> format_magnitude(-1500)
'-1.50K'
"""

from __future__ import annotations
from typing import Iterable, NamedTuple


class MagnitudeScale(NamedTuple):
    divisor: float
    suffix: str


UNITS = MagnitudeScale(1.0, "")
THOUSANDS = MagnitudeScale(1_000.0, "K")
MILLIONS = MagnitudeScale(1_000_000.0, "M")
BILLIONS = MagnitudeScale(1_000_000_000.0, "B")


def scale_for(value: float) -> MagnitudeScale:
    """Scale whose bracket contains |value|."""
    magnitude = abs(value)
    if magnitude < 1_000:
        return UNITS
    if magnitude < 1_000_000:
        return THOUSANDS
    if magnitude < 1_000_000_000:
        return MILLIONS
    return BILLIONS


def format_tick(value: float, scale: MagnitudeScale, decimals: int = 2) -> str:
    """Format `value` in a scale chosen elsewhere (e.g. once per chart axis)."""
    return f"{value / scale.divisor:.{decimals}f}{scale.suffix}"


def format_magnitude(value: float, decimals: int = 2) -> str:
    """Format `value` in its own scale."""
    return format_tick(value, scale_for(value), decimals)


def axis_scale(values: Iterable[float]) -> MagnitudeScale:
    """One scale for a whole series, from its largest magnitude.

    >>> axis_scale([10, 20_000, 3_000_000]).suffix
    'M'
    >>> axis_scale([])
    MagnitudeScale(divisor=1.0, suffix='')
    """
    largest = max((abs(v) for v in values), default=0)
    return scale_for(largest)
