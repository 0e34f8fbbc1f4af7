"""
viewgrowth.runtime.cutoffs
==========================

Turn a timeframe choice into a cutoff instant.

A cutoff is either one of the fixed look-back windows (`Timeframe`), measured
back from "now" in calendar months, or an explicit instant. Month arithmetic
clamps the day to the end of the target month (31 March minus one month is
29 February in a leap year).

Examples
--------
>>> from datetime import datetime, timezone
>>> now = datetime(2024, 3, 31, 9, 30, tzinfo=timezone.utc)
>>> resolve_cutoff(Timeframe.ONE_MONTH, now=now).isoformat()
'2024-02-29T09:30:00+00:00'
>>> resolve_cutoff("1year", now=now).isoformat()
'2023-03-31T09:30:00+00:00'
>>> resolve_cutoff("2024-01-15T00:00:00Z").isoformat()
'2024-01-15T00:00:00+00:00'
"""

from __future__ import annotations
import calendar
from datetime import datetime, timezone
from typing import Optional, Union

from viewgrowth.core.names import Timeframe
from viewgrowth.core.samples import as_utc, parse_timestamp

CutoffLike = Union[Timeframe, str, datetime]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def subtract_months(ts: datetime, months: int) -> datetime:
    """Move `ts` back by whole calendar months, clamping the day."""
    total = ts.year * 12 + (ts.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(ts.day, calendar.monthrange(year, month)[1])
    return ts.replace(year=year, month=month, day=day)


def timeframe_cutoff(timeframe: Timeframe, now: datetime) -> datetime:
    if timeframe is Timeframe.ALL:
        return EPOCH
    return subtract_months(as_utc(now), timeframe.months)


def resolve_cutoff(cutoff: CutoffLike, now: Optional[datetime] = None) -> datetime:
    """
    Resolve a timeframe name, `Timeframe` member or instant to a UTC cutoff.

    Parameters
    ----------
    cutoff : Timeframe, str or datetime
        A timeframe (``"1month"``, ``"3months"``, ``"6months"``, ``"1year"``,
        ``"all"``), an ISO-8601 timestamp string, or a datetime
    now : datetime, optional
        Reference instant for timeframes; defaults to the current UTC time
    """
    if isinstance(cutoff, datetime):
        return as_utc(cutoff)
    if isinstance(cutoff, Timeframe):
        return timeframe_cutoff(cutoff, now or utc_now())
    try:
        timeframe = Timeframe(cutoff)
    except ValueError:
        return parse_timestamp(cutoff)
    return timeframe_cutoff(timeframe, now or utc_now())
