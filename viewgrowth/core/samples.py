"""
viewgrowth.core.samples
=======================

Value types for the observations the engine works on.

- `Sample`: one video's view count at its publish instant (frozen).
- `Segment`: an immutable, time-ordered run of samples on one side of a cutoff.
- `as_utc` / `parse_timestamp`: instant normalisation (naive means UTC).
- `samples_version`: a content hash identifying a sample set.
- `samples_frame`: a polars DataFrame view of a sample set.
- `samples_from_videos`: adaptor for video-platform API items.

Examples
--------
>>> from viewgrowth.core.samples import Sample, samples_from_videos
>>> s = Sample.from_raw("2024-03-01T12:00:00Z", "1500")
>>> s.value, s.timestamp.isoformat()
(1500, '2024-03-01T12:00:00+00:00')
>>> items = [{"snippet": {"publishedAt": "2024-03-01T12:00:00Z"},
...           "statistics": {"viewCount": "42"}}]
>>> [x.value for x in samples_from_videos(items)]
[42]
"""

from __future__ import annotations
import hashlib
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

import polars as pl

from viewgrowth.core.names import SamplesVersion, SegmentName

logger = logging.getLogger(__name__)

TimestampLike = Union[datetime, str]

SAMPLES_SCHEMA = {
    "timestamp": pl.Datetime(time_unit="us", time_zone="UTC"),
    "views": pl.Int64,
}


def as_utc(ts: datetime) -> datetime:
    """Return `ts` as an aware UTC datetime; naive values are taken as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def parse_timestamp(value: TimestampLike) -> datetime:
    """Parse an ISO-8601 string (trailing ``Z`` allowed) or pass a datetime through."""
    if isinstance(value, datetime):
        return as_utc(value)
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))


@dataclass(frozen=True)
class Sample:
    """A single observation: view count at publish time."""

    timestamp: datetime
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            raise TypeError(f"timestamp must be a datetime, got {type(self.timestamp)!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"View count must be an integer, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"View count cannot be negative, got {self.value}")
        object.__setattr__(self, "timestamp", as_utc(self.timestamp))

    @classmethod
    def from_raw(cls, timestamp: TimestampLike, views: Union[int, str]) -> "Sample":
        """Build a sample from loosely typed inputs (API strings, datetimes)."""
        if isinstance(views, str):
            views = int(views.strip())
        return cls(timestamp=parse_timestamp(timestamp), value=views)


@dataclass(frozen=True)
class Segment:
    """Samples on one side of a cutoff, in ascending timestamp order."""

    name: SegmentName
    samples: Tuple[Sample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def values(self) -> List[int]:
        return [s.value for s in self.samples]


def sort_samples(samples: Iterable[Sample]) -> List[Sample]:
    """Stable ascending sort by timestamp."""
    return sorted(samples, key=lambda s: s.timestamp)


def samples_version(samples: Iterable[Sample]) -> SamplesVersion:
    """SHA-256 over the sorted samples; equal content gives an equal version.

    >>> from datetime import datetime
    >>> a = Sample(datetime(2024, 1, 1), 10)
    >>> b = Sample(datetime(2024, 2, 1), 20)
    >>> samples_version([a, b]) == samples_version([b, a])
    True
    """
    digest = hashlib.sha256()
    for s in sort_samples(samples):
        digest.update(f"{s.timestamp.isoformat()}|{s.value}\n".encode("utf-8"))
    return SamplesVersion(digest.hexdigest())


def samples_frame(samples: Sequence[Sample]) -> pl.DataFrame:
    """Two-column frame (`timestamp`, `views`) in the given order."""
    return pl.DataFrame(
        {
            "timestamp": [s.timestamp for s in samples],
            "views": [s.value for s in samples],
        },
        schema=SAMPLES_SCHEMA,
    )


def samples_from_videos(items: Iterable[Mapping[str, Any]]) -> List[Sample]:
    """
    Convert video-platform API items into samples.

    Each item is expected to look like::

        {"snippet": {"publishedAt": "2024-01-01T00:00:00Z", ...},
         "statistics": {"viewCount": "1234", ...}}

    Items without a view count are skipped. A missing publish time is an
    error since the sample could not be placed on the timeline.
    """
    out: List[Sample] = []
    skipped = 0
    for item in items:
        snippet = item.get("snippet") or {}
        statistics = item.get("statistics") or {}
        if "publishedAt" not in snippet:
            raise ValueError(f"Video item has no snippet.publishedAt: {item!r}")
        views = statistics.get("viewCount")
        if views is None:
            skipped += 1
            continue
        out.append(Sample.from_raw(snippet["publishedAt"], views))
    if skipped:
        logger.debug("Skipped %d video item(s) without a view count", skipped)
    return out
