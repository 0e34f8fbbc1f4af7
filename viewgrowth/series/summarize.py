"""
viewgrowth.series.summarize
===========================

Plot-ready summary of a full view-count series.

Three aligned series are derived from the time-ordered views:

- **moving average**: trailing window of `window_size` samples, narrower at
  the start of the series (no zero padding), rounded half-up to an integer
- **cumulative total**: running sum of views
- **raw views**: unchanged

When the series is longer than `max_points`, every `step`-th row is kept
(`step = ceil(n / max_points)`, starting at index 0). This is a stride sample,
not a re-aggregation; it drops points rather than merging them, and it is
applied to the whole frame so the columns stay index-aligned.

Examples
--------
>>> from datetime import datetime, timedelta
>>> from viewgrowth.core.samples import Sample
>>> start = datetime(2024, 1, 1)
>>> samples = [Sample(start + timedelta(days=i), i + 1) for i in range(10)]
>>> plot = summarize(samples, window_size=3)
>>> list(plot.moving_average)
[1, 2, 2, 3, 4, 5, 6, 7, 8, 9]
>>> list(plot.cumulative_total)
[1, 3, 6, 10, 15, 21, 28, 36, 45, 55]
>>> len(summarize(samples, window_size=3, max_points=4))
4
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import polars as pl

from viewgrowth.core.config import (
    DEFAULT_LABEL_FORMAT,
    DEFAULT_MAX_PLOT_POINTS,
    DEFAULT_MOVING_AVERAGE_WINDOW,
    check_positive,
)
from viewgrowth.core.samples import Sample, samples_frame, sort_samples


@dataclass(frozen=True)
class PlotSeries:
    """Parallel, index-aligned sequences for a chart."""

    labels: Tuple[str, ...]
    raw_values: Tuple[int, ...]
    moving_average: Tuple[int, ...]
    cumulative_total: Tuple[int, ...]

    def __post_init__(self) -> None:
        lengths = {
            len(self.labels),
            len(self.raw_values),
            len(self.moving_average),
            len(self.cumulative_total),
        }
        if len(lengths) != 1:
            raise ValueError(f"PlotSeries sequences differ in length: {sorted(lengths)}")

    def __len__(self) -> int:
        return len(self.labels)

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame(
            {
                "label": list(self.labels),
                "views": list(self.raw_values),
                "moving_average": list(self.moving_average),
                "cumulative_total": list(self.cumulative_total),
            },
            schema={
                "label": pl.Utf8,
                "views": pl.Int64,
                "moving_average": pl.Int64,
                "cumulative_total": pl.Int64,
            },
        )


def moving_average_expr(column: str, window_size: int) -> pl.Expr:
    """Trailing mean over up to `window_size` rows, rounded half-up.

    The rolling sum stays integral, so the mean is exact before rounding.
    """
    width = pl.min_horizontal(
        pl.int_range(1, pl.len() + 1, dtype=pl.Int64),
        pl.lit(window_size, dtype=pl.Int64),
    )
    window_sum = pl.col(column).rolling_sum(window_size=window_size, min_samples=1)
    return ((window_sum / width) + 0.5).floor().cast(pl.Int64)


def cumulative_expr(column: str) -> pl.Expr:
    return pl.col(column).cum_sum()


def decimation_step(n: int, max_points: int) -> int:
    """1 when `n` fits, else ceil(n / max_points)."""
    if n <= max_points:
        return 1
    return -(-n // max_points)


def decimate(frame: pl.DataFrame, max_points: int) -> pl.DataFrame:
    """Keep rows whose index is a multiple of the decimation step."""
    step = decimation_step(frame.height, max_points)
    if step == 1:
        return frame
    return frame.gather_every(step)


def summary_frame(
    samples: Sequence[Sample],
    window_size: int = DEFAULT_MOVING_AVERAGE_WINDOW,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> pl.DataFrame:
    """Undecimated frame: timestamp, label, views, moving_average, cumulative_total."""
    check_positive("window_size", window_size)
    frame = samples_frame(sort_samples(samples))
    return frame.with_columns(
        pl.col("timestamp").dt.strftime(label_format).alias("label"),
        moving_average_expr("views", window_size).alias("moving_average"),
        cumulative_expr("views").alias("cumulative_total"),
    ).select("timestamp", "label", "views", "moving_average", "cumulative_total")


def summarize(
    samples: Iterable[Sample],
    window_size: int = DEFAULT_MOVING_AVERAGE_WINDOW,
    max_points: int = DEFAULT_MAX_PLOT_POINTS,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> PlotSeries:
    """
    Build the decimated plot series for `samples`.

    Parameters
    ----------
    samples : iterable of Sample
        Observations in any order; they are sorted by timestamp first
    window_size : int, default=12
        Moving-average window width, > 0
    max_points : int, default=40
        Upper bound on the number of points returned, > 0
    label_format : str, default="%Y-%m-%d"
        strftime pattern for the labels (UTC dates)

    Raises
    ------
    InvalidConfiguration
        If `window_size` or `max_points` is not a positive integer
    """
    check_positive("max_points", max_points)
    frame = decimate(summary_frame(list(samples), window_size, label_format), max_points)
    return PlotSeries(
        labels=tuple(frame["label"].to_list()),
        raw_values=tuple(frame["views"].to_list()),
        moving_average=tuple(frame["moving_average"].to_list()),
        cumulative_total=tuple(frame["cumulative_total"].to_list()),
    )
