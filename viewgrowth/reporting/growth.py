"""
viewgrowth.reporting.growth
===========================

Human-readable views of a growth analysis and axis scales for its plot.

The verdict sentence is one of three fixed templates, conditioned on the
confidence level; an analysis without enough data gets a "not enough videos"
sentence naming the side of the cutoff that is short.

Examples
--------
>>> from datetime import datetime
>>> from viewgrowth.core.samples import Sample
>>> from viewgrowth.runtime.analyzer import run_analysis
>>> samples = [Sample(datetime(2024, 1, 1), 100), Sample(datetime(2024, 1, 2), 200),
...            Sample(datetime(2024, 6, 1), 1000), Sample(datetime(2024, 6, 2), 1200)]
>>> report = growth_report(run_analysis(samples, datetime(2024, 3, 1), 0.95))
>>> report.headline
'The recent videos are performing significantly better at a 95% confidence level.'
>>> report.details[0]
'Average views before Fri Mar 01 2024: 150.00'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Tuple

import polars as pl

from viewgrowth.core.names import AnalysisStatus, SegmentName, Verdict
from viewgrowth.reporting.magnitude import MagnitudeScale, axis_scale, format_magnitude
from viewgrowth.runtime.analyzer import GrowthAnalysis
from viewgrowth.series.summarize import PlotSeries

DATE_FORMAT = "%a %b %d %Y"

VERDICT_TEMPLATES: Dict[Verdict, str] = {
    Verdict.HIGHER: "The recent videos are performing significantly better at a {confidence} confidence level.",
    Verdict.LOWER: "The recent videos are performing significantly worse at a {confidence} confidence level.",
    Verdict.NO_DIFFERENCE: "No significant difference in performance has been detected at the {confidence} confidence level.",
}
NOT_ENOUGH_TEMPLATE = "There are not enough videos {side} {date} for analysis."
NO_VIDEOS_MESSAGE = "The channel hasn't uploaded enough videos."


def format_confidence(confidence: float) -> str:
    """0.95 -> '95%', 0.975 -> '97.5%'."""
    return f"{round(confidence * 100, 2):g}%"


@dataclass(frozen=True)
class GrowthReport:
    """Headline plus optional segment summary and test statistics."""

    headline: str
    details: Tuple[str, ...] = ()
    test_lines: Tuple[str, ...] = ()

    def lines(self) -> List[str]:
        return [*self.details, *self.test_lines, self.headline]

    def as_text(self) -> str:
        return "\n".join(self.lines())


def verdict_sentence(verdict: Verdict, confidence: float) -> str:
    return VERDICT_TEMPLATES[verdict].format(confidence=format_confidence(confidence))


def growth_report(analysis: GrowthAnalysis) -> GrowthReport:
    """Render `analysis` with the dashboard's wording."""
    date = analysis.cutoff.strftime(DATE_FORMAT)

    if analysis.total_samples == 0:
        return GrowthReport(headline=NO_VIDEOS_MESSAGE)

    if analysis.status is AnalysisStatus.INSUFFICIENT_DATA:
        side = (analysis.insufficient_segment or SegmentName.BEFORE).value
        return GrowthReport(headline=NOT_ENOUGH_TEMPLATE.format(side=side, date=date))

    before, after, verdict = analysis.before, analysis.after, analysis.verdict
    if before is None or after is None or verdict is None:
        raise ValueError("A successful analysis must carry both segments and a verdict")

    details = (
        f"Average views before {date}: {format_magnitude(before.mean)}",
        f"Average views after {date}: {format_magnitude(after.mean)}",
        f"Standard Deviation in views before {date}: {format_magnitude(before.std_dev)}",
        f"Standard Deviation in views after {date}: {format_magnitude(after.std_dev)}",
    )
    test_lines = (
        f"t Statistic value: {verdict.t_value:.3f}",
        f"Degrees of Freedom (df): {verdict.degrees_of_freedom:.3f}",
        f"Critical t value: {verdict.critical_value:.3f}",
    )
    return GrowthReport(
        headline=verdict_sentence(verdict.verdict, verdict.confidence),
        details=details,
        test_lines=test_lines,
    )


def segment_table(analysis: GrowthAnalysis) -> pl.DataFrame:
    """
    One row per segment: segment, count, mean, std_dev.

    Statistics are null for an analysis that stopped on insufficient data.
    """
    rows = []
    for name, count, stats in (
        (SegmentName.BEFORE, analysis.before_count, analysis.before),
        (SegmentName.AFTER, analysis.after_count, analysis.after),
    ):
        rows.append(
            {
                "segment": name.value,
                "count": count,
                "mean": stats.mean if stats else None,
                "std_dev": stats.std_dev if stats else None,
            }
        )
    return pl.DataFrame(
        rows,
        schema={
            "segment": pl.Utf8,
            "count": pl.Int64,
            "mean": pl.Float64,
            "std_dev": pl.Float64,
        },
    )


class ChartAxes(NamedTuple):
    """Scales for the two y-axes of the growth chart."""

    cumulative_total: MagnitudeScale
    moving_average: MagnitudeScale


def chart_axes(plot: PlotSeries) -> ChartAxes:
    """
    Pick one scale per axis from the largest value it plots.

    >>> plot = PlotSeries(("a", "b"), (10, 2_000), (10, 1_005), (10, 2_010))
    >>> axes = chart_axes(plot)
    >>> axes.cumulative_total.suffix, axes.moving_average.suffix
    ('K', 'K')
    """
    return ChartAxes(
        cumulative_total=axis_scale(plot.cumulative_total),
        moving_average=axis_scale(plot.moving_average),
    )
