"""
viewgrowth.api.growth
=====================

Growth analysis facade with dashboard-oriented interfaces.

Examples
--------
>>> from datetime import datetime, timezone
>>> from viewgrowth.api.growth import analyze_growth, growth_series, growth_report
>>> from viewgrowth.synthetic import synthetic_samples
>>> now = datetime(2025, 1, 1, tzinfo=timezone.utc)
>>> samples = synthetic_samples(200, seed=3, now=now, growth=5.0)
>>> analyze_growth(samples, "3months", now=now).verdict.verdict.value
'higher'
>>> len(growth_series(samples, max_points=40)) <= 40
True
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Tuple

from viewgrowth.core.config import AnalysisConfig
from viewgrowth.core.names import Timeframe
from viewgrowth.core.samples import Sample, samples_from_videos
from viewgrowth.reporting.growth import GrowthReport, growth_report as render_report
from viewgrowth.runtime.analyzer import GrowthAnalysis, GrowthAnalyzer
from viewgrowth.runtime.cutoffs import CutoffLike
from viewgrowth.series.summarize import PlotSeries


def _analyzer(
    confidence: float, now: Optional[datetime], **config: Any
) -> GrowthAnalyzer:
    clock = (lambda: now) if now is not None else None
    return GrowthAnalyzer(AnalysisConfig(confidence=confidence, **config), clock=clock)


def analyze_growth(
    samples: Iterable[Sample],
    cutoff: CutoffLike = Timeframe.ONE_YEAR,
    confidence: float = 0.95,
    now: Optional[datetime] = None,
) -> GrowthAnalysis:
    """
    Test whether videos published since `cutoff` perform differently.

    Parameters
    ----------
    samples : iterable of Sample
        The channel's (publish time, views) observations
    cutoff : Timeframe, str or datetime, default=Timeframe.ONE_YEAR
        ``"1month"``, ``"3months"``, ``"6months"``, ``"1year"``, ``"all"``
        or an explicit instant
    confidence : float, default=0.95
        Two-tailed confidence level
    now : datetime, optional
        Reference instant for timeframe cutoffs

    Returns
    -------
    GrowthAnalysis
        A verdict, or an insufficient-data outcome naming the short segment
    """
    return _analyzer(confidence, now).analyze(samples, cutoff)


def growth_series(
    samples: Iterable[Sample],
    window_size: int = 12,
    max_points: int = 40,
    label_format: str = "%Y-%m-%d",
) -> PlotSeries:
    """Moving average, cumulative total and raw views, decimated for a chart."""
    analyzer = _analyzer(
        0.95,
        None,
        moving_average_window=window_size,
        max_plot_points=max_points,
        label_format=label_format,
    )
    return analyzer.summarize(samples)


def growth_report(
    samples: Iterable[Sample],
    cutoff: CutoffLike = Timeframe.ONE_YEAR,
    confidence: float = 0.95,
    now: Optional[datetime] = None,
) -> GrowthReport:
    """Analyse and render in one call."""
    return render_report(analyze_growth(samples, cutoff, confidence, now))


def channel_growth(
    videos: Iterable[Mapping[str, Any]],
    cutoff: CutoffLike = Timeframe.ONE_YEAR,
    config: Optional[AnalysisConfig] = None,
    now: Optional[datetime] = None,
) -> Tuple[GrowthReport, PlotSeries]:
    """
    Report and plot series straight from video-platform API items.

    Items are dicts with ``snippet.publishedAt`` and ``statistics.viewCount``.
    """
    samples = samples_from_videos(videos)
    clock = (lambda: now) if now is not None else None
    analyzer = GrowthAnalyzer(config or AnalysisConfig(), clock=clock)
    return render_report(analyzer.analyze(samples, cutoff)), analyzer.summarize(samples)
