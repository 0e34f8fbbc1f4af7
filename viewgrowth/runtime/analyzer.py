"""
viewgrowth.runtime.analyzer
===========================

Request/response orchestration of a growth analysis.

`run_analysis` is the pure pipeline: partition at the cutoff, describe both
segments, run the Welch test. A segment with fewer than two samples does not
raise out of the pipeline; it yields a `GrowthAnalysis` whose status is
`INSUFFICIENT_DATA`, and the test is never run.

`GrowthAnalyzer` adds configuration, cutoff resolution and memoisation: each
distinct (samples, cutoff, confidence) triple is analysed once.

Examples
--------
>>> from datetime import datetime
>>> from viewgrowth.core.samples import Sample
>>> samples = [Sample(datetime(2024, 1, 1), 100), Sample(datetime(2024, 1, 2), 200),
...            Sample(datetime(2024, 6, 1), 1000), Sample(datetime(2024, 6, 2), 1200)]
>>> analyzer = GrowthAnalyzer()
>>> result = analyzer.analyze(samples, cutoff="2024-03-01T00:00:00Z")
>>> result.status.value, result.verdict.verdict.value
('ok', 'higher')
>>> analyzer.analyze(samples[1:], cutoff="2024-03-01T00:00:00Z").insufficient_segment
<SegmentName.BEFORE: 'before'>
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from viewgrowth.core.config import AnalysisConfig, check_confidence
from viewgrowth.core.errors import InsufficientData
from viewgrowth.core.names import AnalysisStatus, SegmentName, Timeframe
from viewgrowth.core.samples import Sample, as_utc, samples_version
from viewgrowth.runtime.cache import AnalysisCache, AnalysisKey
from viewgrowth.runtime.cutoffs import CutoffLike, resolve_cutoff, utc_now
from viewgrowth.series.partition import partition
from viewgrowth.series.summarize import PlotSeries, summarize
from viewgrowth.stats.descriptive import SegmentStats, describe
from viewgrowth.stats.significance import TestVerdict, welch_test

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthAnalysis:
    """Outcome of one analysis request."""

    status: AnalysisStatus
    cutoff: datetime
    confidence: float
    before_count: int
    after_count: int

    # present only when status is OK
    before: Optional[SegmentStats] = None
    after: Optional[SegmentStats] = None
    verdict: Optional[TestVerdict] = None

    # present only when status is INSUFFICIENT_DATA
    insufficient_segment: Optional[SegmentName] = None

    @property
    def ok(self) -> bool:
        return self.status is AnalysisStatus.OK

    @property
    def total_samples(self) -> int:
        return self.before_count + self.after_count


def run_analysis(
    samples: Iterable[Sample], cutoff: datetime, confidence: float
) -> GrowthAnalysis:
    """Partition, describe and test; insufficient data becomes a typed result."""
    confidence = check_confidence(confidence)
    cutoff = as_utc(cutoff)
    before, after = partition(samples, cutoff)

    try:
        before_stats = describe(before)
        after_stats = describe(after)
    except InsufficientData as exc:
        logger.warning("Insufficient data for hypothesis test: %s", exc)
        return GrowthAnalysis(
            status=AnalysisStatus.INSUFFICIENT_DATA,
            cutoff=cutoff,
            confidence=confidence,
            before_count=len(before),
            after_count=len(after),
            insufficient_segment=SegmentName(exc.segment),
        )

    logger.debug(
        "Running Welch t-test at cutoff %s (n_before=%d, n_after=%d)",
        cutoff.isoformat(),
        before_stats.count,
        after_stats.count,
    )
    verdict = welch_test(before_stats, after_stats, confidence)
    return GrowthAnalysis(
        status=AnalysisStatus.OK,
        cutoff=cutoff,
        confidence=confidence,
        before_count=before_stats.count,
        after_count=after_stats.count,
        before=before_stats,
        after=after_stats,
        verdict=verdict,
    )


class GrowthAnalyzer:
    """
    Configured, memoising entry point for growth analyses.

    Parameters
    ----------
    config : AnalysisConfig, optional
        Confidence level and plot parameters; defaults to `AnalysisConfig()`
    cache : AnalysisCache, optional
        Shared memo; a private one is created when omitted
    clock : callable, optional
        Returns "now" for timeframe cutoffs; defaults to the UTC wall clock
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        cache: Optional[AnalysisCache[GrowthAnalysis]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or AnalysisConfig()
        self.cache: AnalysisCache[GrowthAnalysis] = (
            cache if cache is not None else AnalysisCache()
        )
        self._clock = clock or utc_now

    def key_for(
        self, samples: List[Sample], cutoff: CutoffLike = Timeframe.ONE_YEAR
    ) -> AnalysisKey:
        return AnalysisKey(
            samples_version=samples_version(samples),
            cutoff=resolve_cutoff(cutoff, now=self._clock()),
            confidence=self.config.confidence,
        )

    def analyze(
        self, samples: Iterable[Sample], cutoff: CutoffLike = Timeframe.ONE_YEAR
    ) -> GrowthAnalysis:
        """Analyse `samples` at `cutoff`, reusing a cached result when available."""
        samples = list(samples)
        key = self.key_for(samples, cutoff)
        return self.cache.get_or_compute(
            key, lambda: run_analysis(samples, key.cutoff, key.confidence)
        )

    def summarize(self, samples: Iterable[Sample]) -> PlotSeries:
        """Plot series using the configured window, point budget and label format."""
        return summarize(
            samples,
            window_size=self.config.moving_average_window,
            max_points=self.config.max_plot_points,
            label_format=self.config.label_format,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Configuration and cache statistics."""
        return {
            "confidence": self.config.confidence,
            "moving_average_window": self.config.moving_average_window,
            "max_plot_points": self.config.max_plot_points,
            "cached_analyses": len(self.cache),
            "cache_hits": self.cache.hits,
            "cache_misses": self.cache.misses,
        }

    def reset(self) -> None:
        """Drop every memoised result."""
        self.cache.clear()
