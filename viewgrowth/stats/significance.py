"""
viewgrowth.stats.significance
=============================

Welch–Satterthwaite two-sample t-test on segment statistics.

The test asks whether the "after" segment's mean view count differs from the
"before" segment's, without assuming equal variances:

    t  = (mean_after - mean_before) / sqrt(var_after/n_after + var_before/n_before)
    df = Welch–Satterthwaite approximation
    t* = Student-t quantile at confidence + (1 - confidence)/2

Decision rule:
    - HIGHER if t > t*
    - LOWER if t < -t*
    - NO_DIFFERENCE otherwise

When both segments have zero variance the standard error is zero. Equal means
give NO_DIFFERENCE with t = 0; unequal means give t = ±inf and therefore
HIGHER/LOWER. The Satterthwaite df is 0/0 there, so the pooled df
(n_before + n_after - 2) is reported instead and the verdict is flagged
`degenerate`.

Examples
--------
>>> from viewgrowth.stats.descriptive import SegmentStats
>>> before = SegmentStats(count=2, mean=150.0, variance=5000.0)
>>> after = SegmentStats(count=2, mean=1100.0, variance=20000.0)
>>> result = welch_test(before, after)
>>> result.verdict
<Verdict.HIGHER: 'higher'>
>>> round(result.t_value, 4), round(result.degrees_of_freedom, 4)
(8.4971, 1.4706)
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from viewgrowth.core.config import DEFAULT_CONFIDENCE, check_confidence
from viewgrowth.core.errors import InsufficientData
from viewgrowth.core.names import SegmentName, Verdict
from viewgrowth.stats.descriptive import MIN_SAMPLES, SegmentStats
from viewgrowth.stats.methods.welch import student_t_critical, welch_t


@dataclass(frozen=True)
class TestVerdict:
    """Outcome of one Welch test plus the statistics it was decided on."""

    __test__ = False  # not a pytest test class

    verdict: Verdict
    t_value: float
    degrees_of_freedom: float
    critical_value: float
    confidence: float = DEFAULT_CONFIDENCE
    degenerate: bool = False

    @property
    def is_significant(self) -> bool:
        return self.verdict is not Verdict.NO_DIFFERENCE


def decide(t_value: float, critical_value: float) -> Verdict:
    """Map a t statistic onto a verdict against a two-tailed critical value."""
    if t_value > critical_value:
        return Verdict.HIGHER
    if t_value < -critical_value:
        return Verdict.LOWER
    return Verdict.NO_DIFFERENCE


def welch_test(
    before: SegmentStats,
    after: SegmentStats,
    confidence: float = DEFAULT_CONFIDENCE,
) -> TestVerdict:
    """
    Compare `after` against `before` with Welch's t-test.

    Parameters
    ----------
    before : SegmentStats
        Statistics of the samples published before the cutoff
    after : SegmentStats
        Statistics of the samples published at or after the cutoff
    confidence : float, default=0.95
        Two-tailed confidence level in (0, 1)

    Returns
    -------
    TestVerdict
        Verdict and the (t, df, critical value) triple

    Raises
    ------
    InsufficientData
        If either segment has fewer than two samples
    InvalidConfiguration
        If `confidence` is outside (0, 1)
    """
    confidence = check_confidence(confidence)
    if before.count < MIN_SAMPLES:
        raise InsufficientData(SegmentName.BEFORE, before.count)
    if after.count < MIN_SAMPLES:
        raise InsufficientData(SegmentName.AFTER, after.count)

    t_value, df, _ = welch_t(
        after.mean, after.variance, after.count,
        before.mean, before.variance, before.count,
    )
    degenerate = math.isnan(df)
    if degenerate:
        df = float(before.count + after.count - 2)

    critical = student_t_critical(confidence, df)
    return TestVerdict(
        verdict=decide(t_value, critical),
        t_value=float(t_value),
        degrees_of_freedom=float(df),
        critical_value=critical,
        confidence=confidence,
        degenerate=degenerate,
    )
