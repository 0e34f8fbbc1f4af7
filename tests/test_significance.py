import math

import pytest
from scipy.stats import t as student_t

from viewgrowth.core.errors import InsufficientData, InvalidConfiguration
from viewgrowth.core.names import Verdict
from viewgrowth.stats.descriptive import SegmentStats
from viewgrowth.stats.methods.welch import (
    combined_variance,
    two_tailed_quantile,
    welch_satterthwaite_df,
)
from viewgrowth.stats.significance import decide, welch_test

BEFORE = SegmentStats(count=2, mean=150.0, variance=5000.0)
AFTER = SegmentStats(count=2, mean=1100.0, variance=20000.0)


def test_large_gap_is_higher():
    result = welch_test(BEFORE, AFTER)
    assert result.verdict is Verdict.HIGHER
    assert result.t_value == pytest.approx(950 / math.sqrt(12500))
    assert result.degrees_of_freedom == pytest.approx(156250000 / 106250000)
    assert result.critical_value == pytest.approx(
        student_t.ppf(0.975, result.degrees_of_freedom)
    )
    assert result.t_value > result.critical_value
    assert not result.degenerate
    assert result.is_significant


def test_swapping_segments_mirrors_the_result():
    forward = welch_test(BEFORE, AFTER)
    backward = welch_test(AFTER, BEFORE)
    assert backward.verdict is Verdict.LOWER
    assert backward.verdict is forward.verdict.flipped()
    assert backward.t_value == -forward.t_value
    assert backward.degrees_of_freedom == forward.degrees_of_freedom
    assert backward.critical_value == forward.critical_value


def test_no_difference_is_symmetric():
    a = SegmentStats(count=10, mean=100.0, variance=400.0)
    b = SegmentStats(count=12, mean=103.0, variance=900.0)
    assert welch_test(a, b).verdict is Verdict.NO_DIFFERENCE
    assert welch_test(b, a).verdict is Verdict.NO_DIFFERENCE


def test_repeated_calls_are_identical():
    assert welch_test(BEFORE, AFTER, 0.9) == welch_test(BEFORE, AFTER, 0.9)


def test_confidence_moves_the_critical_value():
    a = SegmentStats(count=30, mean=100.0, variance=100.0)
    b = SegmentStats(count=30, mean=105.0, variance=100.0)
    low = welch_test(a, b, confidence=0.8)
    high = welch_test(a, b, confidence=0.99)
    assert low.critical_value < high.critical_value
    assert low.t_value == high.t_value


def test_zero_variance_equal_means_is_no_difference():
    flat = SegmentStats(count=3, mean=5.0, variance=0.0)
    result = welch_test(flat, flat)
    assert result.verdict is Verdict.NO_DIFFERENCE
    assert result.t_value == 0.0
    assert result.degrees_of_freedom == 4.0
    assert result.degenerate
    assert math.isfinite(result.critical_value)


def test_zero_variance_unequal_means_is_unbounded():
    before = SegmentStats(count=2, mean=5.0, variance=0.0)
    after = SegmentStats(count=2, mean=7.0, variance=0.0)
    up = welch_test(before, after)
    down = welch_test(after, before)
    assert up.verdict is Verdict.HIGHER and up.t_value == math.inf
    assert down.verdict is Verdict.LOWER and down.t_value == -math.inf
    assert up.degrees_of_freedom == 2.0
    assert not math.isnan(up.critical_value)


def test_one_zero_variance_is_not_degenerate():
    before = SegmentStats(count=4, mean=10.0, variance=0.0)
    after = SegmentStats(count=4, mean=30.0, variance=16.0)
    result = welch_test(before, after)
    assert not result.degenerate
    assert result.degrees_of_freedom == pytest.approx(3.0)


@pytest.mark.parametrize("confidence", [0.0, 1.0, -0.5, 1.5, float("nan")])
def test_confidence_outside_unit_interval_is_rejected(confidence):
    with pytest.raises(InvalidConfiguration):
        welch_test(BEFORE, AFTER, confidence)


def test_small_segments_are_rejected():
    tiny = SegmentStats(count=1, mean=10.0, variance=0.0)
    with pytest.raises(InsufficientData) as excinfo:
        welch_test(tiny, AFTER)
    assert excinfo.value.segment == "before"
    with pytest.raises(InsufficientData) as excinfo:
        welch_test(BEFORE, tiny)
    assert excinfo.value.segment == "after"


def test_decide_boundaries():
    assert decide(2.0, 2.0) is Verdict.NO_DIFFERENCE
    assert decide(-2.0, 2.0) is Verdict.NO_DIFFERENCE
    assert decide(2.01, 2.0) is Verdict.HIGHER
    assert decide(-2.01, 2.0) is Verdict.LOWER


def test_method_helpers():
    assert combined_variance(20000.0, 2, 5000.0, 2) == 12500.0
    assert welch_satterthwaite_df(20000.0, 2, 5000.0, 2) == pytest.approx(1.4705882)
    assert math.isnan(welch_satterthwaite_df(0.0, 3, 0.0, 3))
    assert two_tailed_quantile(0.9) == pytest.approx(0.95)
