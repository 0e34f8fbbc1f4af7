"""
viewgrowth.stats.methods.welch
==============================

Core mathematics of Welch's unequal-variance t-test.

Provides the building blocks used by `viewgrowth.stats.significance`:
- the combined variance of the mean difference
- the Welch–Satterthwaite degrees-of-freedom approximation
- two-tailed Student's t critical values (via scipy)

These functions know nothing about segments or verdicts.
"""

from __future__ import annotations
import math
from typing import Tuple

from scipy.stats import t as student_t


def combined_variance(var_a: float, n_a: int, var_b: float, n_b: int) -> float:
    """Variance of the difference of two sample means: var_a/n_a + var_b/n_b."""
    return var_a / n_a + var_b / n_b


def welch_satterthwaite_df(var_a: float, n_a: int, var_b: float, n_b: int) -> float:
    """Welch–Satterthwaite approximation of the degrees of freedom.

    Args:
        var_a: Sample variance of group A
        n_a: Size of group A (at least 2)
        var_b: Sample variance of group B
        n_b: Size of group B (at least 2)

    Returns:
        (var_a/n_a + var_b/n_b)² / ((var_a/n_a)²/(n_a-1) + (var_b/n_b)²/(n_b-1)),
        generally non-integer. NaN when both variances are zero.

    Examples:
        >>> round(welch_satterthwaite_df(20000.0, 2, 5000.0, 2), 6)
        1.470588
    """
    numerator = combined_variance(var_a, n_a, var_b, n_b) ** 2
    term_a = (var_a / n_a) ** 2 / (n_a - 1)
    term_b = (var_b / n_b) ** 2 / (n_b - 1)
    denominator = term_a + term_b
    if denominator == 0.0:
        return float("nan")
    return numerator / denominator


def two_tailed_quantile(confidence: float) -> float:
    """Upper-tail probability point for a two-sided test, e.g. 0.95 -> 0.975."""
    return confidence + (1.0 - confidence) / 2.0


def student_t_critical(confidence: float, df: float) -> float:
    """Two-tailed critical value of Student's t with `df` degrees of freedom.

    Examples:
        >>> round(student_t_critical(0.95, 10), 3)
        2.228
    """
    return float(student_t.ppf(two_tailed_quantile(confidence), df))


def welch_t(
    mean_a: float, var_a: float, n_a: int, mean_b: float, var_b: float, n_b: int
) -> Tuple[float, float, float]:
    """Return (t, df, delta) for H0: mean_a == mean_b, with t = (mean_a - mean_b) / SE.

    A zero standard error yields t = ±inf (or 0.0 when the means are equal)
    and a NaN df; callers decide how to present that case.
    """
    delta = mean_a - mean_b
    var = combined_variance(var_a, n_a, var_b, n_b)
    se = math.sqrt(var)
    if se == 0.0:
        t_value = 0.0 if delta == 0 else math.copysign(math.inf, delta)
    else:
        t_value = delta / se
    return t_value, welch_satterthwaite_df(var_a, n_a, var_b, n_b), delta
