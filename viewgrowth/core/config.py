"""
viewgrowth.core.config
======================

Tunable parameters of a growth analysis.

Examples
--------
>>> cfg = AnalysisConfig()
>>> cfg.confidence, cfg.moving_average_window, cfg.max_plot_points
(0.95, 12, 40)
>>> AnalysisConfig(max_plot_points=0)
Traceback (most recent call last):
...
viewgrowth.core.errors.InvalidConfiguration: max_plot_points must be positive, got 0
"""

from __future__ import annotations
from dataclasses import dataclass

from viewgrowth.core.errors import InvalidConfiguration

DEFAULT_CONFIDENCE = 0.95
DEFAULT_MOVING_AVERAGE_WINDOW = 12
DEFAULT_MAX_PLOT_POINTS = 40
DEFAULT_LABEL_FORMAT = "%Y-%m-%d"


def check_confidence(confidence: float) -> float:
    """Return `confidence` as a float, rejecting values outside (0, 1)."""
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            f"Confidence must be a number, got {confidence!r}"
        ) from None
    if not (0.0 < value < 1.0):
        raise InvalidConfiguration(f"Confidence must be in (0, 1), got {confidence}")
    return value


def check_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Parameters shared by the significance test and the plot summary.

    Parameters
    ----------
    confidence : float, default=0.95
        Two-tailed confidence level of the t-test, strictly inside (0, 1)
    moving_average_window : int, default=12
        Trailing window width of the moving average
    max_plot_points : int, default=40
        Upper bound on points kept after decimation
    label_format : str, default="%Y-%m-%d"
        strftime pattern for plot labels
    """

    confidence: float = DEFAULT_CONFIDENCE
    moving_average_window: int = DEFAULT_MOVING_AVERAGE_WINDOW
    max_plot_points: int = DEFAULT_MAX_PLOT_POINTS
    label_format: str = DEFAULT_LABEL_FORMAT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise `InvalidConfiguration` on the first out-of-range parameter."""
        check_confidence(self.confidence)
        check_positive("moving_average_window", self.moving_average_window)
        check_positive("max_plot_points", self.max_plot_points)
        if not self.label_format:
            raise InvalidConfiguration("label_format must be a non-empty string")
