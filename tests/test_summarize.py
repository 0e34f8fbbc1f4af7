from datetime import datetime, timedelta, timezone

import polars as pl
import pytest

from viewgrowth.core.errors import InvalidConfiguration
from viewgrowth.series.summarize import (
    PlotSeries,
    decimation_step,
    summarize,
    summary_frame,
)

from conftest import make_samples


def test_ten_samples_window_three():
    plot = summarize(make_samples(list(range(1, 11))), window_size=3, max_points=40)
    assert list(plot.raw_values) == list(range(1, 11))
    assert list(plot.moving_average) == [1, 2, 2, 3, 4, 5, 6, 7, 8, 9]
    assert list(plot.cumulative_total) == [1, 3, 6, 10, 15, 21, 28, 36, 45, 55]
    assert plot.labels[0] == "2024-01-01"
    assert plot.labels[-1] == "2024-01-10"


def test_moving_average_rounds_half_up():
    plot = summarize(make_samples([1, 2, 5, 6]), window_size=2)
    assert list(plot.moving_average) == [1, 2, 4, 6]


def test_first_point_is_raw_value_and_last_cumulative_is_total():
    values = [40, 7, 1000, 3, 3, 900, 12]
    plot = summarize(make_samples(values), window_size=4)
    assert plot.moving_average[0] == values[0]
    assert plot.cumulative_total[-1] == sum(values)


def test_window_larger_than_series_is_running_mean():
    plot = summarize(make_samples([10, 20, 30]), window_size=12)
    assert list(plot.moving_average) == [10, 15, 20]


@pytest.mark.parametrize("n, max_points, expected", [(10, 40, 10), (40, 40, 40), (41, 40, 21), (100, 40, 34), (1000, 40, 40)])
def test_decimation_bounds_length(n, max_points, expected):
    plot = summarize(make_samples([1] * n), window_size=3, max_points=max_points)
    assert len(plot) == expected
    assert len(plot) <= max_points


def test_decimation_keeps_columns_aligned():
    values = list(range(1, 101))
    full = summary_frame(make_samples(values), window_size=5)
    plot = summarize(make_samples(values), window_size=5, max_points=10)
    step = decimation_step(100, 10)
    assert step == 10
    assert list(plot.raw_values) == full["views"].to_list()[::step]
    assert list(plot.moving_average) == full["moving_average"].to_list()[::step]
    assert list(plot.cumulative_total) == full["cumulative_total"].to_list()[::step]
    assert list(plot.labels) == full["label"].to_list()[::step]


def test_unsorted_input_is_sorted_first():
    samples = make_samples([1, 2, 3, 4])
    plot = summarize(list(reversed(samples)), window_size=2)
    assert list(plot.raw_values) == [1, 2, 3, 4]


def test_custom_label_format_uses_utc():
    tz = timezone(timedelta(hours=-5))
    samples = make_samples([1], start=datetime(2024, 3, 1, 22, 0, tzinfo=tz))
    plot = summarize(samples, label_format="%d/%m/%Y %H")
    assert plot.labels == ("02/03/2024 03",)


def test_empty_input_gives_empty_series():
    plot = summarize([])
    assert len(plot) == 0
    assert plot.to_frame().height == 0


@pytest.mark.parametrize("kwargs", [{"window_size": 0}, {"max_points": 0}, {"window_size": -2}, {"max_points": 2.5}])
def test_invalid_parameters_are_rejected(kwargs):
    with pytest.raises(InvalidConfiguration):
        summarize(make_samples([1, 2, 3]), **kwargs)


def test_plot_series_requires_equal_lengths():
    with pytest.raises(ValueError):
        PlotSeries(("a",), (1, 2), (1,), (1,))


def test_to_frame_schema():
    frame = summarize(make_samples([5, 6])).to_frame()
    assert frame.columns == ["label", "views", "moving_average", "cumulative_total"]
    assert frame.schema["cumulative_total"] == pl.Int64
