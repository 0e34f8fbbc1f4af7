"""
viewgrowth - growth analysis for a channel's video view counts.

A channel's catalogue is a timeline of (publish time, view count) samples.
viewgrowth answers one question about that timeline: are the videos published
after a cutoff doing significantly better or worse than the ones published
before it? It also turns the same timeline into a compact, smoothed series
that a chart can draw without choking on thousands of points.

Everything here is a pure function of its numeric inputs. There is no network
access, no persistence and no rendering; callers feed samples in and get value
objects back:

- `viewgrowth.series`: partitioning at a cutoff and plot-series summaries
- `viewgrowth.stats`: descriptive statistics and the Welch–Satterthwaite t-test
- `viewgrowth.reporting`: magnitude formatting and human-readable reports
- `viewgrowth.runtime`: cutoff resolution, memoisation and orchestration
- `viewgrowth.api`: a small facade over all of the above

Example
-------
>>> import viewgrowth
>>> assert hasattr(viewgrowth, "core")
>>> assert hasattr(viewgrowth, "stats")
"""

from viewgrowth.__version__ import __version__
from viewgrowth import core, stats, series, runtime, reporting

__all__ = ["__version__", "core", "stats", "series", "runtime", "reporting"]
