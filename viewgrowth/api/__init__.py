"""
viewgrowth.api - User-Friendly Facade
=====================================

Off-the-shelf entry points organised by what a dashboard needs to show.
In terms of design patterns, this is the facade pattern over
`viewgrowth.runtime`, `viewgrowth.series` and `viewgrowth.reporting`.

Examples
--------
>>> from viewgrowth.api.growth import analyze_growth, growth_series
>>> from viewgrowth.synthetic import synthetic_samples
>>> samples = synthetic_samples(60, seed=11)
>>> result = analyze_growth(samples, "6months")
>>> result.status.value in {"ok", "insufficient_data"}
True

Unified Interface
-----------------
All functionality is consolidated in `viewgrowth.api.growth`:
- `analyze_growth()`: Welch test of recent vs. older videos
- `growth_series()`: decimated moving-average / cumulative series
- `growth_report()`: analysis rendered as sentences
- `channel_growth()`: report and series straight from API items
"""
