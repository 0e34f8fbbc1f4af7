"""
viewgrowth.series
=================

Operations over the time-ordered sample series as a whole:

- `viewgrowth.series.partition`: before/after split at a cutoff
- `viewgrowth.series.summarize`: moving average, cumulative total and
  stride decimation for plotting
"""
