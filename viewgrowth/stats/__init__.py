"""
Statistics for comparing two segments of a view-count series.

1. **Methods** (viewgrowth.stats.methods):
   Generic maths independent of segments and verdicts (Welch–Satterthwaite
   degrees of freedom, Student-t critical values).

2. **Segment statistics** (viewgrowth.stats.descriptive,
   viewgrowth.stats.significance):
   Apply the methods to `Segment` / `SegmentStats` values and map the
   outcome onto a `Verdict`.

Example:
--------
>>> from viewgrowth.stats.methods.welch import two_tailed_quantile
>>> round(two_tailed_quantile(0.95), 6)
0.975
"""
