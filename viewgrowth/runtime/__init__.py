"""
viewgrowth.runtime
==================

Runtime pieces that sit around the pure statistics.

Key Components
--------------
- `resolve_cutoff`: timeframe or instant -> UTC cutoff
- `AnalysisCache`: memo keyed by (samples version, cutoff, confidence)
- `run_analysis`: partition -> describe -> Welch test, as one pure call
- `GrowthAnalyzer`: configured, memoising entry point

Examples
--------
>>> from viewgrowth.runtime.analyzer import GrowthAnalyzer
>>> from viewgrowth.core.config import AnalysisConfig
>>> analyzer = GrowthAnalyzer(AnalysisConfig(confidence=0.99))
>>> analyzer.get_summary()["confidence"]
0.99
"""
