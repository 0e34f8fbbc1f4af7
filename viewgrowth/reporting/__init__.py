"""
viewgrowth.reporting
====================

Presentation helpers that turn numbers into text:

- `viewgrowth.reporting.magnitude`: K/M/B scaling with fixed decimals
- `viewgrowth.reporting.growth`: verdict report, segment table, chart axes
"""
