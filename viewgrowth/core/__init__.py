"""
viewgrowth.core
===============

Foundational types: names and enums, the error taxonomy, sample value types
and analysis configuration. Nothing in here performs statistics.
"""
