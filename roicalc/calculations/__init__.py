"""
Financial Calculation Engine

Pure calculation modules for buy-and-renovate and land-and-build
investment analysis. No I/O, no shared state.
"""

from roicalc.calculations import amortization, aggregation, returns, analysis, comparison

__all__ = ["amortization", "aggregation", "returns", "analysis", "comparison"]
