"""Core business logic layer.

Subpackages:
- valuation: savings estimate and catalog filtering over in-memory selections
- reporting: history trend, aggregate stats and per-plan summaries
- ledger: plan ledger and catalog services backing the HTTP API
"""
__all__ = ["valuation", "reporting", "ledger"]
