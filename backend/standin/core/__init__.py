"""Core Layer: routing, page producers and metrics arithmetic. No IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Host state arrives only through MetricsProvider / Clock arguments

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
