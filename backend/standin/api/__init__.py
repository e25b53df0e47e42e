"""API Layer: FastAPI route and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate to core.dispatch; no page logic lives here
"""
