"""Pydantic Schemas: JSON payload contracts for the JSON pages.

Invariants:
    - Schemas describe response bodies only; requests carry no payload
"""
