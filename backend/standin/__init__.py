"""Strapi stand-in status server.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
