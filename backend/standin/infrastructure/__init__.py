"""Infrastructure Layer: host process access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - Host failures are mapped to typed StandinError subclasses
"""
