"""Page Producers: one pure renderer per page.

Invariants:
    - Producers never call each other and never mutate shared state
    - Inputs are a metrics snapshot and/or a clock; output is a body string
"""
