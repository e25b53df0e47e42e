"""Domain Types: enums for pages and content types.

Invariants:
    - Exactly five pages exist; the set is fixed for the process lifetime
    - Only two content types are ever produced

Design Decisions:
    - str Enums: values double as log field values without custom encoders
"""

from enum import Enum


class Page(str, Enum):
    """Response producers the router can select."""
    ADMIN_DASHBOARD = "admin_dashboard"
    API_INFO = "api_info"
    DOCUMENTATION = "documentation"
    HEALTH = "health"
    HOME = "home"


class ContentType(str, Enum):
    """Content types emitted by the producers."""
    HTML = "text/html; charset=utf-8"
    JSON = "application/json"
