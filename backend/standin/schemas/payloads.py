"""Payload Schemas: JSON bodies of the API info and health pages.

Invariants:
    - ApiInfo defaults are the full, fixed API description (no runtime values)
    - HealthStatus.status is always "healthy"; timestamp is an ISO-8601 instant
"""

from typing import Literal

from pydantic import BaseModel, Field


class ApiInfo(BaseModel):
    """Static description of the API surface."""
    message: str = "Strapi API"
    version: str = "4.x"
    status: str = "running"
    endpoints: list[str] = Field(
        default_factory=lambda: [
            "/api/users", "/api/auth", "/api/content-types",
        ],
    )
    documentation: str = "/documentation"


class HealthStatus(BaseModel):
    """Liveness stub body."""
    status: Literal["healthy"] = "healthy"
    timestamp: str
