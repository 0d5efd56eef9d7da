"""
Noteful API — Shared Response Schemas
======================================

What:  Error envelope and health check models used across routers.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standardized error body for every failure.

    Example:
        {"error": {"message": "Note does not exist"}}
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Returned by GET /health for load balancer and Docker probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
