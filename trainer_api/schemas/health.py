"""
Trainer API — Health Check Schema
===================================
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    assembly_strategy: str = Field(description="Active domain assembly strategy")
    uptime_seconds: float = Field(description="Seconds since service started")
