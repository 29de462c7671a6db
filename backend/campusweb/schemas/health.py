"""Campus Web — health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    environment: str
    uptime_seconds: float
