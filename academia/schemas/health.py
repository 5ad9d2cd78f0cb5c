"""Health check payload."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    success: bool = True
    status: Literal["ok", "degraded"] = Field(description="'degraded' when the database is unreachable")
    version: str
    environment: str = Field(description="APP_ENV (dev or prod)")
    database: Literal["connected", "disconnected"]
