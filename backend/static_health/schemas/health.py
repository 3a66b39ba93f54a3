"""Health report schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthReport(BaseModel):
    """Liveness payload returned by ``GET /health``."""

    status: Literal["ok"] = "ok"
    uptime: float = Field(ge=0.0, description="Seconds since process start")
    timestamp: str = Field(description="Current time, ISO-8601 UTC")
