"""
Pydantic models for the dashboard API.
"""

from __future__ import annotations

from pydantic import BaseModel


NO_DATA_MESSAGE = "No data yet. Run taskmgrr.sh first!"


class NoDataResponse(BaseModel):
    error: str = NO_DATA_MESSAGE


class HealthResponse(BaseModel):
    status: str = "ok"


__all__ = ["NO_DATA_MESSAGE", "NoDataResponse", "HealthResponse"]
