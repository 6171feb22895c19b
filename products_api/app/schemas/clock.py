"""
Response models for the time log endpoints.
"""

from typing import List

from pydantic import BaseModel, Field


class CurrentTime(BaseModel):
    current_time: str = Field(..., examples=["2025-09-01T10:00:00-04:00"])


class LoggedTimes(BaseModel):
    timestamps: List[str]
