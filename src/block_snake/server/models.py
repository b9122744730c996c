"""Pydantic models for API response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConfigResponse(BaseModel):
    """Public view of the active game configuration."""

    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    spawn: tuple[int, int]
    initial_direction: str
    move_interval_ms: int = Field(gt=0)
    clock_interval_ms: int = Field(gt=0)


class HighScoreResponse(BaseModel):
    """Best score recorded in the shared store."""

    high_score: int = Field(ge=0)
