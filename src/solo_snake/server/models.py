"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from solo_snake.config import DEFAULT_FRAME_RATE, GRID_HEIGHT, GRID_WIDTH


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    grid_width: int = Field(default=GRID_WIDTH, ge=4, le=200)
    grid_height: int = Field(default=GRID_HEIGHT, ge=4, le=200)
    frame_rate: int = Field(default=DEFAULT_FRAME_RATE, ge=1, le=240)
    seed: int | None = None


class KeyRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/keys."""

    key: str = Field(min_length=1, max_length=32)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    phase: str
    score: int
    level: int
    grid_width: int
    grid_height: int
    frame_rate: int
