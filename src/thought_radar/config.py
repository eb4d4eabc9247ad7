"""Configuration models for the thought radar."""

from __future__ import annotations

from math import pi

from pydantic import BaseModel, Field

MAX_THOUGHT_CHARS = 300


class SubmissionConfig(BaseModel):
    """Configures validation and duplicate gating for new thoughts."""

    duplicate_threshold: float = Field(default=0.94, ge=0.0, le=1.0)
    rate_limit_ms: float = Field(default=3000.0, ge=0.0)
    anonymous_author: str = Field(default="Anonymous", min_length=1)


class RadarConfig(BaseModel):
    """Configures how records are projected onto the radar."""

    angle_offset: float = Field(default=pi / 4)
    fade_window: int = Field(default=20, ge=1)
    min_opacity: float = Field(default=0.0, ge=0.0, le=1.0)


class SummaryConfig(BaseModel):
    """Configures the external summarization call."""

    model: str = "gpt-4o-mini"
    max_words: int = Field(default=5, ge=1)
    timeout_seconds: float = Field(default=10.0, gt=0.0)
