"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

Vector = dict[str, float]


@dataclass(frozen=True, slots=True)
class ThoughtRecord:
    """An accepted thought and its similarity to everything posted before it."""

    thought_id: int
    text: str
    author: str
    timestamp: datetime
    vector: Vector
    similarity: float
    is_ghost: bool = False


@dataclass(frozen=True, slots=True)
class RadarBlip:
    """Polar placement of a visible record on the radar plot."""

    thought_id: int
    radius: float
    angle: float
    x: float
    y: float
    opacity: float
    is_newest: bool = False


@dataclass(frozen=True, slots=True)
class TicketData:
    """An accepted record paired with its short summary."""

    thought: ThoughtRecord
    summary: str
