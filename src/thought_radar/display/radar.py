"""Projection of accepted thoughts onto the radar plot."""

from __future__ import annotations

from math import cos, pi, sin

from thought_radar.config import RadarConfig
from thought_radar.types import RadarBlip, ThoughtRecord


class RadarProjector:
    """Maps records to polar blips for a renderer.

    Similar thoughts sit near the center (``radius = 1 - similarity``) and
    novel ones near the edge. Records are laid out newest first around the
    circle; ghosts keep their slot so visible blips do not shift when a ghost
    is posted, but they never produce a blip themselves.
    """

    def __init__(self, config: RadarConfig | None = None) -> None:
        self.config = config or RadarConfig()

    def project(self, records: list[ThoughtRecord]) -> list[RadarBlip]:
        """Project ``records`` (submission order) into blips, newest first."""

        newest_first = list(reversed(records))
        slots = len(newest_first) or 1
        newest_visible = next(
            (record.thought_id for record in newest_first if not record.is_ghost), None
        )

        blips: list[RadarBlip] = []
        for index, record in enumerate(newest_first):
            if record.is_ghost:
                continue
            angle = (index / slots) * 2 * pi + self.config.angle_offset
            radius = min(1.0, max(0.0, 1.0 - record.similarity))
            blips.append(
                RadarBlip(
                    thought_id=record.thought_id,
                    radius=radius,
                    angle=angle,
                    x=cos(angle) * radius,
                    y=sin(angle) * radius,
                    opacity=self._opacity(index),
                    is_newest=record.thought_id == newest_visible,
                )
            )
        return blips

    def _opacity(self, index: int) -> float:
        recency = 1.0 - min(index / self.config.fade_window, 1.0)
        return max(self.config.min_opacity, recency)
