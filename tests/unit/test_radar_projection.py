from datetime import datetime, timezone
from math import pi

import pytest

from thought_radar.config import RadarConfig
from thought_radar.display.radar import RadarProjector
from thought_radar.types import ThoughtRecord


def _record(thought_id: int, similarity: float, *, ghost: bool = False) -> ThoughtRecord:
    return ThoughtRecord(
        thought_id=thought_id,
        text=f"thought {thought_id}",
        author="ada",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        vector={},
        similarity=similarity,
        is_ghost=ghost,
    )


def test_projection_places_similar_thoughts_near_center() -> None:
    records = [_record(1, 1.0), _record(2, 0.25, ghost=True), _record(3, 0.5)]

    blips = RadarProjector().project(records)

    assert [blip.thought_id for blip in blips] == [3, 1]

    newest, oldest = blips
    assert newest.is_newest
    assert newest.radius == pytest.approx(0.5)
    assert newest.angle == pytest.approx(pi / 4)
    assert newest.opacity == pytest.approx(1.0)

    assert not oldest.is_newest
    assert oldest.radius == 0.0
    assert oldest.angle == pytest.approx((2 / 3) * 2 * pi + pi / 4)
    assert oldest.x == pytest.approx(0.0)
    assert oldest.y == pytest.approx(0.0)
    assert oldest.opacity == pytest.approx(0.9)


def test_newest_visible_skips_trailing_ghost() -> None:
    blips = RadarProjector().project([_record(1, 1.0), _record(2, 0.0, ghost=True)])

    assert len(blips) == 1
    assert blips[0].thought_id == 1
    assert blips[0].is_newest
    assert blips[0].angle == pytest.approx(pi + pi / 4)


def test_opacity_fades_to_floor() -> None:
    records = [_record(i, 0.0) for i in range(1, 31)]

    blips = RadarProjector(RadarConfig(min_opacity=0.1)).project(records)

    assert blips[0].opacity == pytest.approx(1.0)
    assert blips[-1].opacity == pytest.approx(0.1)


def test_empty_projection() -> None:
    assert RadarProjector().project([]) == []


def test_layout_indexes_newest_record_first() -> None:
    records = [_record(1, 0.0), _record(2, 0.0), _record(3, 0.0), _record(4, 0.0)]

    blips = {blip.thought_id: blip for blip in RadarProjector().project(records)}

    assert blips[4].angle == pytest.approx(pi / 4)
    assert blips[4].opacity == pytest.approx(1.0)
    assert blips[1].angle == pytest.approx((3 / 4) * 2 * pi + pi / 4)
    assert blips[1].opacity == pytest.approx(0.85)
    assert blips[4].opacity > blips[3].opacity > blips[2].opacity > blips[1].opacity
