"""Markers sliding along the wave."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from flowline.constants import MARKER_DIAMETER, MARKER_SPEED_RANGE, NUM_MARKERS, PRIMARY_COLOR
from flowline.types import Canvas, Transform
from flowline.wave import wave_y


@dataclass
class Marker:
    progress: float
    speed: float


def spawn_markers(
    rng: random.Random,
    count: int = NUM_MARKERS,
    speed_range: tuple[float, float] = MARKER_SPEED_RANGE,
) -> list[Marker]:
    """Create ``count`` evenly spaced markers with speeds drawn from ``rng``."""
    low, high = speed_range
    return [Marker(progress=i / count, speed=rng.uniform(low, high)) for i in range(count)]


def advance_marker(marker: Marker) -> None:
    marker.progress += marker.speed
    if marker.progress >= 1.0:
        marker.progress -= 1.0


def advance_markers(markers: Iterable[Marker]) -> None:
    for marker in markers:
        advance_marker(marker)


def draw_markers(canvas: Canvas, markers: Sequence[Marker], t: float) -> None:
    """Advance every marker one frame, then draw it on the wave at ``t``."""
    width, height = canvas.width, canvas.height
    transform = Transform(ty=height / 2)
    for marker in markers:
        advance_marker(marker)
        x = marker.progress * width
        y = wave_y(x, t, width, height)
        canvas.draw_circle((x, y), MARKER_DIAMETER, PRIMARY_COLOR, transform)
