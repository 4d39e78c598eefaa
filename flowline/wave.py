"""Closed-form wave evaluation.

The wave's amplitude shrinks linearly from left to right while its frequency
falls off along a square-root warp, so the line is tall and tightly wound at
the left edge and flattens into a slow ripple at the right. The tuning
constants are literal values chosen by eye.
"""
from __future__ import annotations

import math

from flowline.constants import WAVE_SAMPLE_STEP
from flowline.types import Point


def remap(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Linearly map ``value`` from one range onto another, without clamping."""
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def amplitude(x: float, width: float, height: float) -> float:
    return remap(x, 0, width, height * 0.3, 20)


def frequency_modifier(x: float, width: float) -> float:
    return remap(math.sqrt(x / width), 0, 1, 25, 1)


def wave_y(x: float, t: float, width: float, height: float) -> float:
    """Vertical offset of the wave at column ``x`` for loop progress ``t``.

    The result is relative to the wave's centre line and lies within
    ``[-amplitude(x), amplitude(x)]``. It is periodic in ``t`` with period 1.
    """
    freq_mod = frequency_modifier(x, width)
    return math.sin(x * 0.01 * freq_mod + t * math.tau) * amplitude(x, width, height)


def wave_points(
    width: int, height: int, t: float, step: int = WAVE_SAMPLE_STEP
) -> list[Point]:
    """Sample the wave every ``step`` columns from 0 through ``width``."""
    return [(float(x), wave_y(x, t, width, height)) for x in range(0, width + 1, step)]
