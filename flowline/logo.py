"""Pulsing two-leg logo."""
from __future__ import annotations

import math

from flowline.constants import (
    GLOW_ORANGE,
    GLOW_YELLOW,
    LEG_HEIGHT,
    LEG_WIDTH,
    LOGO_RIGHT_INSET,
    LOGO_TOP,
    PRIMARY_COLOR,
    PULSE_SCALE_RANGE,
    PULSES_PER_LOOP,
    TILT_SHIFT,
)
from flowline.types import IDENTITY, Canvas, LinearGradient, Point, Transform
from flowline.wave import remap


def pulse_scale(progress: float) -> float:
    """Scale factor for loop progress, peaking twice per loop.

    Rests at the low end of the range at progress 0 and 0.5 and peaks at
    0.25 and 0.75.
    """
    pulse = math.sin(progress * math.tau * PULSES_PER_LOOP - math.pi / 2)
    low, high = PULSE_SCALE_RANGE
    return remap(pulse, -1, 1, low, high)


def logo_transform(width: float, progress: float) -> Transform:
    return IDENTITY.translate(width - LOGO_RIGHT_INSET, LOGO_TOP).scaled(pulse_scale(progress))


def left_leg() -> list[Point]:
    # Bottom edge runs from -LEG_WIDTH to 0.
    return [
        (0, 0),
        (-LEG_WIDTH, 0),
        (-LEG_WIDTH - TILT_SHIFT, -LEG_HEIGHT),
        (-TILT_SHIFT, -LEG_HEIGHT),
    ]


def right_leg() -> list[Point]:
    # Shifted left by half a leg so it covers the seam with the left leg.
    overlap = LEG_WIDTH / 2
    return [
        (0 - overlap, 0),
        (LEG_WIDTH - overlap, 0),
        (LEG_WIDTH + TILT_SHIFT - overlap, -LEG_HEIGHT),
        (TILT_SHIFT - overlap, -LEG_HEIGHT),
    ]


def logo_gradient() -> LinearGradient:
    return LinearGradient(
        start=(0, 0),
        end=(0, -LEG_HEIGHT),
        stops=((0.0, PRIMARY_COLOR), (0.5, GLOW_ORANGE), (1.0, GLOW_YELLOW)),
    )


def draw_logo(canvas: Canvas, progress: float) -> None:
    transform = logo_transform(canvas.width, progress)
    canvas.draw_gradient_polygon(left_leg(), logo_gradient(), transform)
    canvas.draw_polygon(right_leg(), PRIMARY_COLOR, transform)
