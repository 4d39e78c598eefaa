"""Frame layers: background, wave line with markers, and logo."""
from __future__ import annotations

from typing import Sequence

from flowline.constants import BG_COLOR, LINE_COLOR, LINE_WEIGHT
from flowline.logo import draw_logo
from flowline.markers import Marker, draw_markers
from flowline.types import Canvas, FrameContext, Layer, Transform
from flowline.wave import wave_points


def draw_background(canvas: Canvas) -> None:
    canvas.clear(BG_COLOR)


def draw_wave(canvas: Canvas, t: float) -> None:
    """Stroke the wave as one open path centred on the canvas mid-height."""
    points = wave_points(canvas.width, canvas.height, t)
    canvas.draw_path(points, LINE_COLOR, LINE_WEIGHT, Transform(ty=canvas.height / 2))


def background_layer(canvas: Canvas, ctx: FrameContext) -> None:
    draw_background(canvas)


def make_wave_layer(markers: Sequence[Marker]) -> Layer:
    def wave_layer(canvas: Canvas, ctx: FrameContext) -> None:
        draw_wave(canvas, ctx.progress)
        draw_markers(canvas, markers, ctx.progress)

    return wave_layer


def logo_layer(canvas: Canvas, ctx: FrameContext) -> None:
    draw_logo(canvas, ctx.progress)


def default_layers(markers: Sequence[Marker]) -> list[Layer]:
    return [background_layer, make_wave_layer(markers), logo_layer]
