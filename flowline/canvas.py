"""Canvas implementation backed by a pygame Surface."""
from __future__ import annotations

import math
from typing import Sequence

import pygame

from flowline.types import IDENTITY, Color, LinearGradient, Point, Transform


def scanline_spans(points: Sequence[Point], row: int) -> list[tuple[int, int]]:
    """Inclusive pixel spans of ``row`` covered by a polygon (even-odd rule).

    A pixel counts as covered when its centre lies inside the polygon.
    """
    yc = row + 0.5
    crossings: list[float] = []
    n = len(points)
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        if (y0 <= yc < y1) or (y1 <= yc < y0):
            crossings.append(x0 + (yc - y0) * (x1 - x0) / (y1 - y0))
    crossings.sort()

    spans = []
    for left, right in zip(crossings[0::2], crossings[1::2]):
        start = math.ceil(left - 0.5)
        end = math.ceil(right - 0.5) - 1
        if end >= start:
            spans.append((start, end))
    return spans


class PygameCanvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    @classmethod
    def offscreen(cls, width: int, height: int) -> PygameCanvas:
        return cls(pygame.Surface((width, height)))

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

    def draw_path(
        self,
        points: Sequence[Point],
        color: Color,
        weight: float,
        transform: Transform = IDENTITY,
    ) -> None:
        if len(points) < 2:
            return
        width = max(1, round(weight * transform.scale))
        pygame.draw.lines(self._surface, color, False, transform.apply_all(points), width)

    def draw_circle(
        self,
        center: Point,
        diameter: float,
        color: Color,
        transform: Transform = IDENTITY,
    ) -> None:
        radius = diameter * transform.scale / 2
        pygame.draw.circle(self._surface, color, transform.apply(center), radius)

    def draw_polygon(
        self,
        points: Sequence[Point],
        color: Color,
        transform: Transform = IDENTITY,
    ) -> None:
        if len(points) < 3:
            return
        pygame.draw.polygon(self._surface, color, transform.apply_all(points))

    def draw_gradient_polygon(
        self,
        points: Sequence[Point],
        gradient: LinearGradient,
        transform: Transform = IDENTITY,
    ) -> None:
        if len(points) < 3:
            return
        outline = transform.apply_all(points)
        screen_gradient = gradient.transformed(transform)
        vertical = screen_gradient.start[0] == screen_gradient.end[0]

        ys = [y for _, y in outline]
        first_row = max(0, math.floor(min(ys)))
        last_row = min(self.height - 1, math.ceil(max(ys)) - 1)
        max_x = self.width - 1

        for row in range(first_row, last_row + 1):
            for start, end in scanline_spans(outline, row):
                start, end = max(start, 0), min(end, max_x)
                if end < start:
                    continue
                if vertical:
                    color = screen_gradient.color_at_point((start + 0.5, row + 0.5))
                    pygame.draw.line(self._surface, color, (start, row), (end, row))
                    continue
                for x in range(start, end + 1):
                    color = screen_gradient.color_at_point((x + 0.5, row + 0.5))
                    self._surface.set_at((x, row), color)
