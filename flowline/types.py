"""Shared value types and protocols for the flowline renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

Color = tuple[int, int, int]
Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Transform:
    """Translate-then-uniform-scale mapping from local to canvas coordinates."""

    tx: float = 0.0
    ty: float = 0.0
    scale: float = 1.0

    def apply(self, point: Point) -> Point:
        x, y = point
        return (self.tx + x * self.scale, self.ty + y * self.scale)

    def apply_all(self, points: Sequence[Point]) -> list[Point]:
        return [self.apply(p) for p in points]

    def translate(self, dx: float, dy: float) -> Transform:
        """Compose a translation expressed in local units."""
        return Transform(self.tx + dx * self.scale, self.ty + dy * self.scale, self.scale)

    def scaled(self, factor: float) -> Transform:
        return Transform(self.tx, self.ty, self.scale * factor)


IDENTITY = Transform()


@dataclass(frozen=True, slots=True)
class LinearGradient:
    """Linear gradient between two local points.

    ``stops`` is a sequence of ``(offset, color)`` pairs with offsets in
    [0, 1], sorted ascending. Colours outside the first and last stop are
    clamped to those stops.
    """

    start: Point
    end: Point
    stops: tuple[tuple[float, Color], ...]

    def __post_init__(self) -> None:
        if not self.stops:
            raise ValueError("gradient needs at least one stop")
        offsets = [offset for offset, _ in self.stops]
        if offsets != sorted(offsets):
            raise ValueError("gradient stops must be sorted by offset")

    def color_at(self, offset: float) -> Color:
        first_offset, first_color = self.stops[0]
        if offset <= first_offset:
            return first_color
        for (o0, c0), (o1, c1) in zip(self.stops, self.stops[1:]):
            if offset <= o1:
                span = o1 - o0
                f = 0.0 if span == 0 else (offset - o0) / span
                return _mix(c0, c1, f)
        return self.stops[-1][1]

    def offset_of(self, point: Point) -> float:
        """Project ``point`` onto the gradient axis, 0 at start and 1 at end."""
        ax, ay = self.start
        bx, by = self.end
        dx, dy = bx - ax, by - ay
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return 0.0
        return ((point[0] - ax) * dx + (point[1] - ay) * dy) / length_sq

    def color_at_point(self, point: Point) -> Color:
        return self.color_at(self.offset_of(point))

    def transformed(self, transform: Transform) -> LinearGradient:
        return LinearGradient(transform.apply(self.start), transform.apply(self.end), self.stops)


def _mix(a: Color, b: Color, f: float) -> Color:
    return (
        round(a[0] + (b[0] - a[0]) * f),
        round(a[1] + (b[1] - a[1]) * f),
        round(a[2] + (b[2] - a[2]) * f),
    )


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    frame_in_loop: int
    progress: float
    dt: float
    width: int
    height: int


class Canvas(Protocol):
    """Immediate-mode drawing capability.

    Every call carries its own style and transform, so implementations hold
    no fill, stroke or transform state between calls.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self, color: Color) -> None: ...

    def draw_path(
        self,
        points: Sequence[Point],
        color: Color,
        weight: float,
        transform: Transform = IDENTITY,
    ) -> None: ...

    def draw_circle(
        self,
        center: Point,
        diameter: float,
        color: Color,
        transform: Transform = IDENTITY,
    ) -> None: ...

    def draw_polygon(
        self,
        points: Sequence[Point],
        color: Color,
        transform: Transform = IDENTITY,
    ) -> None: ...

    def draw_gradient_polygon(
        self,
        points: Sequence[Point],
        gradient: LinearGradient,
        transform: Transform = IDENTITY,
    ) -> None: ...


Layer = Callable[[Canvas, FrameContext], None]
