"""Shared fixtures: a canvas that records draw calls instead of rasterising."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from flowline.types import IDENTITY


@dataclass
class DrawCall:
    kind: str
    args: dict[str, Any] = field(default_factory=dict)


class RecordingCanvas:
    def __init__(self, width: int = 800, height: int = 800) -> None:
        self.width = width
        self.height = height
        self.calls: list[DrawCall] = []

    def kinds(self) -> list[str]:
        return [call.kind for call in self.calls]

    def of_kind(self, kind: str) -> list[DrawCall]:
        return [call for call in self.calls if call.kind == kind]

    def clear(self, color):
        self.calls.append(DrawCall("clear", {"color": color}))

    def draw_path(self, points, color, weight, transform=IDENTITY):
        self.calls.append(
            DrawCall(
                "path",
                {"points": list(points), "color": color, "weight": weight, "transform": transform},
            )
        )

    def draw_circle(self, center, diameter, color, transform=IDENTITY):
        self.calls.append(
            DrawCall(
                "circle",
                {"center": center, "diameter": diameter, "color": color, "transform": transform},
            )
        )

    def draw_polygon(self, points, color, transform=IDENTITY):
        self.calls.append(
            DrawCall("polygon", {"points": list(points), "color": color, "transform": transform})
        )

    def draw_gradient_polygon(self, points, gradient, transform=IDENTITY):
        self.calls.append(
            DrawCall(
                "gradient_polygon",
                {"points": list(points), "gradient": gradient, "transform": transform},
            )
        )


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas(800, 800)


@pytest.fixture
def make_canvas():
    return RecordingCanvas
