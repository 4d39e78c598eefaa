"""Sketch configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, replace

from flowline.constants import (
    CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    GIF_OUTPUT_NAME,
    LOOP_DURATION_SECONDS,
    MARKER_SPEED_RANGE,
    NUM_MARKERS,
    SKETCH_FPS,
)


@dataclass(frozen=True)
class SketchConfig:
    """Immutable configuration for one sketch run.

    Attributes:
        fps: Target frame rate of the host loop and of exported GIFs.
        loop_seconds: Duration of one animation loop in seconds.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        marker_count: Number of markers travelling along the wave.
        marker_speed_range: Inclusive ``(low, high)`` range for marker speed,
            in loop progress per frame.
        seed: RNG seed for marker speeds. ``None`` picks one from os.urandom.
        output_name: Default file name for GIF export.
    """

    fps: int = SKETCH_FPS
    loop_seconds: int = LOOP_DURATION_SECONDS
    width: int = DEFAULT_CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    marker_count: int = NUM_MARKERS
    marker_speed_range: tuple[float, float] = MARKER_SPEED_RANGE
    seed: int | None = None
    output_name: str = GIF_OUTPUT_NAME

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.loop_seconds <= 0:
            raise ValueError("loop_seconds must be positive")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas size must be positive")
        if self.marker_count < 0:
            raise ValueError("marker_count must not be negative")
        low, high = self.marker_speed_range
        if low < 0 or high < low or high >= 1:
            raise ValueError(
                f"marker_speed_range must satisfy 0 <= low <= high < 1, got {self.marker_speed_range!r}"
            )

    @property
    def total_loop_frames(self) -> int:
        return self.fps * self.loop_seconds

    def with_width(self, width: int) -> SketchConfig:
        return replace(self, width=width)
