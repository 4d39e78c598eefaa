"""FrameDriver - loop timing, marker ownership and per-frame layers."""

import os
import random
from typing import Callable

from flowline.clock import LoopClock
from flowline.config import SketchConfig
from flowline.markers import Marker, spawn_markers
from flowline.renderer import default_layers
from flowline.types import Canvas, FrameContext, Layer

Hook = Callable[[Canvas, FrameContext], None]


class FrameDriver:
    def __init__(self, config: SketchConfig | None = None) -> None:
        if config is None:
            config = SketchConfig()
        self._config = config
        self._clock = LoopClock(config.fps, config.loop_seconds)
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []

        seed = config.seed
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._markers = spawn_markers(
            self._rng, config.marker_count, config.marker_speed_range
        )
        self._layers: list[Layer] = default_layers(self._markers)

    @property
    def config(self) -> SketchConfig:
        return self._config

    @property
    def clock(self) -> LoopClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(self._markers)

    def add_layer(self, layer: Layer) -> None:
        self._layers.append(layer)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def step(self, canvas: Canvas) -> FrameContext:
        """Advance one frame and draw every layer onto ``canvas``."""
        self._clock.advance()
        ctx = self._clock.context(canvas.width, canvas.height)
        for layer in self._layers:
            layer(canvas, ctx)
        return ctx

    def run(self, canvas: Canvas, n: int) -> None:
        ctx = self._clock.context(canvas.width, canvas.height)
        for hook in self._start_hooks:
            hook(canvas, ctx)

        for _ in range(n):
            ctx = self.step(canvas)

        for hook in self._stop_hooks:
            hook(canvas, ctx)
