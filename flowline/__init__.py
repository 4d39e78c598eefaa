"""flowline - a looping wave-and-logo animation sketch."""

from flowline.clock import LoopClock
from flowline.config import SketchConfig
from flowline.engine import FrameDriver
from flowline.markers import Marker
from flowline.types import IDENTITY, Canvas, FrameContext, LinearGradient, Transform

__all__ = [
    "FrameDriver",
    "LoopClock",
    "SketchConfig",
    "Marker",
    "Canvas",
    "FrameContext",
    "LinearGradient",
    "Transform",
    "IDENTITY",
]
