"""Loop clock for the fixed-rate frame driver."""

from flowline.types import FrameContext


class LoopClock:
    def __init__(self, fps: int, loop_seconds: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        if loop_seconds <= 0:
            raise ValueError("loop_seconds must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._total_frames = fps * loop_seconds
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def frame_in_loop(self) -> int:
        return self._frame_number % self._total_frames

    @property
    def progress(self) -> float:
        return self.progress_at(self._frame_number)

    def progress_at(self, frame: int) -> float:
        """Loop progress in [0, 1) for an arbitrary frame index."""
        return (frame % self._total_frames) / self._total_frames

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def context(self, width: int, height: int) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            frame_in_loop=self.frame_in_loop,
            progress=self.progress,
            dt=self._dt,
            width=width,
            height=height,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
