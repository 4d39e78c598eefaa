"""Animated GIF export of one animation loop."""
from __future__ import annotations

import logging
from pathlib import Path

import pygame
from PIL import Image

from flowline.canvas import PygameCanvas
from flowline.engine import FrameDriver

logger = logging.getLogger(__name__)

# GIF delays are whole centiseconds; most viewers slow anything under 2 cs to 10 cs.
MIN_FRAME_DELAY_MS = 20


def surface_to_image(surface: pygame.Surface) -> Image.Image:
    """Copy a pygame surface into a Pillow RGB image."""
    size = surface.get_size()
    return Image.frombytes("RGB", size, pygame.image.tobytes(surface, "RGB"))


def frame_delay_ms(frame_rate: int) -> int:
    """Per-frame GIF delay for ``frame_rate``, rounded to whole centiseconds."""
    return max(MIN_FRAME_DELAY_MS, round(100 / frame_rate) * 10)


def export_gif(
    driver: FrameDriver,
    output_name: str | Path,
    frame_count: int,
    frame_rate: int = 60,
) -> Path:
    """Render ``frame_count`` consecutive frames and save them as a looping GIF.

    Frames are drawn offscreen at the driver's configured size, so the
    caller's display surface is left untouched. The driver's clock and
    markers advance exactly as they would on screen.
    """
    if frame_count < 1:
        raise ValueError("frame_count must be at least 1")
    if frame_rate <= 0:
        raise ValueError("frame_rate must be positive")

    path = Path(output_name)
    config = driver.config
    canvas = PygameCanvas.offscreen(config.width, config.height)

    logger.info("Starting GIF capture: %d frames at %d FPS.", frame_count, frame_rate)
    frames: list[Image.Image] = []
    for _ in range(frame_count):
        driver.step(canvas)
        frames.append(surface_to_image(canvas.surface))

    frames[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=frame_delay_ms(frame_rate),
        loop=0,
    )
    logger.info("Saved %s (%d frames).", path, len(frames))
    return path
