"""Windowed host for the flowline sketch.

Controls:
  S       Save one full loop as an animated GIF (blocks while rendering)
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from flowline.canvas import PygameCanvas
from flowline.config import SketchConfig
from flowline.constants import DEFAULT_CANVAS_WIDTH
from flowline.engine import FrameDriver
from flowline.export import export_gif

logger = logging.getLogger(__name__)

TITLE = "flowline"


def desktop_width() -> int:
    """Width of the primary display, falling back to a fixed default."""
    sizes = pygame.display.get_desktop_sizes()
    if not sizes:
        return DEFAULT_CANVAS_WIDTH
    return sizes[0][0]


def save_loop(driver: FrameDriver) -> None:
    """Export exactly one loop; failures are logged and the sketch continues."""
    config = driver.config
    logger.info("The window will stop updating while frames are captured.")
    try:
        export_gif(driver, config.output_name, config.total_loop_frames, config.fps)
    except OSError:
        logger.exception("GIF export to %s failed", config.output_name)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    config = SketchConfig().with_width(desktop_width())
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    driver = FrameDriver(config)
    canvas = PygameCanvas(screen)
    logger.info("Press 'S' to save a GIF of one full animation loop.")

    running = True
    while running:
        clock.tick(config.fps)

        save_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_s:
                    save_requested = True

        if save_requested:
            save_loop(driver)

        driver.step(canvas)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
