"""Palette, timing and geometry constants."""


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` to an RGB tuple."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected #RRGGBB, got {hex_color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# Timing
SKETCH_FPS = 60
LOOP_DURATION_SECONDS = 8
TOTAL_LOOP_FRAMES = SKETCH_FPS * LOOP_DURATION_SECONDS

# Surface
CANVAS_HEIGHT = 800
DEFAULT_CANVAS_WIDTH = 1280

# Colors
LINE_COLOR = hex_to_rgb("#000000")
BG_COLOR = hex_to_rgb("#F6F0E2")
PRIMARY_COLOR = hex_to_rgb("#EE001E")  # logo and markers
GLOW_ORANGE = hex_to_rgb("#FF9A3D")
GLOW_YELLOW = hex_to_rgb("#FCE57E")

# Wave
WAVE_SAMPLE_STEP = 2
LINE_WEIGHT = 3

# Markers
NUM_MARKERS = 6
MARKER_SPEED_RANGE = (0.0005, 0.0015)  # progress per frame
MARKER_DIAMETER = 15

# Logo
LEG_WIDTH = 20
LEG_HEIGHT = 65
TILT_SHIFT = 25
PULSE_SCALE_RANGE = (1.0, 1.15)
PULSES_PER_LOOP = 2
LOGO_RIGHT_INSET = 80
LOGO_TOP = 85

# Export
GIF_OUTPUT_NAME = "Final_BlackLine_Animation.gif"
