"""
Central constants for the playground.

All geometry lives in a fixed logical canvas; the view scales it to fit.
"""
import os

# Logical drawing surface
CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 400.0

# Curve order bounds
MIN_ORDER = 1
MAX_ORDER = 100
DEFAULT_ORDER = 3

# Number of samples along the drawn curve
CURVE_RESOLUTION = 100

# Initial half-sine layout
LAYOUT_X_START = 50.0
LAYOUT_X_SPAN = 700.0
LAYOUT_BASELINE_Y = 200.0
LAYOUT_AMPLITUDE = 150.0

# t slider: 0.00 .. 1.00 in steps of 0.01
T_SLIDER_STEPS = 100

# Markers
CONTROL_POINT_RADIUS = 6
DERIVED_POINT_RADIUS = 4
HANDLE_HIT_RADIUS = 8.0
CONTROL_POINT_COLOR = "red"
DERIVED_POINT_COLOR = "gray"
CURVE_COLOR = "blue"
CONSTRUCTION_COLOR = "gray"
CONSTRUCTION_FILL = "#333333"
CONSTRUCTION_OPACITY = 0.2

LOG_LEVEL_ENV = "BEZIER_PLAYGROUND_LOG_LEVEL"


def log_level_name() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
