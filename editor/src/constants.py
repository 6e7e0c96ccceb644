"""
Canvas Shape Demos - Constants and Configuration

This module contains all constant values used throughout the application:
- Default shape geometry (relative and pixel units)
- Hit-test tolerances
- Pan/zoom limits
- Animation cadence
- Colors and gradient stops used by the demos
"""

# ======================================================================
# COORDINATE SYSTEMS
# ======================================================================
# Relative space: fraction of the frame extent, (0, 0) = top-left,
# (1, 1) = bottom-right, Y-down. Not clamped.
# Absolute space: widget pixels, Y-down.
# Line widths are relative to min(frame.width, frame.height).

# ======================================================================
# LINE SHAPE DEFAULTS (relative units)
# ======================================================================

DEFAULT_LINE_START = (0.10, 0.40)
DEFAULT_LINE_END = (0.90, 0.40)
DEFAULT_LINE_WIDTH = 0.20  # Fraction of min(frame.width, frame.height)

# Lower bound applied when a corner drag would invert the line
MIN_LINE_WIDTH = 0.0

# ======================================================================
# CIRCLE DEFAULTS
# ======================================================================

DEFAULT_CIRCLE_RADIUS = 0.25  # Fraction of min(frame.width, frame.height)

# ======================================================================
# ROTATING RECTANGLE DEFAULTS (relative units)
# ======================================================================

DEFAULT_ROTATING_RECT_WIDTH = 0.20
DEFAULT_ROTATING_RECT_HEIGHT = 0.80

# ======================================================================
# CREATOR RECTANGLE DEFAULTS (absolute pixels)
# ======================================================================

DEFAULT_RECT_X = 100.0
DEFAULT_RECT_Y = 50.0
DEFAULT_RECT_WIDTH = 100.0
DEFAULT_RECT_HEIGHT = 50.0

# ======================================================================
# POLYGON DEFAULTS
# ======================================================================

DEFAULT_POLYGON_EDGES = 5
MIN_POLYGON_EDGES = 3
MAX_POLYGON_EDGES = 12
DEFAULT_POLYGON_RADIUS = 0.33  # Fraction of min(frame.width, frame.height)

# HSB defaults (hue in degrees, saturation/brightness in percent)
DEFAULT_HUE = 0.0
DEFAULT_SATURATION = 100.0
DEFAULT_BRIGHTNESS = 100.0

POLYGON_FILL_ALPHA = 0.8  # 80% opacity fill
POLYGON_STROKE_DARKEN = 0.7  # Stroke brightness multiplier
POLYGON_STROKE_WIDTH = 2.0  # Pixels

# SVG export geometry
SVG_VIEWBOX_SIZE = 300.0
SVG_POLYGON_RADIUS = 100.0

# ======================================================================
# HIT-TEST TOLERANCES
# ======================================================================

LINE_CORNER_TOLERANCE = 0.01  # Relative units, per axis
HORIZONTAL_LINE_EPSILON = 0.001  # Max |start.y - end.y| for a "horizontal" line

# ======================================================================
# PAN / ZOOM
# ======================================================================

ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9
MIN_ZOOM = 0.1
MAX_ZOOM = 10.0

# ======================================================================
# ANIMATION
# ======================================================================

TICK_INTERVAL_MS = 10
LINE_ROTATION_STEP = 0.25  # Degrees per tick (line demo)
DEFAULT_ROTATION_STEP = 0.5  # Degrees per tick (rectangle and polygon demos)
FULL_TURN_DEGREES = 360.0

# ======================================================================
# COLORS (float RGB 0-1)
# ======================================================================

BACKGROUND_COLOR = (0.0, 0.2, 0.4)
CIRCLE_COLOR = (0.6, 0.8, 1.0)
RECTANGLE_FILL_COLOR = (0.0, 0.5, 0.5)
CLICK_MARKER_COLOR = (1.0, 0.0, 0.0)
DEBUG_LINE_COLOR = (0.0, 0.0, 0.0)
HANDLE_COLOR = (0.35, 0.55, 0.75)

CLICK_MARKER_RADIUS = 10.0  # Pixels
HANDLE_RADIUS = 5.0  # Pixels

# Diagonal rainbow gradient: red via green to blue.
# Green only gets a narrow band because it dominates visually.
RAINBOW_GRADIENT_STOPS = [
    (0.0, (1.0, 0.0, 0.0)),
    (0.3, (0.9, 0.05, 0.0)),
    (0.47, (0.75, 0.75, 0.0)),
    (0.5, (0.0, 1.0, 0.0)),
    (0.53, (0.0, 0.75, 0.75)),
    (0.7, (0.0, 0.05, 0.75)),
    (1.0, (0.0, 0.0, 1.0)),
]

# ======================================================================
# APPLICATION
# ======================================================================

APP_NAME = "Canvas Shape Demos"
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
CONFIG_DIR_NAME = ".canvasdemos"
CONFIG_FILE_NAME = "config.json"

# Demo identifiers (CLI and config)
DEMO_LINE = 'line'
DEMO_RECTANGLE = 'rectangle'
DEMO_CREATOR = 'creator'
DEMO_POLYGON = 'polygon'
DEMO_NAMES = [DEMO_LINE, DEMO_RECTANGLE, DEMO_CREATOR, DEMO_POLYGON]
DEFAULT_DEMO = DEMO_LINE
