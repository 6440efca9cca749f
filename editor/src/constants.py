"""
Ellipse Transform Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Shape defaults and constraints
- Bounding box sampling resolution
- Interaction speeds and hit-test radii
- Rendering sizes and colors for the canvas
- Window and config file defaults
"""

# ======================================================================
# SHAPE DEFAULTS AND CONSTRAINTS
# ======================================================================

# Radii never shrink below this once the shape is finalized
MIN_RADIUS = 5.0

# Radius used when the shape is finalized without any pointer movement
DEFAULT_RADIUS = 10.0

# |1 - shear_x * shear_y| below this is treated as a singular shear matrix
DEGENERATE_SHEAR_EPSILON = 1e-10

# ======================================================================
# BOUNDING BOX SAMPLING
# ======================================================================

# Number of segments used to approximate the transformed ellipse.
# Handle positions and the anchor-preserving resize are defined against
# the box of this polyline, not the exact analytic box.
SAMPLE_STEPS = 60

# ======================================================================
# INTERACTION CONSTANTS
# ======================================================================

HANDLE_HIT_RADIUS = 6  # Pointer distance that counts as a handle hit (pixels)
SHEAR_SPEED = 0.01  # Shear change per pixel of pointer movement
ROTATION_SPEED = 0.01  # Radians per pixel of horizontal pointer movement

# ======================================================================
# RENDERING CONSTANTS
# ======================================================================

HANDLE_DRAW_RADIUS = 5  # Handle circle/arc radius (pixels)
ANCHOR_CROSS_SIZE = 10  # Half-length of the anchor cross arms (pixels)

SHAPE_LINE_WIDTH = 2
BOX_LINE_WIDTH = 1
ANCHOR_LINE_WIDTH = 1

# RGB tuples
SHAPE_COLOR = (0, 0, 0)
BOX_COLOR = (0, 0, 255)
RESIZE_HANDLE_COLOR = (255, 0, 0)
ROTATE_HANDLE_COLOR = (0, 128, 0)
ANCHOR_COLOR = (255, 0, 255)
CANVAS_BACKGROUND_COLOR = (255, 255, 255)

# ======================================================================
# LOGGING
# ======================================================================

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_THROTTLE_EVERY = 10  # Throttled loggers emit one message per this many calls

# ======================================================================
# WINDOW AND CONFIG DEFAULTS
# ======================================================================

DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
CONFIG_DIR_NAME = '.ellipse_editor'
CONFIG_FILE_NAME = 'config.json'
