"""
Constants and configuration values for Vyzor.
"""

import os

# Arrangement and style defaults
DEFAULT_BOX_MODE = "Horizontal"
DEFAULT_BORDER_STYLE = "none"
DEFAULT_BORDER_WIDTH = 1
DEFAULT_RADIUS = 0
DEFAULT_IMAGE_ALIGNMENT = "center"

# Number of leading scalar arguments a Gradient consumes, per mode
GRADIENT_SCALAR_COUNT = {
	"Linear": 4,    # x1, y1, x2, y2
	"Radial": 5,    # cx, cy, radius, fx, fy
	"Conical": 3,   # cx, cy, angle
}

# Significant digits used when printing non-integral numbers (matches %.14g)
NUMBER_PRECISION = 14

ERROR_PREFIX = "Vyzor: "

# Logging
LOGGER_NAME = "vyzor"
LOG_LEVEL = os.environ.get("VYZOR_LOG_LEVEL", "WARNING").upper()
