"""
Constants and configuration values for Tarnish.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Filter names (case-sensitive, as typed on the command line)
FILTER_COPY = "copy"
FILTER_ERROR_TEST = "errortest"
FILTER_ARGERROR_TEST = "argerrortest"
FILTER_HUE_ROTATE = "huerotate"
FILTER_RGB_REPLACE = "rgbreplace"
FILTER_MOSAIC = "mosaic"
FILTER_COLORIZE = "colorize"
FILTER_PALLETTIZE = "pallettize"

# Fixed filter messages
MSG_INTENTIONAL_ERROR = "This error is intentional, and meant for testing."
MSG_INTENTIONAL_ARGERROR = "This argument error is intentional, and meant for testing."
MSG_REQUIRES_DEGREES = "Requires a number of degrees."
MSG_REQUIRES_THREE_COLORS = "Requires three colors: red, green and blue."
MSG_REQUIRES_POINT_COUNT = "Requires a number of points (at least 1)."
MSG_REQUIRES_COLOR = "Requires a color (RRGGBB)."
MSG_REQUIRES_PALETTE = "Requires a path to a palette image."

# CLI messages
MSG_NO_COMMAND = "No Command Name Found"
MSG_INVALID_COMMAND = "Invalid Command."
MSG_MISSING_PATHS = "Requires an input file and an output file."
MSG_OPEN_FAILED = "Failed to open file."
MSG_DECODE_FAILED = "Failed to decode file."
MSG_SAVE_FAILED = "Failed to save file."

# Diagnostic labels and ANSI styles
LABEL_ERROR = "ERROR"
LABEL_ARGUMENT_ERROR = "ARGUMENT ERROR"
LABEL_COMPLETE = "COMPLETE"
STYLE_ERROR = "\x1b[1;31m"
STYLE_ARGUMENT_ERROR = "\x1b[1;33m"
STYLE_COMPLETE = "\x1b[1;32m"
STYLE_RESET = "\x1b[0m"

# Logging
LOG_LEVEL_ENV_VAR = "TARNISH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Color math
HEX_COLOR_LENGTH = 6
CHANNEL_MAX = 255
LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722

# Upper bound on distance-matrix cells computed at once by the
# vectorised nearest-color searches (mosaic, pallettize)
DISTANCE_CHUNK_CELLS = 4_000_000

# Pillow working mode for every filter
WORKING_MODE = "RGBA"

# Output formats that cannot store an alpha channel
FORMATS_WITHOUT_ALPHA = {".jpg", ".jpeg", ".bmp", ".ppm", ".pgm", ".pbm"}

# Tag headings for --list-filters, in display order
FILTER_CATEGORIES = ("basic", "color", "spatial", "palette", "diagnostic")

# Integer modes holding more than 8 bits per sample; Pillow clips these
# instead of scaling when converting to RGBA
WIDE_INTEGER_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")
