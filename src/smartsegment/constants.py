"""Shared constants for the application."""

# Semantic colors for point types
COLOR_POSITIVE = "#4bff4b"  # green
COLOR_NEGATIVE = "#ff4b4b"  # red

# Point marker geometry (display pixels)
POINT_RADIUS = 6
POINT_OUTLINE_WIDTH = 2
POINT_HIT_THRESHOLD = 10

# Largest edge of the on-screen copy of the source image
DISPLAY_MAX_SIZE = 900

# Image payloads
DEFAULT_MIME_TYPE = "image/png"
UPLOAD_TYPES = ["png", "jpg", "jpeg", "webp"]
RESULT_FILENAME_STEM = "segmented-object"
