"""Configuration Constants

Constants for slide layout reconstruction and export packing.
"""

# Target canvas (16:9 slide, inches)
SLIDE_WIDTH_INCHES = 10.0
SLIDE_HEIGHT_INCHES = 5.625

# Source render surface (the viewport the measuring host paints into)
RENDER_WIDTH_PX = 1920
RENDER_HEIGHT_PX = 1080

# Column Bucketer
COLUMN_PROXIMITY_PX = 50.0  # Elements whose left edges differ by less share a column

# Paragraph Grouper
WIDTH_DELTA_PX = 100.0  # Width change at or above this splits a text block
MIN_GROUP_HEIGHT_PX = 20.0  # Floor for degenerate zero-height groups

# Global Sequencer
ROW_TOLERANCE_PX = 10.0  # Groups starting closer than this are ordered left-to-right

# Collision Resolver
HEIGHT_SAFETY_MULTIPLIER = 1.6  # Target font metrics run taller than the measuring surface
MAX_PUSH_ATTEMPTS = 10
PUSH_GAP_UNITS = 0.1  # Padding below a colliding rectangle (inches)

# Style & Unit Mapper
FONT_SCALE = 0.55  # px -> pt, kept low so text never overflows its box
DEFAULT_FONT_SIZE_PX = 24
PARAGRAPH_SPACING_PT = 6
DEFAULT_FONT_FACE = "Inter"

# Element type tags reported by the measuring host
HEADING_TYPES = frozenset({"h1", "h2", "h3", "h4"})
BODY_TEXT_TYPES = frozenset({"p", "text", "bullet-item"})
TEXT_TYPES = HEADING_TYPES | BODY_TEXT_TYPES
BULLET_ITEM_TYPE = "bullet-item"
STRUCTURAL_TYPES = frozenset({"column", "column_group", "column-group", "bullets"})

# Default theme colors (hex, no leading '#')
DEFAULT_THEME_COLORS = {
    "primary": "3B82F6",
    "secondary": "1F2937",
    "accent": "60A5FA",
    "background": "FFFFFF",
    "text": "1F2937",
    "heading": "111827",
    "muted": "6B7280",
}

# Root image placement (fractions of the canvas)
ROOT_IMAGE_SPLIT_WIDTH = 0.45
ROOT_IMAGE_RIGHT_OFFSET = 0.55
ROOT_IMAGE_VERTICAL_HEIGHT = 0.4

# Infographic text overlay
OVERLAY_WIDTH_BUFFER = 1.15  # Wider boxes so target fonts do not wrap
OVERLAY_HEIGHT_BUFFER = 1.05
OVERLAY_FONT_SCALE = 0.65
OVERLAY_MIN_FONT_PT = 6
OVERLAY_DEFAULT_FONT_PX = 12
OVERLAY_COLLISION_PASSES = 3
OVERLAY_MIN_HORIZONTAL_OVERLAP = 0.2  # Fraction of the narrower box
OVERLAY_PUSH_BUFFER = 0.01  # Fraction of the container height
DENSE_CHART_MAX_ITEMS = 8
DENSE_CHART_FALLBACK_TEMPLATE = "chart-bar-plain-text"

# Input Limits
MAX_FILE_SIZE_MB = 20

# Deck Packing
DEFAULT_MAX_WORKERS = 1

# Progress Steps (for UI progress tracking)
PROGRESS_STEPS = {
    "VALIDATE": 0.05,
    "LOAD": 0.10,
    "PACK": 0.20,
    "PREVIEW": 0.85,
    "COMPLETE": 1.0,
}

# Environment variable prefix for option overrides
ENV_PREFIX = "SLIDE_PACKER_"
