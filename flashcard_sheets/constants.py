"""Shared layout and typography constants for flashcard sheets."""
from reportlab.lib import colors
from reportlab.lib.units import inch

# Inset between the cell border and its content, in points
CELL_PADDING: float = 8.0

# Thin solid border around every cell
BORDER_WIDTH: float = 0.5
BORDER_COLOR = colors.HexColor("#999999")

# Three distinct ink tones
FRONT_INK = colors.HexColor("#1A1A1A")  # front content, near-black
BADGE_INK = colors.HexColor("#808080")  # front ordinal badge, muted gray
BACK_INK = colors.HexColor("#A6A6A6")   # back content, lighter gray

# Badge size relative to the content font size
BADGE_SIZE_RATIO: float = 0.6
MIN_BADGE_SIZE: float = 6.0

# Line spacing applied to content paragraphs
LEADING_RATIO: float = 1.2

# Margin on every side of the page
PAGE_MARGIN: float = 0.5 * inch

# Layout defaults when no configuration is given
DEFAULT_ROWS: int = 6
DEFAULT_COLUMNS: int = 3
DEFAULT_FONT_SIZE: str = "14pt"
