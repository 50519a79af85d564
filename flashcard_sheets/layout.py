"""Layout helpers for page, track and cell geometry."""
from typing import List, Tuple

from .constants import CELL_PADDING, PAGE_MARGIN

Rect = Tuple[float, float, float, float]


def inner_rect(x: float, y: float, width: float, height: float, padding: float = CELL_PADDING) -> Rect:
    """Return the inner content rectangle applying a fixed inset on all sides.

    Args:
        x, y: Lower-left origin of the outer rectangle (ReportLab coordinates)
        width, height: Dimensions of the outer rectangle
        padding: Inset in points on each side
    Returns:
        (inner_x, inner_y, inner_width, inner_height), never negative in size
    """
    inner_w = max(0.0, width - 2 * padding)
    inner_h = max(0.0, height - 2 * padding)
    return (x + padding, y + padding, inner_w, inner_h)


def page_content_rect(page_width: float, page_height: float, margin: float = PAGE_MARGIN) -> Rect:
    """Rectangle left for the grid once the page margin is taken off every side."""
    return inner_rect(0, 0, page_width, page_height, padding=margin)


def track_rects(x: float, y: float, width: float, height: float, rows: int, columns: int) -> List[List[Rect]]:
    """Split a rectangle into rows x columns equal tracks.

    Returns a row-major nested list; row 0 is the top row of the rectangle,
    since ReportLab's origin is at the bottom-left.
    """
    cell_w = width / columns
    cell_h = height / rows
    result = []
    for row_index in range(rows):
        cell_y = y + height - (row_index + 1) * cell_h
        result.append([(x + column_index * cell_w, cell_y, cell_w, cell_h) for column_index in range(columns)])
    return result
