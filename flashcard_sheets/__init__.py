"""Printable front/back study card sheets."""
from .cards import CardRenderer, Face, FrontCounter, RenderedCell
from .config import LayoutConfig, parse_length
from .errors import (
    DeckFormatError,
    FlashcardSheetsError,
    GridOverflow,
    InvalidContent,
    InvalidDimensions,
    InvalidFontSize,
)
from .grid import Grid, GridFactory, make_grid

__all__ = [
    "CardRenderer",
    "DeckFormatError",
    "Face",
    "FlashcardSheetsError",
    "FrontCounter",
    "Grid",
    "GridFactory",
    "GridOverflow",
    "InvalidContent",
    "InvalidDimensions",
    "InvalidFontSize",
    "LayoutConfig",
    "RenderedCell",
    "make_grid",
    "parse_length",
]
