"""Exceptions raised while configuring and rendering flashcard sheets."""


class FlashcardSheetsError(ValueError):
    """Base class for every validation failure in this package."""


class InvalidDimensions(FlashcardSheetsError):
    """Row or column count is not a positive integer."""


class InvalidContent(FlashcardSheetsError):
    """A face renderer was handed missing content."""


class InvalidFontSize(FlashcardSheetsError):
    """Font size is not a positive length."""


class GridOverflow(FlashcardSheetsError):
    """More cells were supplied than the grid has slots."""


class DeckFormatError(FlashcardSheetsError):
    """A deck file could not be interpreted as front/back pairs."""
