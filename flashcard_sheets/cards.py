"""Rendering of front and back card faces.

A front face carries a small ordinal badge in its top-left corner so a printed
answer sheet can be matched to its prompt sheet by position. Ordinals come
from a FrontCounter owned by one rendering session: the Nth front render of
the session shows N, and back renders never touch the counter.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Paragraph

from . import fonts
from .config import LayoutConfig
from .constants import (
    BACK_INK,
    BADGE_INK,
    BADGE_SIZE_RATIO,
    BORDER_COLOR,
    BORDER_WIDTH,
    FRONT_INK,
    LEADING_RATIO,
    MIN_BADGE_SIZE,
)
from .errors import FlashcardSheetsError, InvalidContent
from .layout import inner_rect

logger = logging.getLogger(__name__)


class Face(enum.Enum):
    FRONT = "front"
    BACK = "back"


class FrontCounter:
    """Monotonic ordinal sequence for the front faces of one session."""

    def __init__(self):
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        """Advance by exactly one and return the new ordinal."""
        self._value += 1
        return self._value

    def __repr__(self):
        return f"FrontCounter(value={self._value})"


@dataclass(frozen=True)
class RenderedCell:
    """A page-ready card face; fills whatever rectangle it is drawn into."""

    face: Face
    content: str
    font_size: float
    ordinal: Optional[int] = None

    @property
    def ink(self):
        return FRONT_INK if self.face is Face.FRONT else BACK_INK

    @property
    def badge(self) -> Optional[str]:
        return None if self.ordinal is None else str(self.ordinal)

    @property
    def badge_size(self) -> float:
        return max(MIN_BADGE_SIZE, self.font_size * BADGE_SIZE_RATIO)

    def paragraph(self) -> Paragraph:
        style = ParagraphStyle(
            f"card-{self.face.value}",
            fontName=fonts.FONT_REGULAR_NAME,
            fontSize=self.font_size,
            leading=self.font_size * LEADING_RATIO,
            textColor=self.ink,
            alignment=TA_CENTER,
        )
        return Paragraph(self.content, style)

    def draw(self, c: Canvas, x: float, y: float, width: float, height: float) -> None:
        """Draw the bordered cell at (x, y) covering exactly width x height points."""
        c.saveState()
        c.setStrokeColor(BORDER_COLOR)
        c.setLineWidth(BORDER_WIDTH)
        c.setDash()
        c.rect(x, y, width, height, stroke=1, fill=0)

        inner_x, inner_y, inner_w, inner_h = inner_rect(x, y, width, height)

        para = self.paragraph()
        _, para_h = para.wrap(inner_w, inner_h)
        if para_h > inner_h:
            logger.warning(
                "Card content is %.1fpt tall but the cell only has %.1fpt at %.1fpt font: %.40r",
                para_h, inner_h, self.font_size, self.content,
            )
        # A word longer than the line cannot wrap and spills sideways
        para_w = para.minWidth()
        if para_w > inner_w:
            logger.warning(
                "Card content needs %.1fpt of width but the cell only has %.1fpt at %.1fpt font: %.40r",
                para_w, inner_w, self.font_size, self.content,
            )
        # Centered vertically; horizontal centering comes from TA_CENTER over the full inner width
        para.drawOn(c, inner_x, inner_y + (inner_h - para_h) / 2.0)

        if self.badge is not None:
            c.setFillColor(BADGE_INK)
            c.setFont(fonts.FONT_REGULAR_NAME, self.badge_size)
            c.drawString(inner_x, inner_y + inner_h - self.badge_size, self.badge)
        c.restoreState()


def _check_content(content: Any) -> str:
    if content is None:
        raise InvalidContent("Card content must not be None")
    return content if isinstance(content, str) else str(content)


class CardRenderer:
    """Renders card faces for one session at the configured font size.

    Args:
        config: Layout configuration of the session.
        counter: Ordinal sequence to draw from; a fresh one is created if omitted.
    """

    def __init__(self, config: LayoutConfig, counter: Optional[FrontCounter] = None):
        self.config = config
        self.counter = counter if counter is not None else FrontCounter()

    def render_front(self, content: Any, ordinal: Optional[int] = None) -> RenderedCell:
        """Render a numbered front face.

        Content is validated before the counter moves, so a rejected render
        never consumes an ordinal. A caller that assigns ordinals itself can
        pass ``ordinal`` to bypass the session counter.
        """
        text = _check_content(content)
        if ordinal is None:
            ordinal = self.counter.increment()
        elif isinstance(ordinal, bool) or not isinstance(ordinal, int) or ordinal < 1:
            raise FlashcardSheetsError(f"Ordinal must be a positive integer, got {ordinal!r}")
        return RenderedCell(Face.FRONT, text, self.config.font_size, ordinal)

    def render_back(self, content: Any) -> RenderedCell:
        """Render an unnumbered back face in the lighter ink."""
        return RenderedCell(Face.BACK, _check_content(content), self.config.font_size)

    def render(self, face: Face, content: Any) -> RenderedCell:
        if face is Face.FRONT:
            return self.render_front(content)
        return self.render_back(content)
