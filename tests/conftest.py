from __future__ import annotations

import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen.canvas import Canvas

from flashcard_sheets.cards import CardRenderer, FrontCounter
from flashcard_sheets.config import LayoutConfig


class RecordingCanvas(Canvas):
    """In-memory canvas that remembers the strings and rectangles drawn on it."""

    def __init__(self):
        super().__init__(io.BytesIO(), pagesize=A4)
        self.strings = []
        self.rects = []
        self.fill_colors = []

    def drawString(self, x, y, text, *args, **kwargs):
        self.strings.append((x, y, text))
        return super().drawString(x, y, text, *args, **kwargs)

    def rect(self, x, y, width, height, *args, **kwargs):
        self.rects.append((x, y, width, height))
        return super().rect(x, y, width, height, *args, **kwargs)

    def setFillColor(self, color, *args, **kwargs):
        self.fill_colors.append(color)
        return super().setFillColor(color, *args, **kwargs)


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig(rows=2, columns=3, font_size=12)


@pytest.fixture
def counter() -> FrontCounter:
    return FrontCounter()


@pytest.fixture
def renderer(config, counter) -> CardRenderer:
    return CardRenderer(config, counter)


@pytest.fixture
def deck_csv(tmp_path: Path) -> Path:
    path = tmp_path / "spanish.csv"
    path.write_text(
        "Word,Definition\n"
        "el perro,the dog\n"
        "el gato,the cat\n"
        "ir -> fui,to go -> I went\n"
        "hola,hola\n"
        "el perro,The Dog\n"
        "la casa,\n"
        "el libro,the book\n",
        encoding="utf-8",
    )
    return path
