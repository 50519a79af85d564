"""PDF generation orchestrator for flashcard sheets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd
from reportlab.lib.pagesizes import A4, letter
from reportlab.pdfgen import canvas

from . import fonts
from .cards import CardRenderer, FrontCounter, RenderedCell
from .config import LayoutConfig, Length
from .constants import DEFAULT_COLUMNS, DEFAULT_FONT_SIZE, DEFAULT_ROWS
from .deck import BACK, EXPORT_EXTENSIONS, FRONT, export_deck, load_deck
from .grid import Grid, GridFactory
from .layout import page_content_rect
from .precheck import clean_cards, remove_duplicates, to_markup

PAGE_SIZES = {
    "a4": A4,
    "letter": letter,
}
OUTPUT_TYPES = ("pdf", "json", "yaml")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildSummary:
    cards: int
    pages: int
    cards_per_page: int
    output_path: Optional[str]


def mirror_rows(cells: Sequence[Optional[RenderedCell]], columns: int, capacity: int) -> List[Optional[RenderedCell]]:
    """Reverse every row of a page so a back sits behind its front on long-edge duplex prints.

    Partial rows are padded first, so a lone card in the last row lands in the
    rightmost column, opposite its front.
    """
    padded = list(cells) + [None] * (capacity - len(cells))
    mirrored: List[Optional[RenderedCell]] = []
    for start in range(0, capacity, columns):
        mirrored.extend(reversed(padded[start:start + columns]))
    return mirrored


def draw_page(c: canvas.Canvas, grid: Grid, page_size: Tuple[float, float]) -> None:
    """Fill the page (minus its margin) with the grid and end the page."""
    page_width, page_height = page_size
    x, y, width, height = page_content_rect(page_width, page_height)
    grid.draw(c, x, y, width, height)
    c.showPage()


def build_document(
    cards: pd.DataFrame,
    output_pdf_path: Union[str, Path],
    config: LayoutConfig,
    page_size: Tuple[float, float] = A4,
    mirror_backside: bool = False,
    markup: bool = False,
    counter: Optional[FrontCounter] = None,
    logger: Optional[logging.Logger] = None,
) -> BuildSummary:
    """Write the deck as alternating front and back pages.

    Cards are taken in deck order, ``config.cards_per_page`` at a time; each
    chunk produces one page of numbered fronts followed by one page of backs.
    Unless ``markup`` is set, card text is escaped and shown literally.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    total_cards = len(cards)
    per_page = config.cards_per_page
    if total_cards == 0:
        logger.warning("Deck is empty; no PDF written to %s", output_pdf_path)
        return BuildSummary(0, 0, per_page, None)

    fonts.setup_unicode_fonts()
    renderer = CardRenderer(config, counter)
    make_page_grid = GridFactory.from_config(config)

    def content(value) -> str:
        return value if markup or value is None else to_markup(str(value))

    c = canvas.Canvas(str(output_pdf_path), pagesize=page_size)
    pages = 0
    for i in range(0, total_cards, per_page):
        chunk = cards.iloc[i:i + per_page]

        # FRONT SIDE (numbered prompts)
        fronts = [renderer.render_front(content(row[FRONT])) for _, row in chunk.iterrows()]
        draw_page(c, make_page_grid(fronts), page_size)

        # BACK SIDE (answers)
        backs = [renderer.render_back(content(row[BACK])) for _, row in chunk.iterrows()]
        if mirror_backside:
            backs = mirror_rows(backs, config.columns, per_page)
        draw_page(c, make_page_grid(backs), page_size)

        pages += 2
        logger.debug("Drew cards %d-%d on pages %d-%d", fronts[0].ordinal, fronts[-1].ordinal, pages - 1, pages)
    c.save()

    return BuildSummary(total_cards, pages, per_page, str(output_pdf_path))


def main(
    deck_path: str,
    output_path: Optional[str] = None,
    rows: int = DEFAULT_ROWS,
    columns: int = DEFAULT_COLUMNS,
    font_size: Length = DEFAULT_FONT_SIZE,
    file_type: Optional[str] = None,
    page_size: str = "a4",
    mirror_backside: bool = False,
    markup: bool = False,
    keep_duplicates: bool = False,
    output_type: str = "pdf",
) -> BuildSummary:
    if output_type not in OUTPUT_TYPES:
        raise ValueError(f"Unknown output type {output_type!r}; use one of {', '.join(OUTPUT_TYPES)}")
    config = LayoutConfig.from_values(rows, columns, font_size)

    data = load_deck(deck_path, file_type=file_type, logger=logger)

    # Run pre-checks before any card consumes an ordinal
    data, _ = clean_cards(data, logger=logger)
    if not keep_duplicates:
        data, removed_count, _ = remove_duplicates(data, logger=logger)
        if removed_count:
            logger.info("Removed %d duplicate card(s). Remaining cards: %d", removed_count, len(data))

    # If output path not provided, write output/<deck name>.<ext> under the working directory
    if not output_path:
        output_dir = Path.cwd() / "output"
        output_dir.mkdir(parents=True, exist_ok=True)
        extension = EXPORT_EXTENSIONS.get(output_type, ".pdf")
        output_path = output_dir / f"{Path(deck_path).stem}{extension}"

    if output_type != "pdf":
        export_deck(data, output_path, file_type=output_type, logger=logger)
        return BuildSummary(len(data), 0, config.cards_per_page, str(output_path))

    summary = build_document(
        data,
        output_path,
        config,
        page_size=PAGE_SIZES[page_size],
        mirror_backside=mirror_backside,
        markup=markup,
        logger=logger,
    )

    logger.info(
        "PDF generation complete!\n\n"
        "Input: %s\n"
        "Output: %s\n"
        "Cards: %d\n"
        "Grid: %dx%d at %.1fpt\n"
        "Pages (total): %d",
        deck_path,
        summary.output_path,
        summary.cards,
        config.rows,
        config.columns,
        config.font_size,
        summary.pages,
    )
    return summary
