"""Loading and exporting card decks (front/back pairs).

Decks are read from CSV, JSON, YAML or DOCX files. Whatever the source format,
the loader returns a DataFrame with exactly two columns, ``Front`` and
``Back``, in file order. Header names are matched case-insensitively against
common vocabulary-list names (word/definition, question/answer...); when none
match, the first two columns are used. DOCX decks are the two-column tables of
a Word document, one card per table row.

A cleaned deck can be written back out as JSON or YAML ``[front, back]``
pairs, which load_deck reads again.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import docx
import pandas as pd
import yaml

from .errors import DeckFormatError

FRONT = "Front"
BACK = "Back"

FRONT_CANDIDATES = ("front", "word", "question", "prompt", "term")
BACK_CANDIDATES = ("back", "definition", "answer", "meaning")

EXTENSION_TYPES = {
    ".csv": "csv",
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".docx": "docx",
}
FILE_TYPES = ("csv", "json", "yaml", "docx")
EXPORT_TYPES = ("json", "yaml")
EXPORT_EXTENSIONS = {"json": ".json", "yaml": ".yml"}


def _find_key_columns(columns: List[Any]):
    lcmap = {str(c).lower(): c for c in columns}
    fcol = next((lcmap[k] for k in FRONT_CANDIDATES if k in lcmap), None)
    bcol = next((lcmap[k] for k in BACK_CANDIDATES if k in lcmap), None)
    return fcol, bcol


def _frame_from_records(records: Any, source: Path) -> pd.DataFrame:
    if not isinstance(records, list):
        raise DeckFormatError(f"{source}: expected a list of cards, got {type(records).__name__}")
    if not records:
        return pd.DataFrame(columns=[FRONT, BACK])
    if all(isinstance(r, (list, tuple)) for r in records):
        bad = next((r for r in records if len(r) != 2), None)
        if bad is not None:
            raise DeckFormatError(f"{source}: expected [front, back] pairs, found {len(bad)} element(s): {bad!r}")
        return pd.DataFrame(records, columns=[FRONT, BACK])
    if all(isinstance(r, dict) for r in records):
        return pd.DataFrame.from_records(records)
    raise DeckFormatError(f"{source}: cards must all be [front, back] pairs or all be mappings")


def _frame_from_docx(path: Path, logger: logging.Logger) -> pd.DataFrame:
    """Collect every two-cell table row of a Word document as a card.

    Rows with any other cell count are skipped with a warning. A leading row
    whose cells are recognised column headers (e.g. Word | Definition) is
    dropped. Empty and identical pairs are left for the pre-check.
    """
    pairs = []
    for table_index, table in enumerate(docx.Document(str(path)).tables):
        rows = list(table.rows)
        if not rows:
            logger.warning("Skipping empty table %d", table_index)
            continue
        for row_index, row in enumerate(rows):
            texts = [cell.text.strip() for cell in row.cells]
            if len(texts) != 2:
                logger.warning("Skipping row %s with %d columns", "| " + " | ".join(texts) + " |", len(texts))
                continue
            if row_index == 0 and _find_key_columns(texts) == (texts[0], texts[1]):
                logger.debug("Skipping header row of table %d: %s", table_index, texts)
                continue
            pairs.append(texts)
    return pd.DataFrame(pairs, columns=[FRONT, BACK])


def detect_file_type(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in EXTENSION_TYPES:
        raise DeckFormatError(f"Failed to determine deck type from extension {suffix!r}; use one of {', '.join(FILE_TYPES)}")
    return EXTENSION_TYPES[suffix]


def load_deck(path: Union[str, Path], file_type: Optional[str] = None, logger: Optional[logging.Logger] = None) -> pd.DataFrame:
    """Read a deck file into a DataFrame with ``Front`` and ``Back`` columns.

    Args:
        path: Deck file to read.
        file_type: One of ``csv``, ``json``, ``yaml``, ``docx``; inferred
            from the extension when omitted.
        logger: Optional logger for informational messages.

    Raises:
        FileNotFoundError: path does not exist.
        DeckFormatError: unknown file type, an empty CSV file, or content
            that is not a list of front/back pairs.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Deck file does not exist: {path}")
    if file_type is None:
        file_type = detect_file_type(path)
    elif file_type not in FILE_TYPES:
        raise DeckFormatError(f"Unknown deck type {file_type!r}; use one of {', '.join(FILE_TYPES)}")

    logger.info("Loading %s deck: %s", file_type.upper(), path)
    if file_type == "csv":
        try:
            data = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as exc:
            raise DeckFormatError(f"{path}: CSV deck is empty, expected a header row") from exc
    elif file_type == "json":
        with path.open(encoding="utf-8") as f:
            data = _frame_from_records(json.load(f), path)
    elif file_type == "yaml":
        with path.open(encoding="utf-8") as f:
            data = _frame_from_records(yaml.safe_load(f) or [], path)
    else:
        data = _frame_from_docx(path, logger)

    if len(data.columns) < 2:
        raise DeckFormatError(f"{path}: a deck needs a front and a back column, found {list(data.columns)}")

    fcol, bcol = _find_key_columns(list(data.columns))
    if fcol is None or bcol is None or fcol == bcol:
        fcol, bcol = data.columns[0], data.columns[1]
        logger.debug("No front/back headers recognised; using columns %r and %r", fcol, bcol)

    deck = data[[fcol, bcol]].copy()
    deck.columns = [FRONT, BACK]
    logger.info("Loaded %d card(s) from %s", len(deck), path)
    return deck


def export_deck(
    df: pd.DataFrame,
    path: Union[str, Path],
    file_type: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Path:
    """Write a deck as a list of ``[front, back]`` pairs in JSON or YAML.

    The type is inferred from the extension when omitted.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    path = Path(path)
    if file_type is None:
        file_type = detect_file_type(path)
    if file_type not in EXPORT_TYPES:
        raise DeckFormatError(f"Cannot export a deck as {file_type!r}; use one of {', '.join(EXPORT_TYPES)}")

    pairs = [[str(front), str(back)] for front, back in zip(df[FRONT], df[BACK])]
    with path.open("w", encoding="utf-8") as f:
        if file_type == "json":
            json.dump(pairs, f, ensure_ascii=False, indent=2)
        else:
            yaml.safe_dump(pairs, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    logger.info("Wrote %d card(s) to %s", len(pairs), path)
    return path
