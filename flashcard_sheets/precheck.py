"""Pre-check utilities run on a deck before any card is rendered.

Card text is normalised (arrows, quotes, stray diaeresis marks), unusable
pairs are dropped and duplicate pairs removed, so the ordinals printed on the
sheets follow the cleaned deck order.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from xml.sax.saxutils import escape

import pandas as pd

from .deck import BACK, FRONT

# Plain-text replacements applied to both faces
REPLACEMENTS = (
    ("->", "→"),
    ("“", '"'),
    ("”", '"'),
    ("¨", ""),
)


def normalize_text(value) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    text = str(value)
    for old, new in REPLACEMENTS:
        text = text.replace(old, new)
    return text.strip()


def clean_cards(df: pd.DataFrame, logger: Optional[logging.Logger] = None) -> Tuple[pd.DataFrame, int]:
    """Normalise card text and drop pairs that cannot make a useful card.

    A pair is dropped when either face is empty, or when the front equals the
    back ignoring case.

    Returns:
        A tuple of (cleaned_dataframe, dropped_count).
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    cleaned = pd.DataFrame(
        {
            FRONT: df[FRONT].map(normalize_text).astype(str),
            BACK: df[BACK].map(normalize_text).astype(str),
        },
        index=df.index,
    )

    empty_mask = (cleaned[FRONT] == "") | (cleaned[BACK] == "")
    same_mask = ~empty_mask & (cleaned[FRONT].str.lower() == cleaned[BACK].str.lower())

    for idx in cleaned[empty_mask].index:
        logger.warning("Skipping row %s with an empty face: %r", idx, tuple(df.loc[idx, [FRONT, BACK]]))
    for idx in cleaned[same_mask].index:
        logger.warning("Skipping row %s whose front and back are identical: %r", idx, cleaned.at[idx, FRONT])

    kept = cleaned[~(empty_mask | same_mask)]
    dropped = len(cleaned) - len(kept)
    if dropped:
        logger.info("Pre-check: dropped %d unusable card(s)", dropped)
    return kept, dropped


def remove_duplicates(
    df: pd.DataFrame,
    keep: str = "first",
    logger: Optional[logging.Logger] = None,
) -> Tuple[pd.DataFrame, int, List[int]]:
    """Remove duplicate front/back pairs, comparing case-insensitively.

    Args:
        df: Deck with ``Front`` and ``Back`` columns.
        keep: Which duplicate to keep (passed to DataFrame.duplicated).
        logger: Optional logger for informational messages.

    Returns:
        A tuple of (deduped_dataframe, removed_count, removed_row_indices).
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    keys = pd.DataFrame({
        FRONT: df[FRONT].astype(str).str.strip().str.lower(),
        BACK: df[BACK].astype(str).str.strip().str.lower(),
    })
    duplicated_mask = keys.duplicated(keep=keep)
    removed_row_indices = df[duplicated_mask].index.tolist()
    deduped = df[~duplicated_mask]

    removed = len(removed_row_indices)
    if removed:
        logger.info("Pre-check: removed %d duplicate card(s)", removed)
        logger.debug("Removed duplicate row indices: %s", removed_row_indices)
    return deduped, removed, removed_row_indices


def to_markup(text: str) -> str:
    """Escape plain text so the paragraph renderer shows it literally."""
    return escape(text).replace("\n", "<br/>")
