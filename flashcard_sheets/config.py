"""Typed layout configuration for a rendering session."""
from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Union

from reportlab.lib.units import cm, inch, mm

from .constants import DEFAULT_COLUMNS, DEFAULT_FONT_SIZE, DEFAULT_ROWS
from .errors import InvalidDimensions, InvalidFontSize

Length = Union[int, float, str]

_UNITS = {
    "pt": 1.0,
    "mm": mm,
    "cm": cm,
    "in": inch,
}
_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*([a-z]*)\s*$", re.IGNORECASE)


def parse_length(value: Length) -> float:
    """Convert a length such as ``14``, ``"14pt"`` or ``"0.5cm"`` to points.

    Bare numbers (and numeric strings without a unit) are points.
    """
    if isinstance(value, bool):
        raise InvalidFontSize(f"Invalid length: {value!r}")
    if isinstance(value, numbers.Real):
        points = float(value)
    elif isinstance(value, str):
        m = _LENGTH_RE.match(value)
        if not m:
            raise InvalidFontSize(f"Invalid length: {value!r}")
        number, unit = m.groups()
        unit = unit.lower() or "pt"
        if unit not in _UNITS:
            raise InvalidFontSize(f"Unknown length unit {unit!r} in {value!r}; expected one of {', '.join(_UNITS)}")
        points = float(number) * _UNITS[unit]
    else:
        raise InvalidFontSize(f"Invalid length: {value!r}")
    if points <= 0:
        raise InvalidFontSize(f"Length must be positive: {value!r}")
    return points


def check_dimension(name: str, value) -> int:
    """Return value when it is a positive integer, otherwise raise InvalidDimensions."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class LayoutConfig:
    """Grid shape and font size shared by every render of one session."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    font_size: float = parse_length(DEFAULT_FONT_SIZE)

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "rows", check_dimension("rows", self.rows))
        object.__setattr__(self, "columns", check_dimension("columns", self.columns))
        object.__setattr__(self, "font_size", parse_length(self.font_size))

    @classmethod
    def from_values(cls, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS, font_size: Length = DEFAULT_FONT_SIZE) -> "LayoutConfig":
        return cls(rows=rows, columns=columns, font_size=font_size)

    @property
    def cards_per_page(self) -> int:
        return self.rows * self.columns
