from __future__ import annotations

import dataclasses

import numpy as np
import pytest
from reportlab.lib.units import cm, inch, mm

from flashcard_sheets.config import LayoutConfig, parse_length
from flashcard_sheets.errors import InvalidDimensions, InvalidFontSize


@pytest.mark.parametrize(
    "value,expected",
    [
        (14, 14.0),
        (10.5, 10.5),
        ("14pt", 14.0),
        ("14", 14.0),
        (" 12 PT ", 12.0),
        ("5mm", 5 * mm),
        ("0.5cm", 0.5 * cm),
        ("0.2in", 0.2 * inch),
        (".5in", 0.5 * inch),
    ],
)
def test_parse_length(value, expected):
    assert parse_length(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", [0, -3, "0pt", "-2pt", "big", "12px", "", None, True, [14]])
def test_parse_length_rejects(value):
    with pytest.raises(InvalidFontSize):
        parse_length(value)


def test_defaults():
    config = LayoutConfig()
    assert (config.rows, config.columns, config.font_size) == (6, 3, 14.0)
    assert config.cards_per_page == 18


def test_font_size_string_is_normalised_to_points():
    assert LayoutConfig(rows=2, columns=2, font_size="1cm").font_size == pytest.approx(cm)


@pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 1), (2.0, 3), ("6", 3)])
def test_invalid_dimensions(rows, columns):
    with pytest.raises(InvalidDimensions):
        LayoutConfig(rows=rows, columns=columns)


def test_config_is_immutable():
    config = LayoutConfig.from_values(4, 2, "12pt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.rows = 5


def test_numpy_integers_accepted():
    config = LayoutConfig(rows=np.int64(4), columns=np.int32(2), font_size=np.float64(11.5))
    assert (config.rows, config.columns) == (4, 2)
    assert type(config.rows) is int
    assert config.font_size == pytest.approx(11.5)


def test_numpy_zero_rejected():
    with pytest.raises(InvalidDimensions):
        LayoutConfig(rows=np.int64(0), columns=3)
