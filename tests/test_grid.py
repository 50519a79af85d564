"""Tests for grid construction and track placement."""
from __future__ import annotations

from unittest import mock

import numpy as np
import pytest

from flashcard_sheets.config import LayoutConfig
from flashcard_sheets.errors import GridOverflow, InvalidDimensions
from flashcard_sheets.grid import Grid, GridFactory, make_grid
from flashcard_sheets.layout import track_rects


@pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2), (2, -5), (1.5, 2), ("2", 3), (True, 3)])
def test_invalid_dimensions_fail_at_construction(rows, columns):
    with pytest.raises(InvalidDimensions):
        make_grid(rows, columns)


def test_make_grid_shape():
    factory = make_grid(2, 3)
    assert (factory.rows, factory.columns, factory.capacity) == (2, 3, 6)
    grid = factory([])
    assert (grid.rows, grid.columns) == (2, 3)
    assert len(grid) == 0


def test_factory_is_reusable():
    factory = make_grid(1, 2)
    assert factory(["a"]).cell_at(0, 0) == "a"
    assert factory(["b", "c"]).cell_at(0, 1) == "c"


def test_partial_final_row_leaves_empty_slots():
    grid = make_grid(2, 3)(["c1", "c2", "c3", "c4", "c5"])

    assert [grid.cell_at(0, c) for c in range(3)] == ["c1", "c2", "c3"]
    assert [grid.cell_at(1, c) for c in range(3)] == ["c4", "c5", None]
    assert len(grid) == 5


def test_slots_are_row_major_and_skip_empty():
    grid = make_grid(2, 2)(["a", None, "c"])
    assert list(grid.slots()) == [(0, 0, "a"), (1, 0, "c")]


def test_overflow_rejected():
    with pytest.raises(GridOverflow):
        make_grid(1, 2)(["a", "b", "c"])


def test_cell_at_out_of_range():
    grid = make_grid(1, 1)(["a"])
    with pytest.raises(IndexError):
        grid.cell_at(1, 0)


def test_from_config():
    factory = GridFactory.from_config(LayoutConfig(rows=6, columns=3, font_size="14pt"))
    assert (factory.rows, factory.columns) == (6, 3)


def test_tracks_are_equal_fractions():
    tracks = track_rects(0, 0, 300, 200, rows=2, columns=3)
    assert tracks[0][0] == (0, 100, 100, 100)
    assert tracks[0][2] == (200, 100, 100, 100)
    assert tracks[1][1] == (100, 0, 100, 100)
    sizes = {(w, h) for row in tracks for (_, _, w, h) in row}
    assert sizes == {(100, 100)}


def test_draw_places_each_cell_in_its_track():
    cells = [mock.Mock(name=f"cell{i}") for i in range(5)]
    grid = Grid(2, 3, cells)
    canvas = object()

    grid.draw(canvas, 36, 36, 300, 200)

    cells[0].draw.assert_called_once_with(canvas, 36, 136, 100, 100)
    cells[2].draw.assert_called_once_with(canvas, 236, 136, 100, 100)
    cells[4].draw.assert_called_once_with(canvas, 136, 36, 100, 100)


def test_draw_real_cells(renderer, recording_canvas):
    factory = make_grid(2, 3)
    grid = factory([renderer.render_front(w) for w in ("uno", "dos", "tres", "cuatro")])
    grid.draw(recording_canvas, 0, 0, 300, 200)

    assert len(recording_canvas.rects) == 4
    assert [s[2] for s in recording_canvas.strings] == ["1", "2", "3", "4"]


def test_make_grid_accepts_numpy_integers():
    factory = make_grid(np.int64(2), np.int64(3))
    assert factory.capacity == 6
