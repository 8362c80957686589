"""Tests for placing shapes on the boundary grid."""

import logging

import pytest

from dto.diagnostics import BuildDiagnostics
from grid.errors import GridStructureError
from grid.mapper import map_shapes


def _map(shapes, rows, cols, tolerance=0.5):
    diagnostics = BuildDiagnostics()
    grid = map_shapes(list(enumerate(shapes)), rows, cols, tolerance, diagnostics)
    return grid, diagnostics


def test_spans_and_shared_references(header_layout):
    grid, diagnostics = _map(header_layout, [0.0, 20.0, 50.0], [0.0, 50.0, 100.0])

    header = grid[0][0]
    assert header is grid[0][1]
    assert (header.row, header.col, header.row_span, header.col_span) == (0, 0, 1, 2)
    assert header.content == "Header"
    assert grid[1][0].content == "Left"
    assert grid[1][1].content == "Right"
    assert grid[1][1].col_span == 1
    assert not diagnostics.has_overlaps


def test_cell_bounds_relative_to_first_boundary(make_shape):
    grid, _ = _map(
        [make_shape(110, 220, 40, 30)],
        [200.0, 220.0, 250.0],
        [100.0, 110.0, 150.0],
    )
    cell = grid[1][1]
    assert (cell.bounds.x, cell.bounds.y) == (10.0, 20.0)
    assert (cell.bounds.width, cell.bounds.height) == (40.0, 30.0)
    assert grid[0][0] is None


def test_edges_match_within_tolerance(make_shape):
    grid, _ = _map([make_shape(0.4, 0.3, 19.8, 9.9)], [0.0, 10.0], [0.0, 10.0, 20.0])
    cell = grid[0][0]
    assert cell.col_span == 2
    assert cell.bounds.width == 20.0


def test_vertical_span(make_shape):
    grid, _ = _map([make_shape(0, 0, 10, 30)], [0.0, 10.0, 20.0, 30.0], [0.0, 10.0])
    assert grid[0][0] is grid[1][0] is grid[2][0]
    assert grid[0][0].row_span == 3


def test_fill_inherited_from_nearest_ancestor(make_shape):
    shapes = [
        make_shape(0, 0, 10, 10, fill="#112233", ancestor_fills=["#FFFFFF"]),
        make_shape(10, 0, 10, 10, ancestor_fills=[None, "#AABBCC", "#FFFFFF"]),
        make_shape(20, 0, 10, 10),
    ]
    grid, _ = _map(shapes, [0.0, 10.0], [0.0, 10.0, 20.0, 30.0])
    assert [c.fill for c in grid[0]] == ["#112233", "#AABBCC", None]


def test_same_origin_first_shape_wins(make_shape, caplog):
    shapes = [
        make_shape(0, 0, 10, 10, content="first"),
        make_shape(0, 0, 10, 10, content="second"),
        make_shape(0, 0, 10, 10, content="third"),
    ]
    with caplog.at_level(logging.WARNING, logger="dto.diagnostics"):
        grid, diagnostics = _map(shapes, [0.0, 10.0], [0.0, 10.0])

    assert grid[0][0].content == "first"
    assert grid[0][0].shape_index == 0
    assert [(o.shape_index, o.occupant_index) for o in diagnostics.overlaps] == [(1, 0), (2, 0)]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_partial_overlap_keeps_occupant(make_shape):
    shapes = [
        make_shape(10, 0, 10, 10, content="right"),
        make_shape(0, 0, 20, 10, content="wide"),
    ]
    grid, diagnostics = _map(shapes, [0.0, 10.0], [0.0, 10.0, 20.0])

    assert grid[0][0].content == "wide"
    assert grid[0][0].col_span == 2
    assert grid[0][1].content == "right"
    assert len(diagnostics.overlaps) == 1
    overlap = diagnostics.overlaps[0]
    assert (overlap.shape_index, overlap.row, overlap.col, overlap.occupant_index) == (1, 0, 1, 0)


def test_missing_origin_fails_fast(make_shape):
    with pytest.raises(GridStructureError):
        _map([make_shape(50, 0, 10, 10)], [0.0, 10.0], [0.0, 10.0])


def test_missing_far_edge_fails_fast(make_shape):
    with pytest.raises(GridStructureError):
        _map([make_shape(0, 0, 15, 10)], [0.0, 10.0], [0.0, 10.0, 20.0])
