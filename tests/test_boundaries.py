"""Tests for boundary extraction and tolerance-aware search."""

from dto.geometry import Rect
from grid.boundaries import extract_boundaries, search_boundary, unique_sorted


def test_unique_sorted_merges_within_tolerance():
    assert unique_sorted([0.0, 0.3, 10.0, 10.5, 11.2], 0.5) == [0.0, 10.0, 11.2]


def test_unique_sorted_compares_against_last_kept_value():
    # 0.4 merges into 0.0, 0.8 is measured from 0.0 and survives
    assert unique_sorted([0.0, 0.4, 0.8], 0.5) == [0.0, 0.8]


def test_unique_sorted_empty():
    assert unique_sorted([], 0.5) == []


def test_search_boundary_exact_and_tolerant():
    bounds = [0.0, 10.0, 20.0, 35.0]
    assert search_boundary(bounds, 20.0, 0.5) == 2
    assert search_boundary(bounds, 34.6, 0.5) == 3
    assert search_boundary(bounds, 0.5, 0.5) == 0


def test_search_boundary_miss():
    assert search_boundary([0.0, 10.0, 20.0], 15.0, 0.5) == -1
    assert search_boundary([], 1.0, 0.5) == -1


def test_extract_boundaries_sorted_and_deduplicated():
    rects = [
        Rect(x=50, y=20, width=50, height=30),
        Rect(x=0, y=0, width=100, height=20),
        Rect(x=0, y=20.2, width=50, height=30),
    ]
    rows, cols = extract_boundaries(rects, None, 0.5)
    assert rows == [0.0, 20.0, 50.0]
    assert cols == [0.0, 50.0, 100.0]


def test_extract_boundaries_includes_min_bounds():
    rows, cols = extract_boundaries(
        [Rect(x=10, y=10, width=10, height=10)],
        Rect(x=0, y=0, width=40, height=30),
        0.5,
    )
    assert rows == [0.0, 10.0, 20.0, 30.0]
    assert cols == [0.0, 10.0, 20.0, 40.0]


def test_extract_boundaries_min_bounds_only():
    rows, cols = extract_boundaries([], Rect(x=5, y=5, width=10, height=20), 0.5)
    assert rows == [5.0, 25.0]
    assert cols == [5.0, 15.0]


def test_extract_boundaries_no_table():
    assert extract_boundaries([], None, 0.5) is None
    # A min rect thinner than the tolerance collapses to one line
    assert extract_boundaries([], Rect(x=0, y=0, width=0.2, height=10), 0.5) is None
