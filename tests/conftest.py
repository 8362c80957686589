"""Shared test fixtures."""

from __future__ import annotations

import pytest

from dto.geometry import Rect
from dto.shape import InputShape


def _shape(x, y, width, height, content=None, fill=None, ancestor_fills=()):
    return InputShape(
        bounds=Rect(x=x, y=y, width=width, height=height),
        content=content,
        fill=fill,
        ancestor_fills=list(ancestor_fills),
    )


@pytest.fixture
def make_shape():
    return _shape


@pytest.fixture
def header_layout():
    """Full-width header above two half-width cells."""
    return [
        _shape(0, 0, 100, 20, content="Header"),
        _shape(0, 20, 50, 30, content="Left"),
        _shape(50, 20, 50, 30, content="Right"),
    ]


@pytest.fixture
def quadrant_layout():
    """Four shapes, each exactly one quadrant of a 100 x 60 area."""
    return [
        _shape(0, 0, 50, 30, content="TL"),
        _shape(50, 0, 50, 30, content="TR"),
        _shape(0, 30, 50, 30, content="BL"),
        _shape(50, 30, 50, 30, content="BR"),
    ]


@pytest.fixture
def report_layout():
    """
    A small invoice-like page: title row, a two-column body with a tall
    sidebar, and a footer that leaves the bottom-left corner empty.
    """
    return [
        _shape(36, 36, 300, 24, content="Invoice", fill="#DDEEFF"),
        _shape(36, 60, 100, 48, content="Sidebar"),
        _shape(136, 60, 200, 24, content="Qty\t3"),
        _shape(136, 84, 200, 24, content="Total <EUR>"),
        _shape(136, 108, 200, 20, content="Thanks", ancestor_fills=[None, "#FFFFCC"]),
    ]
