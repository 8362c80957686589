"""
Utility to render a ShapeTable into an HTML <table> string.
"""

from __future__ import annotations

from typing import Any, List

from dto.table import ShapeTable, TableCell


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _fmt(points: float) -> str:
    return f"{points:g}pt"


def _cell_text(content: Any) -> str:
    return _escape_html("" if content is None else str(content))


def _render_cell(cell: TableCell, spans: bool = True) -> str:
    attrs: List[str] = []
    if spans and cell.row_span > 1:
        attrs.append(f' rowspan="{cell.row_span}"')
    if spans and cell.col_span > 1:
        attrs.append(f' colspan="{cell.col_span}"')
    if cell.fill:
        attrs.append(f' style="background-color: {_escape_html(cell.fill)}"')

    text = "" if cell.is_filler else _cell_text(cell.content)
    return f"      <td{''.join(attrs)}>{text}</td>"


def render_shape_table_html(table: ShapeTable) -> str:
    """
    Render *table* as an HTML ``<table>``: a ``<colgroup>`` of column
    widths, one ``<tr>`` per grid row, and one ``<td>`` per cell at its
    origin with ``rowspan`` / ``colspan`` for merged regions.
    """
    parts: List[str] = [
        f'<table border="0" cellpadding="0" cellspacing="0" '
        f'style="width: {_fmt(table.width)}; border-collapse: collapse">'
    ]

    parts.append("  <colgroup>")
    for col in range(table.col_count):
        parts.append(f'    <col style="width: {_fmt(table.col_width(col))}">')
    parts.append("  </colgroup>")

    parts.append("  <tbody>")
    for row in range(table.row_count):
        parts.append(f'    <tr style="height: {_fmt(table.row_height(row))}">')
        for col in range(table.col_count):
            cell = table.get_cell(row, col)
            intact = table.is_intact(cell)
            if cell.is_origin(row, col):
                parts.append(_render_cell(cell, spans=intact))
            elif not intact:
                # Span cut short by an overlap: no rowspan/colspan, pad instead
                parts.append("      <td></td>")
        parts.append("    </tr>")
    parts.append("  </tbody>")

    parts.append("</table>")
    return "\n".join(parts)
