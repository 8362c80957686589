"""
Shape layout → table — CLI entry point.

Usage:
    python layout_to_table.py <layout.json> [--output <file>] [--format json|xlsx|html]
                              [--tolerance <points>]

Reads a JSON layout of absolutely positioned shapes::

    {"min_bounds": {"x": 0, "y": 0, "width": 540, "height": 720},
     "shapes": [{"bounds": {"x": 0, "y": 0, "width": 540, "height": 20},
                 "content": "Title", "fill": "#DDEEFF"}, ...]}

reconstructs the row/column grid, and writes it as JSON, an .xlsx sheet,
or an HTML table.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import dotenv
from pydantic import ValidationError

from builder import build_table
from dto.diagnostics import BuildDiagnostics
from dto.shape import ShapeLayout
from dto.table import ShapeTable
from exporters.excel import write_workbook
from grid.constants import CELL_ALIGNMENT_TOLERANCE, OUTPUT_FORMAT
from utils.html import render_shape_table_html

dotenv.load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)

_FORMATS = ("json", "xlsx", "html")


def load_layout(file_path: str) -> ShapeLayout:
    with open(file_path, encoding="utf-8") as f:
        return ShapeLayout.model_validate_json(f.read())


def write_table(table: ShapeTable, output_path: str, fmt: str) -> None:
    if fmt == "xlsx":
        write_workbook(table, output_path)
        return

    if fmt == "html":
        text = render_shape_table_html(table)
    else:
        text = table.model_dump_json(indent=2, exclude={"grid"}, exclude_none=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Rebuild a row/column table from absolutely positioned shapes.",
    )
    parser.add_argument(
        "layout_file",
        help="Path to the JSON shape layout",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (default: <input_name>_table.<format>)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=_FORMATS,
        default=os.getenv("SHAPE_TABLE_OUTPUT_FORMAT", OUTPUT_FORMAT).lower(),
        help="Output format (default: SHAPE_TABLE_OUTPUT_FORMAT or json)",
    )
    parser.add_argument(
        "-t",
        "--tolerance",
        type=float,
        default=float(os.getenv("CELL_ALIGNMENT_TOLERANCE", CELL_ALIGNMENT_TOLERANCE)),
        help="Edges closer than this many points share a grid line",
    )
    args = parser.parse_args(argv)

    layout_path = args.layout_file
    if not os.path.isfile(layout_path):
        logger.error("File not found: %s", layout_path)
        sys.exit(1)

    try:
        layout = load_layout(layout_path)
    except ValidationError:
        logger.exception("Invalid shape layout: %s", layout_path)
        sys.exit(1)

    logger.info("Loaded %d shape(s) from %s", len(layout.shapes), layout_path)

    diagnostics = BuildDiagnostics()
    table = build_table(
        layout.shapes,
        min_bounds=layout.min_bounds,
        tolerance=args.tolerance,
        diagnostics=diagnostics,
    )
    if diagnostics.filtered:
        logger.info("  -> %d hairline shape(s) ignored", len(diagnostics.filtered))
    if table is None:
        logger.warning("Layout does not define any rows and columns; nothing written")
        sys.exit(2)

    output_path = args.output or f"{Path(layout_path).stem}_table.{args.format}"
    write_table(table, output_path, args.format)
    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
