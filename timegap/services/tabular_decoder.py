# timegap/services/tabular_decoder.py
"""
Turns a raw 2D grid of cells into one name→value mapping per data row.

Two passes, kept separate so each failure mode is testable on its own:
  1. locate_header_row() finds the first row holding the "Log Date" label,
     skipping any banner/title rows above it.
  2. decode_rows() maps every non-blank row below it onto the trimmed labels.
"""

from typing import Any, Optional, Sequence

from timegap.utils.sheet_reader import is_blank_cell
from timegap.utils.logger import get_logger

logger = get_logger(__name__)

HEADER_SENTINEL = "Log Date"


class DecodeError(Exception):
    """The upload could not be turned into rows (no header, unreadable file)."""


def _label(value: Any) -> str:
    return "" if is_blank_cell(value) else str(value).strip()


def locate_header_row(grid: Sequence[Sequence[Any]]) -> int:
    """Index of the first row with a cell equal to 'Log Date' after trimming."""
    for index, row in enumerate(grid):
        if any(_label(cell) == HEADER_SENTINEL for cell in row):
            return index
    raise DecodeError(f"No header row containing '{HEADER_SENTINEL}' found")


def build_headers(header_row: Sequence[Any]) -> list[Optional[str]]:
    """
    Trimmed column labels, positionally aligned with the row.
    Empty labels become None (column ignored); repeats get _1, _2 ... suffixes.
    """
    headers: list[Optional[str]] = []
    seen: dict[str, int] = {}
    for cell in header_row:
        label = _label(cell)
        if not label:
            headers.append(None)
            continue
        if label in seen:
            seen[label] += 1
            label = f"{label}_{seen[label]}"
        else:
            seen[label] = 0
        headers.append(label)
    return headers


def decode_rows(grid: Sequence[Sequence[Any]], header_index: int,
                headers: Sequence[Optional[str]]) -> list[dict[str, Any]]:
    """Rows strictly below the header, as dicts. Missing or blank cells → ''."""
    rows = []
    for row in grid[header_index + 1:]:
        if all(is_blank_cell(cell) for cell in row):
            continue
        mapping = {}
        for position, name in enumerate(headers):
            if name is None:
                continue
            value = row[position] if position < len(row) else None
            mapping[name] = "" if is_blank_cell(value) else value
        rows.append(mapping)
    return rows


def decode_grid(grid: Sequence[Sequence[Any]]) -> list[dict[str, Any]]:
    header_index = locate_header_row(grid)
    headers = build_headers(grid[header_index])
    logger.debug(f"Header found at row {header_index}: {[h for h in headers if h]}")
    return decode_rows(grid, header_index, headers)
