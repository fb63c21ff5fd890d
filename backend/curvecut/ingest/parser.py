"""Curve text parser — whitespace-separated numeric rows, one sample per line.

    " 554.2572093389093 -338.6062325459966 -561.6394251506157 \\n"
    → [554.2572093389093, -338.6062325459966, -561.6394251506157]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from curvecut.engine.errors import InvalidArgument

logger = logging.getLogger(__name__)


def clean_lines(lines: Iterable[str]) -> list[str]:
    """Strip spaces, tabs and newlines from both ends of every line."""
    return [line.strip() for line in lines]


def extract_rows(lines: Iterable[str]) -> list[list[float]]:
    """One list of floats per line: [[x0, y0, z0], [x1, y1, z1], ...]."""
    return [[float(tok) for tok in line.split()] for line in lines]


def extract_columns(lines: Iterable[str]) -> list[list[float]]:
    """One list of floats per column: [[x0, x1, ...], [y0, y1, ...], [z0, z1, ...]].

    Ragged input simply leaves the longer columns with more entries.
    """
    columns: list[list[float]] = []
    for row in extract_rows(lines):
        for col_idx, value in enumerate(row):
            if col_idx >= len(columns):
                columns.append([])
            columns[col_idx].append(value)
    return columns


def parse_curve(text: str) -> NDArray[np.float64]:
    """Parse "<x> <y> <z>" lines into an Nx3 array. Blank lines are skipped."""
    rows: list[list[float]] = []
    for line_no, line in enumerate(clean_lines(text.splitlines()), start=1):
        if not line:
            continue
        tokens = line.split()
        if len(tokens) != 3:
            raise InvalidArgument(f"line {line_no}: expected 3 columns, got {len(tokens)}")
        try:
            rows.append([float(tok) for tok in tokens])
        except ValueError as e:
            raise InvalidArgument(f"line {line_no}: {e}") from e

    logger.debug("Parsed %d points", len(rows))
    if not rows:
        return np.empty((0, 3))
    return np.array(rows, dtype=np.float64)


def load_curve(path: str | Path) -> NDArray[np.float64]:
    """Read a curve file (UTF-8) and parse it."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidArgument(f"{path} is not a UTF-8 text file: {e}") from e
    return parse_curve(text)
