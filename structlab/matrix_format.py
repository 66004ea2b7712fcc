"""Text renderings of dense and compressed sparse matrices."""

from __future__ import annotations

from typing import Iterable

from .matrix import EPS, Matrix
from .sparse import CSCMatrix, CSRMatrix

_CELL_RULE = "-" * 9


def format_matrix(matrix: Matrix) -> str:
    """Render a dense matrix as a ruled grid of cells."""
    rule = _CELL_RULE * matrix.columns
    lines = [rule]
    for row in matrix.data:
        lines.append("".join(f"|{value:5f}|" for value in row))
        lines.append(rule)
    return "\n".join(lines) + "\n"


def format_matrix_coordinate(matrix: Matrix) -> str:
    """Render ``rows columns count`` then ``row column value`` lines, 1-based."""
    entries = [
        (row, column, value)
        for row, line in enumerate(matrix.data, 1)
        for column, value in enumerate(line, 1)
        if abs(value) >= EPS
    ]
    lines = [f"{matrix.rows} {matrix.columns} {len(entries)}"]
    lines.extend(f"{row} {column} {value:f}" for row, column, value in entries)
    return "\n".join(lines) + "\n"


def _line(label: str, items: Iterable[object]) -> str:
    return f"{label}: " + "".join(f"{item} " for item in items) + "\n"


def _values(values: Iterable[float]) -> list[str]:
    return [f"{value:f}" for value in values]


def format_csc(sparse: CSCMatrix) -> str:
    """Render the three arrays of a column-compressed matrix."""
    return (
        _line("A", _values(sparse.values))
        + _line("IA", sparse.row_indices)
        + _line("JA", sparse.column_pointers)
    )


def format_csc_coordinate(sparse: CSCMatrix) -> str:
    """Render ``value row column`` lines, 0-based, column by column."""
    return "".join(
        f"{sparse.values[k]:f} {sparse.row_indices[k]} {column}\n"
        for column in range(sparse.columns)
        for k in range(sparse.column_pointers[column], sparse.column_pointers[column + 1])
    )


def format_csr(sparse: CSRMatrix) -> str:
    """Render the three arrays of a row-compressed matrix."""
    return (
        _line("B", _values(sparse.values))
        + _line("JB", sparse.column_indices)
        + _line("IB", sparse.row_pointers)
    )


def format_csr_coordinate(sparse: CSRMatrix) -> str:
    """Render ``value row column`` lines, 0-based, row by row."""
    return "".join(
        f"{sparse.values[k]:f} {row} {sparse.column_indices[k]}\n"
        for row in range(sparse.rows)
        for k in range(sparse.row_pointers[row], sparse.row_pointers[row + 1])
    )