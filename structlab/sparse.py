"""Compressed sparse matrices and multiplication of dense and sparse matrices."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix import EPS, Matrix


class MatrixSizeError(ValueError):
    """Raised when two matrices cannot be multiplied."""


@dataclass(frozen=True)
class CSCMatrix:
    """A matrix stored column by column.

    ``column_pointers[c]`` to ``column_pointers[c + 1]`` index the values
    and row indices of column ``c``.
    """

    rows: int
    columns: int
    values: tuple[float, ...]
    row_indices: tuple[int, ...]
    column_pointers: tuple[int, ...]

    @property
    def element_count(self) -> int:
        """Number of stored non-zero elements."""
        return len(self.values)


@dataclass(frozen=True)
class CSRMatrix:
    """A matrix stored row by row.

    ``row_pointers[r]`` to ``row_pointers[r + 1]`` index the values and
    column indices of row ``r``.
    """

    rows: int
    columns: int
    values: tuple[float, ...]
    column_indices: tuple[int, ...]
    row_pointers: tuple[int, ...]

    @property
    def element_count(self) -> int:
        """Number of stored non-zero elements."""
        return len(self.values)


def to_csc(matrix: Matrix) -> CSCMatrix:
    """Compress a dense matrix by columns, dropping elements within EPS of zero."""
    values: list[float] = []
    row_indices: list[int] = []
    pointers = [0]
    for column in range(matrix.columns):
        for row, line in enumerate(matrix.data):
            value = line[column]
            if abs(value) > EPS:
                values.append(value)
                row_indices.append(row)
        pointers.append(len(values))
    return CSCMatrix(
        matrix.rows, matrix.columns, tuple(values), tuple(row_indices), tuple(pointers)
    )


def to_csr(matrix: Matrix) -> CSRMatrix:
    """Compress a dense matrix by rows, dropping elements within EPS of zero."""
    values: list[float] = []
    column_indices: list[int] = []
    pointers = [0]
    for line in matrix.data:
        for column, value in enumerate(line):
            if abs(value) > EPS:
                values.append(value)
                column_indices.append(column)
        pointers.append(len(values))
    return CSRMatrix(
        matrix.rows,
        matrix.columns,
        tuple(values),
        tuple(column_indices),
        tuple(pointers),
    )


def multiply(first: Matrix, second: Matrix) -> Matrix:
    """Return the product of two dense matrices."""
    if first.columns != second.rows:
        raise MatrixSizeError(
            f"cannot multiply {first.rows}x{first.columns} "
            f"by {second.rows}x{second.columns}"
        )
    result = Matrix.zeros(first.rows, second.columns)
    for row, line in enumerate(first.data):
        for column in range(second.columns):
            total = 0.0
            for inner, value in enumerate(line):
                total += value * second.data[inner][column]
            result.data[row][column] = total
    return result


def multiply_sparse(first: CSRMatrix, second: CSCMatrix) -> CSRMatrix:
    """Multiply a row-compressed matrix by a column-compressed one."""
    if first.columns != second.rows:
        raise MatrixSizeError(
            f"cannot multiply {first.rows}x{first.columns} "
            f"by {second.rows}x{second.columns}"
        )
    values: list[float] = []
    column_indices: list[int] = []
    pointers = [0]
    for row in range(first.rows):
        row_start = first.row_pointers[row]
        row_end = first.row_pointers[row + 1]
        for column in range(second.columns):
            i = row_start
            j = second.column_pointers[column]
            column_end = second.column_pointers[column + 1]
            total = 0.0
            while i < row_end and j < column_end:
                left = first.column_indices[i]
                right = second.row_indices[j]
                if left == right:
                    total += first.values[i] * second.values[j]
                    i += 1
                    j += 1
                elif left > right:
                    j += 1
                else:
                    i += 1
            if abs(total) > EPS:
                values.append(total)
                column_indices.append(column)
        pointers.append(len(values))
    return CSRMatrix(
        first.rows,
        second.columns,
        tuple(values),
        tuple(column_indices),
        tuple(pointers),
    )