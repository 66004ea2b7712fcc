"""Dense matrices read from text in the standard or the coordinate format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

EPS = 1e-8

T = TypeVar("T")


class MatrixInputError(ValueError):
    """Raised when matrix text or a matrix file cannot be read."""


@dataclass
class Matrix:
    """A dense matrix of floats kept as a list of equally long rows."""

    data: list[list[float]]

    def __post_init__(self) -> None:
        if not self.data or not self.data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(self.data[0])
        if any(len(row) != width for row in self.data):
            raise ValueError("all rows of a matrix must have the same length")

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """Return a matrix of the given size filled with zeros."""
        return cls([[0.0] * columns for _ in range(rows)])

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self.data)

    @property
    def columns(self) -> int:
        """Number of columns."""
        return len(self.data[0])


def _count(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(f"negative count: {token}")
    return value


def _take(tokens: Iterator[str], convert: Callable[[str], T], what: str) -> T:
    try:
        token = next(tokens)
    except StopIteration:
        raise MatrixInputError(f"missing {what}") from None
    try:
        return convert(token)
    except ValueError:
        raise MatrixInputError(f"invalid {what}: {token!r}") from None


def _size(tokens: Iterator[str]) -> tuple[int, int]:
    rows = _take(tokens, _count, "number of rows")
    columns = _take(tokens, _count, "number of columns")
    return rows, columns


def parse_standard(text: str) -> Matrix:
    """Read ``rows columns`` followed by every element, row by row."""
    tokens = iter(text.split())
    rows, columns = _size(tokens)
    if rows == 0 or columns == 0:
        raise MatrixInputError("matrix size must be positive")
    data = [
        [_take(tokens, float, "matrix element") for _ in range(columns)]
        for _ in range(rows)
    ]
    return Matrix(data)


def parse_coordinate(text: str) -> Matrix:
    """Read ``rows columns count`` followed by ``value row column`` triples.

    Row and column indices start at 0. Every value must be non-zero and
    no position may be given twice.
    """
    tokens = iter(text.split())
    rows, columns = _size(tokens)
    count = _take(tokens, _count, "number of non-zero elements")
    if rows == 0 or columns == 0 or count == 0:
        raise MatrixInputError("matrix size and element count must be positive")
    matrix = Matrix.zeros(rows, columns)
    for _ in range(count):
        value = _take(tokens, float, "element value")
        row = _take(tokens, _count, "row index")
        column = _take(tokens, _count, "column index")
        if row >= rows or column >= columns:
            raise MatrixInputError(f"position ({row}, {column}) is outside the matrix")
        if abs(value) <= EPS:
            raise MatrixInputError(f"element at ({row}, {column}) is zero")
        if abs(matrix.data[row][column]) > EPS:
            raise MatrixInputError(f"position ({row}, {column}) is given twice")
        matrix.data[row][column] = value
    return matrix


def _read(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as stream:
            return stream.read()
    except OSError as error:
        raise MatrixInputError(f"cannot read {path!r}: {error}") from error


def read_standard(path: str) -> Matrix:
    """Read a matrix in the standard format from a file."""
    return parse_standard(_read(path))


def read_coordinate(path: str) -> Matrix:
    """Read a matrix in the coordinate format from a file."""
    return parse_coordinate(_read(path))