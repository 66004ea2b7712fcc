"""Data-structure exercises: long-mantissa division, student tables and sparse matrices."""

__version__ = "1.0.0"