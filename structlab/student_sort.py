"""Sorting the student table and its table of surname keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, MutableSequence, Sequence, TypeVar

from .student import FIELD_LEN, Student

T = TypeVar("T")


@dataclass(frozen=True)
class Key:
    """A surname paired with the row index of its student."""

    index: int
    name: str


def make_keys(students: Sequence[Student]) -> list[Key]:
    """Build the key table for the students, in table order."""
    return [Key(index, student.surname) for index, student in enumerate(students)]


def _quick_sort(items: MutableSequence[T], key: Callable[[T], str]) -> None:
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if high - low < 2:
            continue
        pivot = key(items[low + (high - low) // 2])
        i, j = low, high - 1
        while i <= j:
            while key(items[i]) < pivot:
                i += 1
            while key(items[j]) > pivot:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if j > low:
            pending.append((low, j + 1))
        if i < high:
            pending.append((i, high))


def _exchange_sort(items: MutableSequence[T], key: Callable[[T], str]) -> None:
    size = len(items)
    for i in range(size - 1):
        for j in range(i, size):
            if key(items[i]) > key(items[j]):
                items[i], items[j] = items[j], items[i]


def _surname(student: Student) -> str:
    return student.surname[:FIELD_LEN]


def _key_name(key: Key) -> str:
    return key.name[:FIELD_LEN]


def quick_sort_table(students: MutableSequence[Student]) -> None:
    """Sort the students by surname in place with quicksort."""
    _quick_sort(students, _surname)


def bubble_sort_table(students: MutableSequence[Student]) -> None:
    """Sort the students by surname in place with an exchange sort."""
    _exchange_sort(students, _surname)


def quick_sort_keys(keys: MutableSequence[Key]) -> None:
    """Sort the key table by name in place with quicksort."""
    _quick_sort(keys, _key_name)


def bubble_sort_keys(keys: MutableSequence[Key]) -> None:
    """Sort the key table by name in place with an exchange sort."""
    _exchange_sort(keys, _key_name)