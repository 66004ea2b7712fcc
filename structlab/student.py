"""Student records: parsing, validation and table formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from string import ascii_letters
from typing import Union

FIELD_LEN = 30
DATE_LEN = 10
MAX_STR_LEN = 200
MIN_ADMISSION_YEAR = 1940
MAX_ADMISSION_YEAR = 2024
MAX_AGE = 120
MAX_SCORE = 100

_INT_PREFIX = re.compile(r"\s*[+-]?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_WORD_SEPARATORS = re.compile(r"[ \t\n]+")
_LETTERS = frozenset(ascii_letters)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class StudentFormatError(ValueError):
    """Raised when a student record or one of its fields is not valid."""


class HousingType(IntEnum):
    """Kind of housing a student lives in."""

    HOUSE = 1
    DORMITORY = 2
    RENT = 3


@dataclass(frozen=True)
class House:
    """A student's own house."""

    street: str
    house_num: int
    flat_num: int


@dataclass(frozen=True)
class Dormitory:
    """A room in a dormitory."""

    dorm_num: int
    room_num: int


@dataclass(frozen=True)
class RentHouse:
    """A rented flat and its price."""

    street: str
    house_num: int
    flat_num: int
    price: int


Housing = Union[House, Dormitory, RentHouse]

_HOUSING_TYPES = {
    House: HousingType.HOUSE,
    Dormitory: HousingType.DORMITORY,
    RentHouse: HousingType.RENT,
}


@dataclass(frozen=True)
class Student:
    """One row of the student table."""

    surname: str
    name: str
    group: str
    gender: str
    age: int
    average_score: float
    admission_date: tuple[int, int, int]
    housing: Housing

    @property
    def housing_type(self) -> HousingType:
        """The kind of housing this student lives in."""
        return _HOUSING_TYPES[type(self.housing)]


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _leading_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else None


def is_latin_word(text: str) -> bool:
    """Return True if every character of the text is a Latin letter."""
    return all(char in _LETTERS for char in text)


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True if the day exists in the given month of the given year."""
    if day <= 0 or year < 0 or not 1 <= month <= 12:
        return False
    leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    if month == 2 and leap:
        return day <= 29
    return day <= _MONTH_DAYS[month - 1]


def _date_part(part: str, low: int, high: int, what: str) -> int:
    value = _leading_int(part)
    if part.startswith("+") or not value or not low <= value <= high:
        raise StudentFormatError(f"invalid {what}: {part!r}")
    return value


def parse_date(text: str, min_year: int, max_year: int) -> tuple[int, int, int]:
    """Read a ``day.month.year`` date whose year lies in the given range."""
    if not DATE_LEN - 2 <= len(text) <= DATE_LEN:
        raise StudentFormatError(f"date has the wrong length: {text!r}")
    parts = [part for part in text.split(".") if part]
    if len(parts) != 3:
        raise StudentFormatError(f"date must have three parts: {text!r}")
    day = _date_part(parts[0], 1, 31, "day")
    month = _date_part(parts[1], 1, 12, "month")
    year = _date_part(parts[2], min_year, max_year, "year")
    if not is_valid_date(day, month, year):
        raise StudentFormatError(f"no such date: {text!r}")
    return day, month, year


def _field(words: list[str], index: int, what: str) -> str:
    try:
        return words[index]
    except IndexError:
        raise StudentFormatError(f"missing {what}") from None


def _latin(word: str, what: str) -> str:
    if not is_latin_word(word):
        raise StudentFormatError(f"{what} must hold Latin letters only: {word!r}")
    return word


def _positive(word: str, what: str) -> int:
    value = _leading_int(word)
    if value is None or value <= 0:
        raise StudentFormatError(f"{what} must be a positive number: {word!r}")
    return value


def _parse_housing(kind: HousingType, words: list[str]) -> Housing:
    if kind is HousingType.DORMITORY:
        return Dormitory(
            _positive(_field(words, 8, "dormitory number"), "dormitory number"),
            _positive(_field(words, 9, "room number"), "room number"),
        )
    street = _latin(_field(words, 8, "street"), "street")
    house_num = _positive(_field(words, 9, "house number"), "house number")
    flat_num = _positive(_field(words, 10, "flat number"), "flat number")
    if kind is HousingType.HOUSE:
        return House(street, house_num, flat_num)
    price = _positive(_field(words, 11, "price"), "price")
    return RentHouse(street, house_num, flat_num, price)


def parse_student(line: str) -> Student:
    """Read a student from one whitespace-separated line of 10 to 12 fields."""
    words = [word for word in _WORD_SEPARATORS.split(line) if word]
    for word in words:
        if len(word) > FIELD_LEN:
            raise StudentFormatError(f"field is longer than {FIELD_LEN} characters")
    if not 10 <= len(words) <= 12:
        raise StudentFormatError(f"expected 10 to 12 fields, got {len(words)}")

    surname = _latin(words[0], "surname")
    name = _latin(words[1], "name")
    group = words[2]
    gender = words[3]
    if gender not in ("f", "m"):
        raise StudentFormatError(f"gender must be 'f' or 'm': {gender!r}")

    age = _leading_int(words[4])
    if age is None or not 0 < age <= MAX_AGE:
        raise StudentFormatError(f"invalid age: {words[4]!r}")

    score = _leading_float(words[5])
    if score is None or not 0 < score <= MAX_SCORE:
        raise StudentFormatError(f"invalid average score: {words[5]!r}")

    admission = parse_date(words[6], MIN_ADMISSION_YEAR, MAX_ADMISSION_YEAR)

    kind = _leading_int(words[7])
    if kind is None or not 1 <= kind <= 3:
        raise StudentFormatError(f"invalid housing type: {words[7]!r}")
    housing = _parse_housing(HousingType(kind), words)

    return Student(surname, name, group, gender, age, score, admission, housing)


def _format_housing(housing: Housing) -> str:
    if isinstance(housing, House):
        values = (housing.street, housing.house_num, housing.flat_num)
    elif isinstance(housing, Dormitory):
        values = (housing.dorm_num, housing.room_num)
    else:
        values = (housing.street, housing.house_num, housing.flat_num, housing.price)
    return "".join(f"{value} " for value in values)


def format_student(student: Student) -> str:
    """Render a student as one row of the table."""
    day, month, year = student.admission_date
    return (
        f"{student.surname:>12} |"
        f"{student.name:>12} |"
        f"{student.group:>12} |"
        f"{student.gender:>1} |"
        f"{student.age:3d} |"
        f"{student.average_score:5.1f} |"
        f"{day:2d}.{month:2d}.{year:2d} |"
        f"{int(student.housing_type):1d} |"
        f"{_format_housing(student.housing)}"
    )