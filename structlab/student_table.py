"""The student table: reading it from a file, adding, deleting and searching rows."""

from __future__ import annotations

from enum import Enum
from typing import Callable, MutableSequence, Sequence

from .student import (
    FIELD_LEN,
    MAX_ADMISSION_YEAR,
    MAX_AGE,
    MAX_SCORE,
    MAX_STR_LEN,
    MIN_ADMISSION_YEAR,
    Dormitory,
    House,
    HousingType,
    RentHouse,
    Student,
    StudentFormatError,
    is_latin_word,
    parse_date,
    parse_student,
)

MAX_FILE_COUNT = 2000
MIN_FILE_COUNT = 40
SCORE_TOLERANCE = 1e-8

_OPTIONS = (
    "Выберите опцию:",
    "1. Чтение данных из файла (инициализация файла)",
    "2. Добавление данных в массив",
    "3. Удаление данных из массива по заданному полю",
    "4. Просмотр таблицы",
    "5. Просмотр таблицы ключей",
    "6. Вывести список студентов указанного года поступления, живущих в съемном "
    "жилье, стоимостью меньше указанного",
    "7. Сортировка таблицы методом сортировки пузырьком",
    "8. Сортировка таблицы методом быстрой сортировки",
    "9. Сортировка таблицы ключей методом сортировки пузырьком",
    "10. Сортировка таблицы ключей методом быстрой сортировки",
    "11. Проверка эффективности сортировок",
    "12. Просмотр таблицы данных в соответствии с массивом ключей ",
    "0. Завершение работы ",
)


class StudentFileError(Exception):
    """Raised when the student file cannot be read or holds a bad record.

    ``line`` is the 1-based number of the offending line, if there is one.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class DeleteField(Enum):
    """The field by which rows are chosen for deletion."""

    SURNAME = "surname"
    NAME = "name"
    GROUP = "group"
    GENDER = "gender"
    AGE = "age"
    AVERAGE_SCORE = "average_score"
    ADMISSION_DATE = "admission_date"
    HOUSING_TYPE = "housing_type"
    HOUSE_STREET = "house_street"
    HOUSE_NUMBER = "house_number"
    HOUSE_FLAT = "house_flat"
    DORMITORY_NUMBER = "dormitory_number"
    DORMITORY_ROOM = "dormitory_room"
    RENT_STREET = "rent_street"
    RENT_HOUSE_NUMBER = "rent_house_number"
    RENT_FLAT = "rent_flat"
    RENT_PRICE = "rent_price"


def read_students(path: str) -> list[Student]:
    """Read one student per line from a file.

    Every line must be a valid record of at most ``MAX_STR_LEN - 2``
    characters, and the file may hold at most ``MAX_FILE_COUNT`` records.
    """
    students: list[Student] = []
    try:
        with open(path, encoding="utf-8") as stream:
            for number, raw in enumerate(stream, 1):
                line = raw[:-1] if raw.endswith("\n") else raw
                if len(line) > MAX_STR_LEN - 2:
                    raise StudentFileError(
                        f"line {number} is longer than {MAX_STR_LEN - 2} characters",
                        number,
                    )
                try:
                    student = parse_student(line)
                except StudentFormatError as error:
                    raise StudentFileError(
                        f"line {number}: {error}", number
                    ) from error
                if len(students) >= MAX_FILE_COUNT:
                    raise StudentFileError(
                        f"more than {MAX_FILE_COUNT} records in the file", number
                    )
                students.append(student)
    except OSError as error:
        raise StudentFileError(f"cannot read {path!r}: {error}") from error
    return students


def add_student(students: MutableSequence[Student], line: str) -> Student:
    """Parse a record and append it to the table; return the new student."""
    student = parse_student(line)
    if len(students) + 1 >= MAX_FILE_COUNT:
        raise OverflowError(f"the table cannot hold more than {MAX_FILE_COUNT - 1} rows")
    students.append(student)
    return student


def _text_value(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise StudentFormatError(f"{what} must be text, not {value!r}")
    if len(value) >= FIELD_LEN:
        raise StudentFormatError(f"{what} is longer than {FIELD_LEN - 1} characters")
    return value


def _latin_value(value: object, what: str) -> str:
    text = _text_value(value, what)
    if not is_latin_word(text):
        raise StudentFormatError(f"{what} must hold Latin letters only: {text!r}")
    return text


def _int_value(value: object, what: str, high: int | None = None) -> int:
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise StudentFormatError(f"{what} must be a number: {value!r}") from None
    if number <= 0 or (high is not None and number > high):
        raise StudentFormatError(f"{what} is out of range: {number}")
    return number


def _housing_matcher(
    kind: type, attribute: str, expected: object
) -> Callable[[Student], bool]:
    return lambda student: (
        isinstance(student.housing, kind)
        and getattr(student.housing, attribute) == expected
    )


def _matcher(field: DeleteField, value: object) -> Callable[[Student], bool]:
    if field is DeleteField.SURNAME:
        surname = _latin_value(value, "surname")
        return lambda student: student.surname == surname
    if field is DeleteField.NAME:
        name = _latin_value(value, "name")
        return lambda student: student.name == name
    if field is DeleteField.GROUP:
        group = _text_value(value, "group")
        return lambda student: student.group == group
    if field is DeleteField.GENDER:
        if value not in ("m", "f"):
            raise StudentFormatError(f"gender must be 'f' or 'm': {value!r}")
        return lambda student: student.gender == value
    if field is DeleteField.AGE:
        age = _int_value(value, "age", MAX_AGE)
        return lambda student: student.age == age
    if field is DeleteField.AVERAGE_SCORE:
        try:
            score = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise StudentFormatError(f"score must be a number: {value!r}") from None
        if not 0 < score <= MAX_SCORE:
            raise StudentFormatError(f"score is out of range: {score}")
        return lambda student: abs(score - student.average_score) < SCORE_TOLERANCE
    if field is DeleteField.ADMISSION_DATE:
        date = parse_date(
            _text_value(value, "date"), MIN_ADMISSION_YEAR, MAX_ADMISSION_YEAR
        )
        return lambda student: student.admission_date == date
    if field is DeleteField.HOUSING_TYPE:
        kind = HousingType(_int_value(value, "housing type", 3))
        return lambda student: student.housing_type is kind
    if field is DeleteField.HOUSE_STREET:
        return _housing_matcher(House, "street", _latin_value(value, "street"))
    if field is DeleteField.HOUSE_NUMBER:
        return _housing_matcher(House, "house_num", _int_value(value, "house number"))
    if field is DeleteField.HOUSE_FLAT:
        return _housing_matcher(House, "flat_num", _int_value(value, "flat number"))
    if field is DeleteField.DORMITORY_NUMBER:
        return _housing_matcher(
            Dormitory, "dorm_num", _int_value(value, "dormitory number")
        )
    if field is DeleteField.DORMITORY_ROOM:
        return _housing_matcher(Dormitory, "room_num", _int_value(value, "room number"))
    if field is DeleteField.RENT_STREET:
        return _housing_matcher(RentHouse, "street", _latin_value(value, "street"))
    if field is DeleteField.RENT_HOUSE_NUMBER:
        return _housing_matcher(
            RentHouse, "house_num", _int_value(value, "house number")
        )
    if field is DeleteField.RENT_FLAT:
        return _housing_matcher(RentHouse, "flat_num", _int_value(value, "flat number"))
    return _housing_matcher(RentHouse, "price", _int_value(value, "price"))


def delete_students(
    students: MutableSequence[Student], field: DeleteField, value: object
) -> int:
    """Remove every student whose field equals the value; return how many went.

    The value is validated as the field requires. If the table is left
    empty, the rows are still removed and LookupError is raised.
    """
    matches = _matcher(DeleteField(field), value)
    kept = [student for student in students if not matches(student)]
    removed = len(students) - len(kept)
    students[:] = kept
    if not students:
        raise LookupError("no rows are left in the table")
    return removed


def students_in_cheaper_rent(
    students: Sequence[Student], year: int, price: int
) -> list[Student]:
    """Return students admitted in the year who rent for less than the price."""
    year = int(year)
    if not MIN_ADMISSION_YEAR <= year <= MAX_ADMISSION_YEAR:
        raise StudentFormatError(f"admission year is out of range: {year}")
    limit = _int_value(price, "price")
    return [
        student
        for student in students
        if student.admission_date[2] == year
        and isinstance(student.housing, RentHouse)
        and student.housing.price < limit
    ]


def options_text() -> str:
    """Return the menu of the student table program, ending with its prompt."""
    return "\n".join(_OPTIONS) + "\nВыберите номер опции: "