import pytest

from structlab.student import (
    Dormitory,
    House,
    HousingType,
    RentHouse,
    Student,
    StudentFormatError,
    format_student,
    is_latin_word,
    is_valid_date,
    parse_date,
    parse_student,
)

HOUSE_LINE = "Ivanov Ivan IU7-31B m 19 4.5 01.09.2022 1 Baker 12 34"
DORM_LINE = "Petrova Anna IU7-32B f 20 4.8 1.9.2021 2 5 101"
RENT_LINE = "Sidorov Petr IU7-33B m 21 3.9 15.08.2020 3 Main 7 15 9000"


def test_parse_house_student():
    student = parse_student(HOUSE_LINE)
    assert student.surname == "Ivanov"
    assert student.name == "Ivan"
    assert student.group == "IU7-31B"
    assert student.gender == "m"
    assert student.age == 19
    assert student.average_score == pytest.approx(4.5)
    assert student.admission_date == (1, 9, 2022)
    assert student.housing == House("Baker", 12, 34)
    assert student.housing_type is HousingType.HOUSE


def test_parse_dormitory_student():
    student = parse_student(DORM_LINE)
    assert student.housing == Dormitory(5, 101)
    assert student.admission_date == (1, 9, 2021)
    assert student.housing_type is HousingType.DORMITORY


def test_parse_rent_student():
    student = parse_student(RENT_LINE)
    assert student.housing == RentHouse("Main", 7, 15, 9000)
    assert student.housing_type is HousingType.RENT


def test_tabs_and_repeated_spaces_separate_fields():
    line = HOUSE_LINE.replace(" ", " \t  ")
    assert parse_student(line) == parse_student(HOUSE_LINE)


@pytest.mark.parametrize(
    "line",
    [
        "Ivanov Ivan IU7-31B m 19 4.5 01.09.2022 1 Baker",
        "Ivanov Ivan IU7-31B x 19 4.5 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 0 4.5 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 121 4.5 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m abc 4.5 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 0 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 101 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 4.5 31.02.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 4.5 01.09.1939 1 Baker 12 34",
        "Ivan0v Ivan IU7-31B m 19 4.5 01.09.2022 1 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 4.5 01.09.2022 4 Baker 12 34",
        "Ivanov Ivan IU7-31B m 19 4.5 01.09.2022 1 Baker 0 34",
        "Ivanov Ivan IU7-31B m 19 4.5 01.09.2022 1 Bak3r 12 34",
        "Sidorov Petr IU7-33B m 21 3.9 15.08.2020 3 Main 7 15",
        "Sidorov Petr IU7-33B m 21 3.9 15.08.2020 3 Main 7 15 -5",
        "A" * 31 + " Ivan IU7-31B m 19 4.5 01.09.2022 1 Baker 12 34",
        HOUSE_LINE + " x y",
    ],
)
def test_invalid_lines_are_rejected(line):
    with pytest.raises(StudentFormatError):
        parse_student(line)


def test_parse_date_leap_day():
    assert parse_date("29.02.2020", 1940, 2024) == (29, 2, 2020)


@pytest.mark.parametrize(
    "text",
    ["29.02.2019", "+1.01.2000", "1.1.200", "01.13.2000", "00.01.2000", "1.1", "01.01.2030"],
)
def test_parse_date_rejects(text):
    with pytest.raises(StudentFormatError):
        parse_date(text, 1940, 2024)


def test_parse_date_skips_empty_parts():
    assert parse_date("1..2.2000", 1940, 2024) == (1, 2, 2000)


@pytest.mark.parametrize(
    "day, month, year, expected",
    [
        (29, 2, 1900, False),
        (29, 2, 2000, True),
        (31, 4, 2021, False),
        (30, 4, 2021, True),
        (0, 1, 2000, False),
        (1, 1, -1, False),
    ],
)
def test_is_valid_date(day, month, year, expected):
    assert is_valid_date(day, month, year) is expected


@pytest.mark.parametrize(
    "text, expected", [("Ivanov", True), ("Ivan1", False), ("", True), ("Ив", False)]
)
def test_is_latin_word(text, expected):
    assert is_latin_word(text) is expected


def test_format_house_student():
    line = format_student(parse_student(HOUSE_LINE))
    assert line == "      Ivanov |        Ivan |     IU7-31B |m | 19 |  4.5 | 1. 9.2022 |1 |Baker 12 34 "


def test_format_dormitory_student():
    line = format_student(parse_student(DORM_LINE))
    assert line.endswith("|2 |5 101 ")


def test_format_rent_student_holds_price():
    line = format_student(parse_student(RENT_LINE))
    assert line.split("|")[-1].split() == ["Main", "7", "15", "9000"]


def test_student_is_immutable():
    student = parse_student(HOUSE_LINE)
    with pytest.raises(AttributeError):
        student.age = 30  # type: ignore[misc]
    assert isinstance(student, Student)
    assert student.age == 19