import pytest

from structlab.student import (
    Dormitory,
    HousingType,
    RentHouse,
    StudentFormatError,
    parse_student,
)
from structlab.student_table import (
    MAX_FILE_COUNT,
    DeleteField,
    StudentFileError,
    add_student,
    delete_students,
    options_text,
    read_students,
    students_in_cheaper_rent,
)

RENT_LINE = "Ivanov Ivan IU7-33B m 19 4.5 01.09.2022 3 Lenina 5 10 15000"
DORM_LINE = "Petrova Anna IU7-31B f 18 4.8 01.09.2023 2 5 210"
HOUSE_LINE = "Sidorov Petr IU7-32B m 20 4.1 01.09.2021 1 Arbat 7 3"
RENT_LINE_2 = "Orlov Oleg IU7-34B m 21 3.9 01.09.2022 3 Tverskaya 2 4 30000"


@pytest.fixture
def table():
    return [parse_student(line) for line in (RENT_LINE, DORM_LINE, HOUSE_LINE, RENT_LINE_2)]


def _write(tmp_path, lines):
    path = tmp_path / "students.txt"
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return str(path)


def test_read_students_keeps_file_order(tmp_path):
    path = _write(tmp_path, [RENT_LINE, DORM_LINE, HOUSE_LINE])
    students = read_students(path)
    assert [s.surname for s in students] == ["Ivanov", "Petrova", "Sidorov"]
    assert students[1].housing == Dormitory(5, 210)


def test_read_students_missing_file(tmp_path):
    with pytest.raises(StudentFileError):
        read_students(str(tmp_path / "absent.txt"))


def test_read_students_reports_bad_line(tmp_path):
    path = _write(tmp_path, [RENT_LINE, "Bad line"])
    with pytest.raises(StudentFileError) as info:
        read_students(path)
    assert info.value.line == 2


def test_read_students_rejects_long_line(tmp_path):
    path = _write(tmp_path, [DORM_LINE, "x" * 199])
    with pytest.raises(StudentFileError) as info:
        read_students(path)
    assert info.value.line == 2


def test_read_students_rejects_too_many_records(tmp_path):
    path = _write(tmp_path, [DORM_LINE] * (MAX_FILE_COUNT + 1))
    with pytest.raises(StudentFileError):
        read_students(path)


def test_read_students_accepts_the_maximum(tmp_path):
    path = _write(tmp_path, [DORM_LINE] * MAX_FILE_COUNT)
    assert len(read_students(path)) == MAX_FILE_COUNT


def test_add_student_appends(table):
    before = len(table)
    student = add_student(table, HOUSE_LINE)
    assert len(table) == before + 1
    assert table[-1] == student
    assert student.housing_type is HousingType.HOUSE


def test_add_student_rejects_bad_record(table):
    before = list(table)
    with pytest.raises(StudentFormatError):
        add_student(table, "Ivanov Ivan")
    assert table == before


def test_add_student_rejects_full_table():
    students = [parse_student(DORM_LINE)] * (MAX_FILE_COUNT - 1)
    with pytest.raises(OverflowError):
        add_student(students, HOUSE_LINE)
    assert len(students) == MAX_FILE_COUNT - 1


def test_delete_by_surname(table):
    removed = delete_students(table, DeleteField.SURNAME, "Ivanov")
    assert removed == 1
    assert "Ivanov" not in [s.surname for s in table]


def test_delete_by_gender(table):
    removed = delete_students(table, DeleteField.GENDER, "m")
    assert removed == 3
    assert [s.surname for s in table] == ["Petrova"]


def test_delete_rejects_invalid_gender(table):
    with pytest.raises(StudentFormatError):
        delete_students(table, DeleteField.GENDER, "x")


def test_delete_rejects_non_latin_surname(table):
    with pytest.raises(StudentFormatError):
        delete_students(table, DeleteField.SURNAME, "Ivanov1")


def test_delete_by_rent_price_only_touches_rent(table):
    removed = delete_students(table, DeleteField.RENT_PRICE, 15000)
    assert removed == 1
    assert all(
        not (isinstance(s.housing, RentHouse) and s.housing.price == 15000)
        for s in table
    )


def test_delete_by_date(table):
    removed = delete_students(table, DeleteField.ADMISSION_DATE, "01.09.2022")
    assert removed == 2
    assert all(s.admission_date != (1, 9, 2022) for s in table)


def test_delete_by_dormitory_room(table):
    assert delete_students(table, DeleteField.DORMITORY_ROOM, 210) == 1
    assert all(s.housing_type is not HousingType.DORMITORY for s in table)


def test_delete_no_match_leaves_table(table):
    before = list(table)
    assert delete_students(table, DeleteField.AGE, 99) == 0
    assert table == before


def test_delete_all_rows_raises(table):
    for student in table[1:]:
        delete_students(table, DeleteField.SURNAME, student.surname)
    with pytest.raises(LookupError):
        delete_students(table, DeleteField.SURNAME, "Ivanov")
    assert table == []


def test_cheaper_rent(table):
    found = students_in_cheaper_rent(table, 2022, 20000)
    assert [s.surname for s in found] == ["Ivanov"]


def test_cheaper_rent_none_found(table):
    assert students_in_cheaper_rent(table, 2022, 15000) == []


def test_cheaper_rent_rejects_year(table):
    with pytest.raises(StudentFormatError):
        students_in_cheaper_rent(table, 1939, 20000)


def test_cheaper_rent_rejects_price(table):
    with pytest.raises(StudentFormatError):
        students_in_cheaper_rent(table, 2022, 0)


def test_options_text():
    text = options_text()
    lines = text.split("\n")
    assert lines[0] == "Выберите опцию:"
    assert "12. Просмотр таблицы данных в соответствии с массивом ключей " in lines
    assert lines[-1] == "Выберите номер опции: "