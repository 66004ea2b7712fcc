# structlab

Library modules and two console commands built around classic
data-structure exercises:

* **Long-mantissa real numbers** (`structlab.bigfloat`,
  `structlab.bigfloat_division`, `structlab.bigfloat_cli`) — parse numbers
  with up to 40 mantissa digits and a 5-digit exponent, divide them keeping
  up to 41 truncated quotient digits, and round the mantissa back under the
  limit.
* **Student table** (`structlab.student`, `structlab.student_table`,
  `structlab.student_sort`) — parse and validate student records, load them
  from a text file, add and delete rows, find renters by admission year and
  price, and sort either the table itself or a separate table of surname
  keys with quicksort or an exchange (bubble) sort.
* **Sparse matrices** (`structlab.matrix`, `structlab.sparse`,
  `structlab.matrix_format`, `structlab.matrix_bench`) — read dense matrices
  in standard or coordinate form, compress them by rows (`CSRMatrix`) or by
  columns (`CSCMatrix`), multiply them both ways, render them as text and
  compare time and memory.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `structlab-divide`

Prints a banner, then reads two lines from standard input (each at most 80
characters) and prints their rounded quotient:

```
$ printf '1\n3\n' | structlab-divide
...
Результат:
0.333333333333333333333333333333333333333E0
```

Numbers follow the pattern `[+-]?[0-9]*[.]?[0-9]*(E[+-]?[0-9]+)?`: the signs
are optional, the point may be absent, digits may stand before or after the
point (at least one side must have some), and `E` must be followed by at
least one digit. Leading zeros do not count towards the limits of 40
mantissa digits and 5 exponent digits. The result is printed as
`[-]0.<digits>E<order>`; zero prints as `0.0E0`. The command exits with
status 1 and a message on a bad line, a bad number, division by zero, or a
result whose order lies outside ±99999.

### `structlab-matrix-bench`

```
structlab-matrix-bench [rows] [columns] [--seed N]
```

For fill levels 10%, 20%, … 100% it builds a random `rows x columns` matrix
and a random `columns x rows` matrix, multiplies them densely and in
compressed form, and prints a table of memory use (bytes) and times
(nanoseconds). If `rows` or `columns` is not given it is asked for on
standard input.

## Library use

### Real numbers

```python
from structlab.bigfloat import parse_float, format_float
from structlab.bigfloat_division import divide, round_mantissa
from structlab.bigfloat_cli import divide_strings

quotient = round_mantissa(divide(parse_float("1"), parse_float("3")))
print(format_float(quotient))
print(format_float(divide_strings("2.5E3", "-0.5")))  # -0.5E4
```

`BigFloat` is a frozen dataclass `(sign, digits, order)` meaning
`sign * 0.digits * 10**order`. `parse_float` raises `FloatParseError`,
`divide` raises `ZeroDivisionError`, and `divide_strings` also raises
`OrderOverflowError` when the order leaves ±99999.

### Students

A student file holds one record per line, fields separated by whitespace:

```
surname name group gender age score dd.mm.yyyy housing ...
```

`gender` is `m` or `f`; `housing` is `1` (own house: street, house number,
flat number), `2` (dormitory: dormitory number, room number) or `3` (rented
flat: street, house number, flat number, price). Names and streets use Latin
letters only, ages lie in 1–120, scores in (0, 100] and admission years in
1940–2024.

```python
from structlab.student_table import (
    DeleteField, read_students, add_student, delete_students,
    students_in_cheaper_rent,
)
from structlab.student_sort import make_keys, quick_sort_keys, quick_sort_table
from structlab.student import format_student

students = read_students("students.txt")
add_student(students, "Smith John IU7 m 20 4.5 01.09.2020 3 Baker 1 2 15000")
delete_students(students, DeleteField.AGE, 25)

keys = make_keys(students)
quick_sort_keys(keys)                     # sorts in place
for key in keys:
    print(format_student(students[key.index]))

for student in students_in_cheaper_rent(students, 2020, 20000):
    print(format_student(student))
```

`read_students` raises `StudentFileError` (with the offending `line`
number where there is one); `parse_student` and the field checks raise
`StudentFormatError`; `delete_students` raises `LookupError` after removing
rows if none are left; `add_student` raises `OverflowError` once the table
is full. `options_text()` returns the menu text of the student table program.

### Matrices

```python
from structlab.matrix import parse_standard, parse_coordinate
from structlab.sparse import to_csr, to_csc, multiply, multiply_sparse
from structlab.matrix_format import format_matrix, format_csr

left = parse_standard("2 2\n1 0\n0 2\n")
right = parse_coordinate("2 2 2\n3 0 1\n4 1 0\n")   # value row column, 0-based
print(format_matrix(multiply(left, right)))
print(format_csr(multiply_sparse(to_csr(left), to_csc(right))))
```

`read_standard` and `read_coordinate` read the same formats from files.
Bad input raises `MatrixInputError`; mismatched sizes raise
`MatrixSizeError`.

## What the package does not do

* There is no interactive menu command for the student table: the reading,
  editing, searching and sorting functions are available only as a library.
* There are no stack implementations or palindrome checks in this package.