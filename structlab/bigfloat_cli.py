"""Command that divides one real number by another."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .bigfloat import BigFloat, FloatParseError, format_float, parse_float
from .bigfloat_division import divide, round_mantissa

MAX_ORDER = 99999
LINE_LIMIT = 80
_INTRO_WIDTH = 111

_INTRO_LINES = (
    "Лабораторная работа по типам и структурам данных № 1. Вариант № 6",
    "Программа выполняет деление действительного числа на действительное",
    "Числа должны соответствовать формату:[+-]?[0-9]*[.]?[0-9]*E[+-][0-9]*.",
    "Знак перед мантиссой, порядком является необязательным, точка может отсутствовать.",
    "Числа могут быть как до, так и после точки. Важно, чтобы хотя бы в одном месте "
    "(до или после точки) было число.",
    "Если используется символ E, то после него должна быть хотя бы одна цифра.",
    "Ограничение на длину мантиссы - 40 цифр, на длину порядка - 5 цифр, "
    "ведущие нули не учитываются",
)


class OrderOverflowError(ArithmeticError):
    """Raised when the order of a result leaves the allowed range."""


def intro_text() -> str:
    """Return the banner shown when the command starts."""
    lines = [f"{line:<{_INTRO_WIDTH}}|" for line in _INTRO_LINES]
    lines.append("-" * _INTRO_WIDTH + "|")
    return "\n".join(lines)


def input_annotation() -> str:
    """Return the prompt shown before each number is read."""
    return (
        "Введите действительное число в формате [+-]?[0-9]*[.]?[0-9]*E[+-][0-9]*\n"
        ">---1----2----3----4----5----6----7---8|----1|"
    )


def _quotient(first: BigFloat, second: BigFloat) -> BigFloat:
    result = round_mantissa(divide(first, second))
    if abs(result.order) > MAX_ORDER:
        raise OrderOverflowError(f"order {result.order} is out of range")
    return result


def divide_strings(first: str, second: str) -> BigFloat:
    """Parse two numbers and return their rounded quotient."""
    return _quotient(parse_float(first), parse_float(second))


def _read_line(stream: TextIO) -> str | None:
    line = stream.readline()
    if not line:
        return None
    line = line.rstrip("\n")
    if len(line) > LINE_LIMIT:
        return None
    return line


def main(argv: list[str] | None = None) -> int:
    """Read two numbers from standard input and print their quotient."""
    parser = argparse.ArgumentParser(
        prog="bigfloat-divide",
        description="Divide one real number by another, reading both from stdin.",
    )
    parser.parse_args(argv)

    print(intro_text())
    numbers = []
    for _ in range(2):
        print(input_annotation())
        line = _read_line(sys.stdin)
        if line is None:
            print("ОШИБКА ПРИ ЧТЕНИИ СТРОКИ")
            return 1
        try:
            numbers.append(parse_float(line))
        except FloatParseError:
            print("ОШИБКА ПРИ ЧТЕНИИ ЧИСЛА")
            return 1

    try:
        result = _quotient(*numbers)
    except ZeroDivisionError:
        print("ОШИБКА ДЕЛЕНИЯ НА НОЛЬ")
        return 1
    except OrderOverflowError:
        print("ОШИБКА ПОРЯДКА ЧИСЛА")
        return 1

    print("Результат:")
    print(format_float(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())