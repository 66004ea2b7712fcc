"""Decimal floating-point numbers with a bounded mantissa, read from text."""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_MANTISSA_LEN = 40
MAX_ORDER_LEN = 5

_DIGITS = frozenset("0123456789")

_NUMBER = re.compile(
    r"\s*(?P<sign>[+-]?)\s*(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?"
    r"\s*(?:E\s*(?P<esign>[+-]?)(?P<exp>[0-9]+))?",
    re.ASCII,
)


class FloatParseError(ValueError):
    """Raised when text does not hold a number in the accepted format."""


@dataclass(frozen=True)
class BigFloat:
    """The number ``sign * 0.digits * 10**order``.

    Zero has sign 0, no digits and order 0. Any other value keeps its
    mantissa without leading or trailing zeros.
    """

    sign: int = 0
    digits: str = ""
    order: int = 0

    def __post_init__(self) -> None:
        if self.sign not in (-1, 0, 1):
            raise ValueError(f"sign must be -1, 0 or 1, not {self.sign}")
        if self.sign == 0:
            if self.digits or self.order:
                raise ValueError("zero carries no digits and no order")
            return
        if not self.digits or not set(self.digits) <= _DIGITS:
            raise ValueError(f"mantissa must be decimal digits: {self.digits!r}")
        if self.digits[0] == "0" or self.digits[-1] == "0":
            raise ValueError(
                f"mantissa must have no leading or trailing zeros: {self.digits!r}"
            )

    def is_zero(self) -> bool:
        """Return True if this is the number zero."""
        return self.sign == 0


def parse_float(text: str) -> BigFloat:
    """Read a number of the form ``[+-]?[0-9]*[.]?[0-9]*(E[+-]?[0-9]+)?``.

    At most 40 mantissa digits are allowed (leading zeros of the integer
    part do not count) and at most 5 significant exponent digits.
    """
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise FloatParseError(f"not a number: {text!r}")
    int_digits = match["int"]
    frac = match["frac"] or ""
    if not int_digits and not frac:
        raise FloatParseError(f"no digits in the mantissa: {text!r}")

    int_part = int_digits.lstrip("0")
    if len(int_part) + len(frac) > MAX_MANTISSA_LEN:
        raise FloatParseError(
            f"mantissa is longer than {MAX_MANTISSA_LEN} digits: {text!r}"
        )

    exp_digits = (match["exp"] or "").lstrip("0")
    if len(exp_digits) > MAX_ORDER_LEN:
        raise FloatParseError(
            f"exponent is longer than {MAX_ORDER_LEN} digits: {text!r}"
        )
    exponent = int(exp_digits or "0")
    if match["esign"] == "-":
        exponent = -exponent

    significant = (int_part + frac).lstrip("0")
    if not significant:
        return BigFloat()
    order = exponent - len(frac) + len(significant)
    sign = -1 if match["sign"] == "-" else 1
    return BigFloat(sign, significant.rstrip("0"), order)


def format_float(value: BigFloat) -> str:
    """Render a number as ``[-]0.<digits>E<order>``."""
    if value.is_zero():
        return "0.0E0"
    prefix = "-" if value.sign < 0 else ""
    return f"{prefix}0.{value.digits}E{value.order}"