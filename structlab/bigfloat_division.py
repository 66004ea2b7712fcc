"""Division of bounded-mantissa decimal numbers and mantissa rounding."""

from __future__ import annotations

from fractions import Fraction

from .bigfloat import MAX_MANTISSA_LEN, BigFloat

QUOTIENT_DIGITS = MAX_MANTISSA_LEN + 1


def divide(first: BigFloat, second: BigFloat) -> BigFloat:
    """Divide two numbers, keeping up to 41 truncated quotient digits."""
    if second.is_zero():
        raise ZeroDivisionError("division by zero")
    if first.is_zero():
        return BigFloat()

    ratio = Fraction(int(first.digits), int(second.digits))
    exponent = len(first.digits) - len(second.digits) + 1
    if ratio < Fraction(10) ** (exponent - 1):
        exponent -= 1

    scaled = ratio * Fraction(10) ** (QUOTIENT_DIGITS - exponent)
    digits = str(scaled.numerator // scaled.denominator).rstrip("0")
    order = (
        exponent
        + (first.order - len(first.digits))
        - (second.order - len(second.digits))
    )
    return BigFloat(first.sign * second.sign, digits, order)


def round_mantissa(value: BigFloat) -> BigFloat:
    """Drop the last mantissa digit, rounding half up, once it reaches the limit."""
    if len(value.digits) < MAX_MANTISSA_LEN:
        return value
    kept, last = value.digits[:-1], value.digits[-1]
    rounded = str(int(kept) + (1 if last >= "5" else 0))
    order = value.order
    if len(rounded) > len(kept):
        order += 1
    return BigFloat(value.sign, rounded.rstrip("0"), order)