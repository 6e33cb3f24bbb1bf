"""Lenient number parsing: leading blanks, optional sign, then digits.

Parsing stops at the first character that cannot continue the number, and
text with no number in it parses as zero. Integer results wrap to a signed
32-bit value.
"""

from __future__ import annotations

__all__ = ["atoi", "atohexi", "atof"]

_BLANKS = " \f\n\r\t\v"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdef"


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _skip_blanks(text: str) -> str:
    return text.lstrip(_BLANKS)


def _split_sign(text: str, allow_plus: bool = True) -> tuple[int, str]:
    if text.startswith("-"):
        return -1, text[1:]
    if allow_plus and text.startswith("+"):
        return 1, text[1:]
    return 1, text


def _leading_run(text: str, alphabet: str) -> str:
    """Return the longest prefix of ``text`` made of characters in ``alphabet``."""
    for position, char in enumerate(text):
        if char not in alphabet:
            return text[:position]
    return text


def atoi(text: str) -> int:
    """Parse a decimal integer from the start of ``text``.

    Leading blanks are skipped, one ``+`` or ``-`` is accepted, and digits are
    read until the first non-digit.
    """
    sign, rest = _split_sign(_skip_blanks(text))
    digits = _leading_run(rest, _DIGITS)
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def atohexi(text: str) -> int:
    """Parse ``0x``-prefixed lowercase hexadecimal, else fall back to :func:`atoi`."""
    rest = _skip_blanks(text)
    if not rest.startswith("0x"):
        return atoi(rest)
    digits = _leading_run(rest[2:], _HEX_DIGITS)
    value = int(digits, 16) if digits else 0
    return _wrap_int32(value)


def _fraction(digits: str) -> float:
    """Value of the digits written after a decimal point."""
    result = 0.0
    for digit in reversed(digits):
        result = result / 10 + _DIGITS.index(digit)
    return result / 10


def atof(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    The integer part and fraction are accumulated separately and summed;
    exponents are not recognised.
    """
    sign, rest = _split_sign(_skip_blanks(text))
    int_digits = _leading_run(rest, _DIGITS)
    number = 0.0
    for digit in int_digits:
        number = number * 10 + _DIGITS.index(digit)
    rest = rest[len(int_digits):]
    if rest.startswith("."):
        number += _fraction(_leading_run(rest[1:], _DIGITS))
    return number * sign