"""A small printf-style formatter with a fixed set of conversions.

Supported conversions:

``%c``  one character (an ``int`` code or a one-character ``str``)
``%s``  a string; ``None`` prints as ``(null)``
``%p``  an address in ``0x``-prefixed lowercase hex; ``None`` or ``0`` prints ``(nil)``
``%d``, ``%i``  a signed 32-bit decimal
``%u``  an unsigned 32-bit decimal
``%x``, ``%X``  unsigned 32-bit hexadecimal, lower or upper case
``%f``  a number with exactly six decimals, ``null`` when out of 32-bit range
``%z``  a string and a length: at most that many characters of the string
``%%``  a literal percent sign

Any other character after ``%`` is echoed with its percent sign and consumes
no argument. A format ending in a lone ``%`` is an error.
"""

from __future__ import annotations

import math
import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

__all__ = ["FormatError", "cformat", "cprintf"]

_LOW_HEX = "0123456789abcdef"
_INT32_LIMIT = 2147483648.0
_INT32_FLOOR = -2147483649.0
_DECIMALS = 6


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


class _Arguments:
    """Hands out the positional arguments one conversion at a time."""

    def __init__(self, args: tuple[Any, ...]) -> None:
        self._iter: Iterator[Any] = iter(args)

    def take(self, conversion: str) -> Any:
        try:
            return next(self._iter)
        except StopIteration:
            raise FormatError(f"missing argument for %{conversion}") from None


def _as_int32(value: Any) -> int:
    value = operator.index(value) & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _as_uint32(value: Any) -> int:
    return operator.index(value) & 0xFFFFFFFF


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    return _until_nul(str(value))


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return "(nil)"
    return "0x" + format(address & 0xFFFFFFFFFFFFFFFF, "x")


def _float(value: Any) -> str:
    number = float(value)
    if math.isnan(number) or number >= _INT32_LIMIT or number <= _INT32_FLOOR:
        return "null"
    sign = ""
    if number < 0:
        sign = "-"
        number = -number
    digits = []
    scaled = number
    while scaled - int(scaled) > 0 and len(digits) < _DECIMALS:
        scaled *= 10
        digits.append(str(int(scaled) % 10))
    fraction = "".join(digits).ljust(_DECIMALS, "0")
    return f"{sign}{int(number)}.{fraction}"


def _bounded(value: Optional[str], length: Any) -> str:
    if value is None:
        raise FormatError("%z expects a string")
    return _until_nul(str(value))[: _as_uint32(length)]


_Converter = Callable[[_Arguments], str]

_CONVERTERS: dict[str, _Converter] = {
    "c": lambda a: _char(a.take("c")),
    "s": lambda a: _string(a.take("s")),
    "p": lambda a: _pointer(a.take("p")),
    "d": lambda a: str(_as_int32(a.take("d"))),
    "i": lambda a: str(_as_int32(a.take("i"))),
    "u": lambda a: str(_as_uint32(a.take("u"))),
    "x": lambda a: format(_as_uint32(a.take("x")), "x"),
    "X": lambda a: format(_as_uint32(a.take("X")), "X"),
    "f": lambda a: _float(a.take("f")),
    "z": lambda a: _bounded(a.take("z"), a.take("z")),
    "%": lambda a: "%",
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    arguments = _Arguments(args)
    chars = iter(_until_nul(fmt))
    for char in chars:
        if char != "%":
            yield char
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise FormatError("format string ends with a lone '%'")
        converter = _CONVERTERS.get(conversion)
        yield converter(arguments) if converter else "%" + conversion


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise FormatError("no format string")
    return "".join(_render(fmt, args))


def cprintf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written. Nothing is written when the
    format is invalid.
    """
    text = cformat(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)