"""Formatted and unformatted output written straight to file descriptors."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from typing import Any

_CONVERSIONS = "cspdiuxX%"
_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)


def _int32(value: int) -> int:
    value = int(value) & 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _uint32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _to_base(number: int, base: str) -> str:
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("only non-negative numbers can be written in a base")
    radix = len(base)
    digits = [base[number % radix]]
    number //= radix
    while number:
        digits.append(base[number % radix])
        number //= radix
    return "".join(reversed(digits))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _address(value: Any) -> str:
    if value is None or value == 0:
        return "0x0"
    number = value if isinstance(value, int) else id(value)
    return "0x" + _to_base(number, _HEX_LOWER)


def _signed(value: int) -> str:
    number = _int32(value)
    if number < 0:
        return "-" + _to_base(-number, _DECIMAL)
    return _to_base(number, _DECIMAL)


def _hexa(value: int, case: str) -> str:
    if case == "x":
        return _to_base(_uint32(value), _HEX_LOWER)
    if case == "X":
        return _to_base(_uint32(value), _HEX_UPPER)
    raise ValueError(f"hexadecimal case must be 'x' or 'X', got {case!r}")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _address(value)
    if spec in "di":
        return _signed(value)
    if spec == "u":
        return _to_base(_uint32(value), _DECIMAL)
    return _hexa(value, spec)


def format_string(template: str, *args: Any) -> str:
    """Expand the ``%c %s %p %d %i %u %x %X %%`` directives of ``template``.

    Any other character after ``%`` is kept as written. A ``%`` ending the
    template is an error.
    """
    if template is None:
        raise ValueError("no format string given")
    remaining = iter(args)

    def expand(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "":
            raise ValueError("format string ends with a lone '%'")
        if spec in _CONVERSIONS:
            return _convert(spec, remaining)
        return match.group(0)

    return _DIRECTIVE.sub(expand, template)


def _write(fd: int, text: str) -> int:
    data = text.encode("utf-8")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def printf_fd(fd: int, template: str, *args: Any) -> int:
    """Write the expanded ``template`` to ``fd`` and return the bytes written."""
    return _write(fd, format_string(template, *args))


def put_char(fd: int, char: Any) -> int:
    """Write one character to ``fd``."""
    return _write(fd, _char(char))


def put_str(fd: int, text: str | None) -> int:
    """Write ``text`` to ``fd``; None is written as ``(null)``."""
    return _write(fd, "(null)" if text is None else text)


def put_endl(fd: int, text: str) -> int:
    """Write ``text`` followed by a newline to ``fd``."""
    return _write(fd, text + "\n")


def put_base(fd: int, number: int, base: str) -> int:
    """Write a non-negative ``number`` using the digits of ``base``."""
    return _write(fd, _to_base(number, base))


def put_nbr(fd: int, number: int) -> int:
    """Write a signed 32-bit integer in decimal."""
    return _write(fd, _signed(number))


def put_uint(fd: int, number: int) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    return _write(fd, _to_base(_uint32(number), _DECIMAL))


def put_hexa(fd: int, number: int, case: str) -> int:
    """Write an unsigned 32-bit integer in hexadecimal, ``case`` being 'x' or 'X'."""
    return _write(fd, _hexa(number, case))


def put_addr(fd: int, address: Any) -> int:
    """Write an address as ``0x`` followed by lower-case hex; null is ``0x0``."""
    return _write(fd, _address(address))