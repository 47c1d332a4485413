# ariohash/core/codeunits.py
"""
UTF-16 code unit helpers.

All character arithmetic in the digest works on 16-bit code units, the same
unit JavaScript's ``charCodeAt`` reports. Text is converted once on entry and
indexed as a list of ints from then on, so characters outside the Basic
Multilingual Plane count as two units and lone surrogates survive untouched.
"""
import sys
from array import array
from typing import Iterator, List, Sequence

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_code_units(text: str) -> List[int]:
    """Splits a string into UTF-16 code units."""
    units = array("H", text.encode("utf-16-le", "surrogatepass"))
    if sys.byteorder == "big":
        units.byteswap()
    return units.tolist()


def is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def iter_leading_units(units: Sequence[int]) -> Iterator[int]:
    """
    Yields the first code unit of every code point.

    A high surrogate followed by a low surrogate is one code point and only the
    high half is yielded. Unpaired surrogates are yielded as they are.
    """
    i = 0
    n = len(units)
    while i < n:
        unit = units[i]
        yield unit
        if is_high_surrogate(unit) and i + 1 < n and is_low_surrogate(units[i + 1]):
            i += 2
        else:
            i += 1


def to_base36(value: int) -> str:
    """Renders a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError(f"Cannot render negative value {value} in base 36")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))
