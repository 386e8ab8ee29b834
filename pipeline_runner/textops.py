"""Small string and number helpers used by the command-line tools."""

from __future__ import annotations

import re
from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_SPACE = "\t\n\x0b\x0c\r "
_ATOI_RE = re.compile(f"[{_SPACE}]*([+-]*)([0-9]*)")
_ATOI_LL_RE = re.compile(f"[{_SPACE}]*([+-]?)([0-9]+)")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading integer leniently, as a 32-bit signed value.

    Leading whitespace is skipped and any run of ``+``/``-`` signs is read.
    More than one sign of a kind, or both kinds together, gives 0. Parsing
    stops at the first non-digit; no digits gives 0. Values outside the
    32-bit range wrap around.
    """
    match = _ATOI_RE.match(text)
    signs, digits = match.group(1), match.group(2)
    negatives = signs.count("-")
    positives = signs.count("+")
    if negatives > 1 or positives > 1 or (negatives and positives):
        return 0
    number = _wrap_int32(int(digits or "0"))
    return _wrap_int32(-number) if negatives else number


def atoi_ll(text: str) -> int:
    """Parse a whole string as a signed 64-bit integer.

    Leading whitespace and one optional sign are allowed; everything after
    them must be digits. Raises ValueError on malformed input or when the
    value does not fit in 64 bits.
    """
    match = _ATOI_LL_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value
    if not LLONG_MIN <= value <= LLONG_MAX:
        raise ValueError(f"integer out of 64-bit range: {text!r}")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def str_comp(first: str, second: str) -> bool:
    """Return True when ``second`` is ``first`` followed by exactly one character.

    This is the check used to match a delimiter against a line that still
    carries its trailing newline; two identical strings do not match.
    """
    return len(second) == len(first) + 1 and second.startswith(first)


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return text.strip(chars)


def strnstr(big: str, little: str, length: int) -> int:
    """Return the index of ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at index 0; otherwise -1 means not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    return big.find(little, 0, length)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second