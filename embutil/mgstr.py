"""Comparison and search helpers for length-delimited strings.

Every function accepts ``str`` or bytes-like values. Characters are compared
by code point (bytes by value), and case folding touches ASCII letters only.
"""

from __future__ import annotations

from typing import Sequence, Union

StrLike = Union[str, bytes, bytearray, memoryview]

_WHITESPACE = " \t\n\v\f\r"
_WHITESPACE_BYTES = _WHITESPACE.encode("ascii")


def _codes(s: StrLike) -> Sequence[int]:
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    return [ord(ch) for ch in s]


def _lower(code: int) -> int:
    return code + 32 if 65 <= code <= 90 else code


def _strncmp(a: Sequence[int], b: Sequence[int], n: int, fold: bool) -> int:
    """Compare at most ``n`` characters, stopping at a NUL like C does."""
    for x, y in zip(a[:n], b[:n]):
        if fold:
            x, y = _lower(x), _lower(y)
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def compare(a: StrLike, b: StrLike) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    for x, y in zip(_codes(a), _codes(b)):
        if x < y:
            return -1
        if x > y:
            return 1
    return (len(a) > len(b)) - (len(a) < len(b))


def ncompare(a: StrLike, b: StrLike, n: int) -> int:
    """Like :func:`compare`, but only the first ``n`` characters count."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(a[:n], b[:n])


def vcmp(a: StrLike, b: StrLike) -> int:
    """``strcmp``-style comparison; the length difference breaks a tie."""
    ca, cb = _codes(a), _codes(b)
    r = _strncmp(ca, cb, min(len(ca), len(cb)), fold=False)
    return r if r != 0 else len(ca) - len(cb)


def vcasecmp(a: StrLike, b: StrLike) -> int:
    """Case-insensitive variant of :func:`vcmp`."""
    ca, cb = _codes(a), _codes(b)
    r = _strncmp(ca, cb, min(len(ca), len(cb)), fold=True)
    return r if r != 0 else len(ca) - len(cb)


def find_char(s: StrLike, c: Union[str, int]) -> int | None:
    """Index of the first occurrence of character ``c`` in ``s``, or None."""
    target = ord(c) if isinstance(c, str) else c
    for index, code in enumerate(_codes(s)):
        if code == target:
            return index
    return None


def find(haystack: StrLike, needle: StrLike) -> int | None:
    """Index of the first occurrence of ``needle`` in ``haystack``, or None."""
    hay, need = _codes(haystack), _codes(needle)
    if len(need) > len(hay):
        return None
    width = len(need)
    for start in range(len(hay) - width + 1):
        if list(hay[start:start + width]) == list(need):
            return start
    return None


def strip(s: StrLike) -> StrLike:
    """Remove C whitespace from both ends of ``s``."""
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).strip(_WHITESPACE_BYTES)
    return s.strip(_WHITESPACE)


def starts_with(s: StrLike, prefix: StrLike) -> bool:
    """True if ``s`` begins with ``prefix``."""
    if len(s) < len(prefix):
        return False
    return compare(s[: len(prefix)], prefix) == 0