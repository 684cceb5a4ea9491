"""String utilities: a small printf, hex codecs, comma lists and glob matching.

The formatter implements the same limited subset of printf conversions as a
minimal embedded ``snprintf``: ``%s``, ``%c``, ``%d``, ``%u``, ``%x`` and
``%p`` with the zero flag, a field width, a precision and the ``l``, ``ll``
and ``z`` length modifiers. Anything else is rejected.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Sequence, Union

StrLike = Union[str, bytes, bytearray, memoryview]

_ITOA_MAX_DIGITS = 39
_WHITESPACE = " \t\n\v\f\r"

# Width in bits and signedness of the C argument type for each
# (conversion, length modifier) pair the formatter accepts.
_INT_TYPES: dict[tuple[str, str], tuple[int, bool]] = {
    ("d", ""): (32, True),
    ("d", "l"): (64, True),
    ("d", "z"): (64, True),
    ("d", "q"): (64, True),
    ("u", ""): (32, False),
    ("u", "l"): (64, False),
    ("u", "z"): (64, False),
    ("x", ""): (32, False),
    ("x", "l"): (64, False),
    ("x", "z"): (64, False),
}


def _codes(s: StrLike) -> Sequence[int]:
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    return [ord(ch) for ch in s]


def _lower(code: int) -> int:
    return code + 32 if 65 <= code <= 90 else code


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def strnlen(s: StrLike, maxlen: int) -> int:
    """Length of ``s`` up to its first NUL, but at most ``maxlen``."""
    length = 0
    for code in _codes(s):
        if length >= maxlen or code == 0:
            break
        length += 1
    return length


def _itoa(num: int, base: int, zero_pad: bool, width: int) -> str:
    negative = num < 0
    digits = format(abs(num), "x" if base == 16 else "d")
    if zero_pad:
        digits = digits.rjust(min(width, _ITOA_MAX_DIGITS), "0")
    return "-" + digits if negative else digits


class _Args:
    def __init__(self, args: tuple) -> None:
        self._it = iter(args)

    def next(self):
        try:
            return next(self._it)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def next_int(self) -> int:
        value = self.next()
        if value is None:
            return 0
        if not isinstance(value, int):
            raise TypeError(f"expected an integer argument, got {type(value).__name__}")
        return value


def _format_string(value, width: int, precision: int) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("latin-1")
    if value is not None and not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    text = "" if value is None else value.split("\0", 1)[0]
    counted = min(len(text), precision) if precision >= 0 else 0
    pad = " " * max(width - counted, 0)
    if precision > 0:
        text = text[:precision]
    return pad + text


def _format_char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    if not isinstance(value, int):
        raise TypeError(f"%c expects an integer, got {type(value).__name__}")
    return chr(value & 0xFF)


def c_format(fmt: str, *args) -> str:
    """Format ``args`` according to ``fmt`` and return the whole result.

    Raises ValueError for an unsupported conversion and TypeError when the
    arguments run out or have the wrong type.
    """
    out: list[str] = []
    params = _Args(args)
    pos, end = 0, len(fmt)

    def peek() -> str:
        return fmt[pos] if pos < end else ""

    while pos < end:
        ch = fmt[pos]
        pos += 1
        if ch != "%":
            out.append(ch)
            continue

        zero_pad = peek() == "0"
        width = 0
        precision = 0
        while "0" <= peek() <= "9" and peek():
            width = width * 10 + int(fmt[pos])
            pos += 1
        if peek() == "*":
            width = params.next_int()
            pos += 1

        if peek() == ".":
            pos += 1
            if peek() == "*":
                precision = params.next_int()
                pos += 1
            else:
                while peek() and "0" <= peek() <= "9":
                    precision = precision * 10 + int(fmt[pos])
                    pos += 1

        len_mod = ""
        if peek() and peek() in "hlLIqjzt":
            len_mod = fmt[pos]
            pos += 1
            if peek() == "h":
                len_mod = "H"
                pos += 1
            if peek() == "l":
                len_mod = "q"
                pos += 1

        if pos >= end:
            raise ValueError("format string ends inside a conversion")
        conv = fmt[pos]
        pos += 1

        if conv == "s":
            out.append(_format_string(params.next(), width, precision))
        elif conv == "c":
            out.append(_format_char(params.next()))
        elif (conv, len_mod) in _INT_TYPES:
            bits, signed = _INT_TYPES[(conv, len_mod)]
            num = _wrap(params.next_int(), bits, signed)
            out.append(_itoa(num, 16 if conv == "x" else 10, zero_pad, width))
        elif conv == "p":
            num = _wrap(params.next_int(), 64, False)
            out.append("0x" + _itoa(num, 16, zero_pad, 0))
        else:
            spec = f"%{len_mod}{conv}"
            raise ValueError(f"unsupported conversion {spec!r}")

    return "".join(out)


def c_snprintf(size: int, fmt: str, *args) -> tuple[str, int]:
    """Format into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    length the full result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    full = c_format(fmt, *args)
    text = full[: size - 1] if size > 0 else ""
    return text, len(full)


def strnstr(s: str, find: str, slen: int) -> int | None:
    """Index of ``find`` within the first ``slen`` characters of ``s``, or None."""
    width = len(find)
    for start in range(max(slen, 0)):
        if start + width > slen:
            return None
        if s[start:start + width] == find:
            return start
    return None


def to_hex(data: bytes | bytearray | memoryview) -> str:
    """Lower-case hexadecimal text for ``data``, two digits per byte."""
    return bytes(data).hex()


def _nibble(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    return 0


def from_hex(text: str) -> bytes:
    """Decode hexadecimal ``text``; bad digits and a missing last digit count as 0."""
    out = bytearray()
    for start in range(0, len(text), 2):
        pair = text[start:start + 2]
        high = _nibble(pair[0])
        low = _nibble(pair[1]) if len(pair) > 1 else 0
        out.append((high << 4) + low)
    return bytes(out)


def to64(s: str) -> int:
    """Parse an optional '-' and leading decimal digits, skipping leading space."""
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + int(ch)
    return _wrap(result * sign, 64, True)


def ncasecmp(s1: StrLike, s2: StrLike, n: int) -> int:
    """Case-insensitive compare of at most ``n`` characters, ``strncasecmp`` style."""
    a, b = _codes(s1), _codes(s2)
    diff = 0
    index = 0
    remaining = n
    while remaining > 0:
        x = a[index] if index < len(a) else 0
        y = b[index] if index < len(b) else 0
        diff = _lower(x) - _lower(y)
        index += 1
        remaining -= 1
        if diff != 0 or x == 0:
            break
    return diff


def casecmp(s1: StrLike, s2: StrLike) -> int:
    """Case-insensitive compare of whole strings, ``strcasecmp`` style."""
    return ncasecmp(s1, s2, max(len(s1), len(s2)) + 1)


class CommaEntry(NamedTuple):
    """One entry of a comma list: the key, the text after '=' (or None), the rest."""

    value: str
    eq_value: str | None
    rest: str


def next_comma_list_entry(text: str) -> CommaEntry | None:
    """Split the first entry off a comma separated list.

    Returns None when ``text`` is empty. An entry of the form ``x=y`` gives
    value ``x`` and eq_value ``y``; otherwise eq_value is None.
    """
    if not text:
        return None
    value, comma, rest = text.partition(",")
    if not comma:
        rest = ""
    key, eq, eq_value = value.partition("=")
    if eq:
        return CommaEntry(key, eq_value, rest)
    return CommaEntry(value, None, rest)


def iter_comma_list(text: str) -> Iterator[tuple[str, str | None]]:
    """Yield ``(value, eq_value)`` for each entry of a comma separated list."""
    entry = next_comma_list_entry(text)
    while entry is not None:
        yield entry.value, entry.eq_value
        entry = next_comma_list_entry(entry.rest)


_PIPE, _COMMA, _QUESTION, _STAR, _DOLLAR, _SLASH = (ord(c) for c in "|,?*$/")


def _match(pattern: Sequence[int], s: Sequence[int]) -> int:
    for separator in (_PIPE, _COMMA):
        if separator in pattern:
            split = list(pattern).index(separator)
            res = _match(pattern[:split], s)
            if res > 0:
                return res
            return _match(pattern[split + 1:], s)

    i = j = 0
    plen, slen = len(pattern), len(s)
    while i < plen and j < slen:
        code = pattern[i]
        if code == _QUESTION:
            i += 1
            j += 1
            continue
        if code == _STAR:
            i += 1
            if i < plen and pattern[i] == _STAR:
                i += 1
                length = slen - j
            else:
                length = 0
                while j + length < slen and s[j + length] != _SLASH:
                    length += 1
            if i == plen or (pattern[i] == _DOLLAR and i == plen - 1):
                return j + length
            while True:
                res = _match(pattern[i:], s[j + length:])
                if res != 0 or length == 0:
                    break
                length -= 1
            return 0 if res == 0 else j + res + length
        if _lower(code) != _lower(s[j]):
            break
        i += 1
        j += 1

    if i < plen and pattern[i] == _DOLLAR:
        return slen if j == slen else 0
    return j if i == plen else 0


def match_prefix(pattern: StrLike, s: StrLike) -> int:
    """Match the start of ``s`` against a glob ``pattern``; return the length matched.

    ``*`` matches up to a '/', ``**`` matches anything, ``?`` matches one
    character, ``|`` or ``,`` separate alternatives and a trailing ``$``
    anchors at the end. Matching ignores ASCII case; 0 means no match.
    """
    return _match(_codes(pattern), _codes(s))