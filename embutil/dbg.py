"""Levelled logging with ``file:line`` prefixes and per-file level overrides."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from embutil.mgstr import starts_with
from embutil.strutil import iter_comma_list

PREFIX_LEN = 24


class LogLevel(IntEnum):
    """Message severities; a logger prints messages at or below its level."""

    NONE = -1
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    VERBOSE_DEBUG = 4


def _digit_count(line: int) -> int:
    if line < 10:
        return 1
    if line < 100:
        return 2
    if line < 1000:
        return 3
    if line < 10000:
        return 4
    return 5


def _build_prefix(filename: str, line: int) -> tuple[str, int]:
    """Return the padded prefix and the length of its meaningful part."""
    if line < 0:
        raise ValueError("line number must not be negative")
    cut = max(filename.rfind("/"), filename.rfind("\\"))
    base = filename[cut + 1:]
    digits = _digit_count(line)
    base = base[: PREFIX_LEN - digits - 2]
    used = len(base) + 1 + digits
    tail = (":" + str(line))[-used:]
    body = (base + " " * (digits + 1))[:used]
    body = body[: used - len(tail)] + tail
    return body.ljust(PREFIX_LEN), used


def make_prefix(filename: str, line: int) -> str:
    """The fixed-width ``basename:line`` prefix written before a log message."""
    return _build_prefix(filename, line)[0]


class Logger:
    """Writes prefixed log lines to a text stream (standard error by default).

    ``set_file_level`` takes a comma separated list of ``prefix=level``
    entries. Each is matched against the message prefix as printed
    (``file.c:123``); the first entry whose prefix matches and that has a
    level decides, otherwise the logger's own level applies.
    """

    def __init__(self, level: LogLevel | int = LogLevel.ERROR, stream: TextIO | None = None) -> None:
        self.level = int(level)
        self.stream = stream
        self.file_level: str | None = None
        self.cur_msg_level: int = LogLevel.NONE

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr

    def set_level(self, level: LogLevel | int) -> None:
        """Set the highest level that gets printed."""
        self.level = int(level)

    def set_file_level(self, spec: str | None) -> None:
        """Set (or with None, clear) the per-file level overrides."""
        self.file_level = spec

    def set_file(self, stream: TextIO | None) -> None:
        """Direct output to ``stream``; None means standard error."""
        self.stream = stream

    def print_prefix(self, level: LogLevel | int, filename: str, line: int) -> bool:
        """Write the prefix if a message at ``level`` should be printed.

        Returns True when the prefix was written and the message should follow.
        """
        level = int(level)
        if level > self.level and self.file_level is None:
            return False
        prefix, used = _build_prefix(filename, line)
        if self.file_level is not None:
            limit = self.level
            shown = prefix[:used]
            for key, value in iter_comma_list(self.file_level):
                if value and starts_with(shown, key):
                    limit = ord(value[0]) - ord("0")
                    break
            if level > limit:
                return False
        self.cur_msg_level = level
        self._out().write(prefix)
        return True

    def printf(self, fmt: str, *args) -> None:
        """Write a formatted message followed by a newline, and flush."""
        out = self._out()
        out.write(fmt % args)
        out.write("\n")
        out.flush()
        self.cur_msg_level = LogLevel.NONE

    def log(self, level: LogLevel | int, filename: str, line: int, fmt: str, *args) -> bool:
        """Print a whole message if ``level`` allows; returns whether it did."""
        if not self.print_prefix(level, filename, line):
            return False
        self.printf(fmt, *args)
        return True