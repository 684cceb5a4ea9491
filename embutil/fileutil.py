"""Whole-file reading helpers."""

from __future__ import annotations

import mmap
import os
from pathlib import Path


def read_file(path: str | os.PathLike) -> bytes:
    """Return the whole content of the file at ``path``.

    Raises OSError if the file cannot be opened or read.
    """
    return Path(path).read_bytes()


def mmap_file(path: str | os.PathLike) -> mmap.mmap:
    """Map the file at ``path`` read-only; ``len()`` of the result is its size.

    Raises OSError if the file cannot be opened and ValueError if it is empty.
    """
    with open(path, "rb") as fh:
        return mmap.mmap(fh.fileno(), 0, access=mmap.ACCESS_READ)