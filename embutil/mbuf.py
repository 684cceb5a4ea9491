"""A growable byte buffer with explicit capacity management."""

from __future__ import annotations

SIZE_MULTIPLIER = 1.5
SIZE_MAX_HEADROOM = 8192


class MBuf:
    """Mutable byte buffer that tracks an allocated capacity (``size``).

    Data can be appended or inserted anywhere; capacity grows by
    ``SIZE_MULTIPLIER`` but never leaves more than ``SIZE_MAX_HEADROOM``
    spare bytes when it grows.
    """

    def __init__(self, initial_capacity: int = 0) -> None:
        self._data = bytearray()
        self._size = 0
        self.resize(initial_capacity)

    @property
    def size(self) -> int:
        """Allocated capacity in bytes; always at least ``len(self)``."""
        return self._size

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"MBuf(len={len(self._data)}, size={self._size})"

    def insert(self, offset: int, data: bytes | bytearray | memoryview) -> int:
        """Insert ``data`` at ``offset``, shifting existing bytes forward.

        Returns the number of bytes inserted.
        """
        if not 0 <= offset <= len(self._data):
            raise IndexError(f"offset {offset} outside buffer of length {len(self._data)}")
        chunk = bytes(data)
        min_size = len(self._data) + len(chunk)
        if min_size > self._size:
            new_size = int(min_size * SIZE_MULTIPLIER)
            if new_size - min_size > SIZE_MAX_HEADROOM:
                new_size = min_size + SIZE_MAX_HEADROOM
            self._size = new_size
        self._data[offset:offset] = chunk
        return len(chunk)

    def append(self, data: bytes | bytearray | memoryview) -> int:
        """Append ``data`` to the end; returns the number of bytes appended."""
        return self.insert(len(self._data), data)

    def remove(self, n: int) -> None:
        """Drop ``n`` bytes from the front; ignored unless 0 < n <= len."""
        if 0 < n <= len(self._data):
            del self._data[:n]

    def resize(self, new_size: int) -> None:
        """Change the capacity; shrinking below the data length is ignored."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size > self._size or (len(self._data) <= new_size < self._size):
            self._size = new_size

    def trim(self) -> None:
        """Shrink the capacity to the data length."""
        self.resize(len(self._data))

    def clear(self) -> None:
        """Discard the data but keep the capacity."""
        self._data.clear()

    def free(self) -> None:
        """Discard the data and release the capacity."""
        self._data = bytearray()
        self._size = 0

    def take(self, other: "MBuf") -> None:
        """Move the whole state of ``other`` into this buffer, emptying ``other``."""
        self._data, self._size = other._data, other._size
        other._data = bytearray()
        other._size = 0