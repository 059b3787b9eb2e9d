"""Wrap readers and writers to count operations and bytes passed through."""

import io
from typing import Any


class ReadStats(io.RawIOBase):
    """A raw reader that counts read calls and bytes read from the wrapped reader."""

    def __init__(self, inner: Any) -> None:
        super().__init__()
        self.inner = inner
        self.reads = 0
        self.bytes_through = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        """Read into ``buffer`` from the wrapped reader, returning the byte count."""
        self.reads += 1
        view = memoryview(buffer).cast("B")
        inner_readinto = getattr(self.inner, "readinto", None)
        if inner_readinto is not None:
            count = inner_readinto(view)
        else:
            data = self.inner.read(len(view))
            if data is None:
                return None
            count = len(data)
            view[:count] = data
        if count is not None:
            self.bytes_through += count
        return count

    def read(self, size: int = -1) -> bytes | None:
        """Read up to ``size`` bytes; all remaining bytes if ``size`` is negative."""
        if size is None or size < 0:
            return self.readall()
        buffer = bytearray(size)
        count = self.readinto(buffer)
        if count is None:
            return None
        return bytes(buffer[:count])


class WriteStats(io.RawIOBase):
    """A raw writer that counts write calls and bytes written to the wrapped writer."""

    def __init__(self, inner: Any) -> None:
        super().__init__()
        self.inner = inner
        self.writes = 0
        self.bytes_through = 0

    def writable(self) -> bool:
        return True

    def write(self, data) -> int | None:
        """Write ``data`` to the wrapped writer, returning the byte count written."""
        self.writes += 1
        count = self.inner.write(data)
        if count is not None:
            self.bytes_through += count
        return count

    def flush(self) -> None:
        """Flush the wrapped writer."""
        inner_flush = getattr(self.inner, "flush", None)
        if inner_flush is not None:
            inner_flush()