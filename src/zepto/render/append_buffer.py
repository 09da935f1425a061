"""AppendBuffer - coalesces one frame of output into a single write."""

from __future__ import annotations

from typing import Protocol

from zepto.errors import RenderError


class Writer(Protocol):
    """Anything that accepts a complete frame in one call."""

    def write(self, data: bytes) -> None:
        ...


class AppendBuffer:
    """
    Accumulates escape sequences and text for one frame.

    Drawing many small pieces straight to the terminal makes the screen
    flicker; instead everything is appended here and written once.
    """

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        try:
            self._data += data
        except MemoryError as err:
            raise RenderError("append", "out of memory while building frame") from err

    def flush_to(self, writer: Writer) -> None:
        """Write the whole frame in one operation, then discard it."""
        data = bytes(self._data)
        self._data.clear()
        writer.write(data)

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
