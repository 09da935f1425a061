"""Shared fixtures: scripted terminal sessions and sample files."""

import os
from pathlib import Path
from typing import Callable, Iterator, Optional

import pytest

from zepto.core.buffer import TextBuffer


class ScriptedSession:
    """
    Stand-in for TerminalSession driven by a fixed byte script.

    ``None`` entries in the script act as read timeouts. Once the script runs
    out every read times out, except that a trailing Ctrl-Q can be appended
    so editor loops always terminate.
    """

    def __init__(self, script: list[Optional[bytes]]) -> None:
        self._script = list(script)
        self.output = bytearray()
        self.writes: list[bytes] = []

    def read_byte(self) -> Optional[bytes]:
        if not self._script:
            raise AssertionError("input script exhausted")
        return self._script.pop(0)

    def write(self, data: bytes) -> None:
        self.writes.append(bytes(data))
        self.output += data


def script(*chunks: Optional[bytes]) -> list[Optional[bytes]]:
    """Split byte strings into single-byte reads; ``None`` stays a timeout."""
    out: list[Optional[bytes]] = []
    for chunk in chunks:
        if chunk is None:
            out.append(None)
        else:
            out.extend(chunk[i:i + 1] for i in range(len(chunk)))
    return out


@pytest.fixture
def scripted_session() -> Callable[..., ScriptedSession]:
    """Factory for sessions fed with the given byte chunks."""
    def make(*chunks: Optional[bytes]) -> ScriptedSession:
        return ScriptedSession(script(*chunks))
    return make


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[bytes], Path]:
    """Write bytes to a temp file and return its path."""
    def make(content: bytes, name: str = "sample.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return make


@pytest.fixture
def sample_buffer() -> TextBuffer:
    """Five rows of varying length, one with a tab."""
    return TextBuffer([
        b"first line",
        b"",
        b"a\tb",
        b"short",
        b"the longest line of the sample buffer",
    ])


@pytest.fixture
def pipes() -> Iterator[tuple[int, int, int, int]]:
    """Two OS pipes: (in_read, in_write, out_read, out_write)."""
    in_r, in_w = os.pipe()
    out_r, out_w = os.pipe()
    yield in_r, in_w, out_r, out_w
    for fd in (in_r, in_w, out_r, out_w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, int]]:
    """A pseudo-terminal as (master, slave) file descriptors."""
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)
