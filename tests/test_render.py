"""Tests for frame rendering and the append buffer."""

import pytest

from zepto.core.buffer import TextBuffer
from zepto.core.constants import GREETING
from zepto.core.viewport import ViewportState
from zepto.errors import RenderError
from zepto.render.append_buffer import AppendBuffer
from zepto.render.screen import ScreenRenderer

HIDE = b"\x1b[?25l"
SHOW = b"\x1b[?25h"
HOME = b"\x1b[H"
EOL = b"\x1b[K"


class CollectingWriter:
    def __init__(self) -> None:
        self.calls: list[bytes] = []

    def write(self, data: bytes) -> None:
        self.calls.append(data)


def frame_rows(frame: bytes, rows: int) -> list[bytes]:
    """Split a rendered frame into its screen rows (without ESC[K)."""
    assert frame.startswith(HIDE + HOME)
    body = frame[len(HIDE + HOME):]
    body = body[:body.rindex(b"\x1b[", 0, body.rindex(SHOW))]
    lines = body.split(b"\r\n")
    assert len(lines) == rows
    assert all(line.endswith(EOL) for line in lines)
    return [line[:-len(EOL)] for line in lines]


class TestAppendBuffer:

    def test_single_write_per_flush(self) -> None:
        ab = AppendBuffer()
        ab.append(b"abc")
        ab.append(b"")
        ab.append(b"def")
        assert len(ab) == 6
        writer = CollectingWriter()
        ab.flush_to(writer)
        assert writer.calls == [b"abcdef"]
        assert len(ab) == 0

    def test_write_failure_propagates(self) -> None:
        class BrokenWriter:
            def write(self, data: bytes) -> None:
                raise RenderError("write", "broken pipe")

        ab = AppendBuffer()
        ab.append(b"x")
        with pytest.raises(RenderError):
            ab.flush_to(BrokenWriter())

    def test_allocation_failure_raises_render_error(self) -> None:
        class ExhaustedBytes(bytearray):
            def __iadd__(self, other):
                raise MemoryError

        ab = AppendBuffer()
        ab._data = ExhaustedBytes()
        with pytest.raises(RenderError) as excinfo:
            ab.append(b"frame")
        assert excinfo.value.operation == "append"


class TestScreenRenderer:

    def test_empty_buffer_frame(self) -> None:
        buf = TextBuffer()
        vp = ViewportState(buf, 24, 80)
        frame = ScreenRenderer().render(buf, vp).getvalue()

        rows = frame_rows(frame, 24)
        padding = (80 - len(GREETING)) // 2
        assert rows[8] == b"~" + b" " * (padding - 1) + GREETING.encode()
        assert all(row == b"~" for i, row in enumerate(rows) if i != 8)
        assert frame.endswith(b"\x1b[1;1H" + SHOW)
        assert not frame.endswith(b"\r\n" + SHOW)

    def test_greeting_truncated_to_width(self) -> None:
        buf = TextBuffer()
        vp = ViewportState(buf, 3, 10)
        rows = frame_rows(ScreenRenderer().render(buf, vp).getvalue(), 3)
        assert rows[1] == GREETING.encode()[:10]

    def test_no_greeting_when_file_loaded(self) -> None:
        buf = TextBuffer([b"hello"])
        vp = ViewportState(buf, 6, 40)
        rows = frame_rows(ScreenRenderer().render(buf, vp).getvalue(), 6)
        assert rows == [b"hello"] + [b"~"] * 5

    def test_rows_clipped_to_window(self) -> None:
        buf = TextBuffer([b"0123456789", b"ab", b"\tx"])
        vp = ViewportState(buf, 2, 4, cursor_row=2, cursor_col=6)
        vp.scroll()
        frame = ScreenRenderer().render(buf, vp).getvalue()
        rows = frame_rows(frame, 2)
        # row_offset=1, col_offset=3
        assert rows == [b"", b"    "]
        assert frame.endswith(b"\x1b[2;4H" + SHOW)

    def test_tabs_drawn_expanded(self) -> None:
        buf = TextBuffer([b"a\tb"])
        vp = ViewportState(buf, 1, 80)
        rows = frame_rows(ScreenRenderer().render(buf, vp).getvalue(), 1)
        assert rows == [b"a       b"]
