"""Render the visible part of a TextBuffer as terminal escape sequences."""

from __future__ import annotations

from zepto.core.buffer import TextBuffer
from zepto.core.constants import (
    CURSOR_HOME,
    ERASE_LINE,
    GREETING,
    HIDE_CURSOR,
    NEWLINE,
    ROW_FILLER,
    SHOW_CURSOR,
    cursor_to,
)
from zepto.core.viewport import ViewportState
from zepto.render.append_buffer import AppendBuffer


class ScreenRenderer:
    """
    Build a full frame for the current viewport.

    Rows past the end of the file are drawn as ``~``. An empty buffer shows
    a centered greeting a third of the way down the screen. The cursor is
    hidden while drawing so it does not jump around visibly.
    """

    def __init__(self, greeting: str = GREETING) -> None:
        self.greeting = greeting.encode("utf-8")

    def render(self, buffer: TextBuffer, viewport: ViewportState) -> AppendBuffer:
        """Render one frame; the caller flushes the returned buffer."""
        ab = AppendBuffer()
        ab.append(HIDE_CURSOR)
        ab.append(CURSOR_HOME)
        self.draw_rows(buffer, viewport, ab)
        ab.append(cursor_to(*viewport.screen_cursor()))
        ab.append(SHOW_CURSOR)
        return ab

    def draw_rows(self, buffer: TextBuffer, viewport: ViewportState, ab: AppendBuffer) -> None:
        row_count = buffer.row_count()
        for y, file_row in enumerate(viewport.visible_rows()):
            if file_row >= row_count:
                if row_count == 0 and y == viewport.screen_rows // 3:
                    ab.append(self._greeting_line(viewport.screen_cols))
                else:
                    ab.append(ROW_FILLER)
            else:
                rendered = buffer.row_at(file_row).rendered
                start = viewport.col_offset
                ab.append(rendered[start:start + viewport.screen_cols])

            ab.append(ERASE_LINE)
            if y < viewport.screen_rows - 1:
                ab.append(NEWLINE)

    def _greeting_line(self, screen_cols: int) -> bytes:
        text = self.greeting[:screen_cols]
        padding = (screen_cols - len(text)) // 2
        line = bytearray()
        if padding:
            # The filler marker takes the first padding column
            line += ROW_FILLER
            padding -= 1
        line += b" " * padding
        line += text
        return bytes(line)
