"""Viewport - cursor, scroll offsets and screen dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from zepto.core.buffer import TextBuffer


class Direction(Enum):
    """Single-step cursor movements."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class ViewportState:
    """
    Cursor and visible window over a TextBuffer.

    The cursor lives in file coordinates: ``cursor_row`` indexes the buffer
    (``row_count()`` being the virtual line past the end) and ``cursor_col``
    indexes the row's rendered bytes. ``row_offset``/``col_offset`` mark the
    top-left of the window; ``scroll`` moves them to follow the cursor, it
    never moves the cursor itself.
    """
    buffer: TextBuffer
    screen_rows: int
    screen_cols: int
    cursor_row: int = 0
    cursor_col: int = 0
    row_offset: int = 0
    col_offset: int = 0

    def row_length(self, index: int) -> int:
        return self.buffer.row_length(index)

    def scroll(self) -> None:
        """Shift the offsets so the cursor is inside the visible window."""
        if self.cursor_row < self.row_offset:
            self.row_offset = self.cursor_row
        if self.cursor_row >= self.row_offset + self.screen_rows:
            self.row_offset = self.cursor_row - self.screen_rows + 1
        if self.cursor_col < self.col_offset:
            self.col_offset = self.cursor_col
        if self.cursor_col >= self.col_offset + self.screen_cols:
            self.col_offset = self.cursor_col - self.screen_cols + 1

    def move_cursor(self, direction: Direction) -> None:
        """
        Move the cursor one step.

        Left at column 0 wraps to the end of the previous row, right at the
        end of a row wraps to the start of the next one. Up stops at row 0,
        down at the virtual line. The column is then clamped to the length
        of the row the cursor ended on.
        """
        on_real_row = self.cursor_row < self.buffer.row_count()

        if direction is Direction.LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
            elif self.cursor_row > 0:
                self.cursor_row -= 1
                self.cursor_col = self.row_length(self.cursor_row)
        elif direction is Direction.RIGHT:
            if on_real_row:
                if self.cursor_col < self.row_length(self.cursor_row):
                    self.cursor_col += 1
                else:
                    self.cursor_row += 1
                    self.cursor_col = 0
        elif direction is Direction.UP:
            if self.cursor_row > 0:
                self.cursor_row -= 1
        elif direction is Direction.DOWN:
            if self.cursor_row < self.buffer.row_count():
                self.cursor_row += 1

        self.cursor_col = min(self.cursor_col, self.row_length(self.cursor_row))

    def page_move(self, direction: Direction, page_size: int) -> None:
        """Repeat a vertical move ``page_size`` times."""
        if direction not in (Direction.UP, Direction.DOWN):
            raise ValueError(f"page_move needs a vertical direction, got {direction}")
        for _ in range(page_size):
            self.move_cursor(direction)

    def home(self) -> None:
        self.cursor_col = 0

    def end(self) -> None:
        """Jump to the end of the current row."""
        self.cursor_col = self.row_length(self.cursor_row)

    def screen_cursor(self) -> tuple[int, int]:
        """Cursor position on screen, 1-indexed as the terminal expects."""
        return (
            self.cursor_row - self.row_offset + 1,
            self.cursor_col - self.col_offset + 1,
        )

    def visible_rows(self) -> range:
        """File row indexes covered by the window (may extend past the end)."""
        return range(self.row_offset, self.row_offset + self.screen_rows)
