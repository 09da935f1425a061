"""TextBuffer - ordered rows of a file."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from zepto.core.constants import TAB_STOP
from zepto.core.row import Row


class TextBuffer:
    """
    The rows of the file being viewed, in file order.

    An empty buffer (no file) has zero rows. Row index ``row_count()`` is the
    virtual empty line just past the end of the file: it has length 0 but no
    ``Row`` behind it.
    """

    def __init__(self, lines: Optional[Iterable[bytes]] = None, tab_stop: int = TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._rows: list[Row] = []
        for line in lines or ():
            self.append_row(line)

    def append_row(self, raw: bytes) -> Row:
        """Add a row at the end of the buffer."""
        row = Row(raw, tab_stop=self.tab_stop)
        self._rows.append(row)
        return row

    def row_count(self) -> int:
        return len(self._rows)

    def row_at(self, index: int) -> Row:
        """Get the row at ``index``; callers must stay within ``[0, row_count())``."""
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row {index} out of bounds (rows={len(self._rows)})")
        return self._rows[index]

    def row_length(self, index: int) -> int:
        """Rendered length of a row, 0 for the virtual line past the end."""
        if index == len(self._rows):
            return 0
        return self.row_at(index).render_size

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)
