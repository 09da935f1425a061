"""Load text files into a TextBuffer."""

from __future__ import annotations

import logging
from pathlib import Path

from zepto.core.buffer import TextBuffer
from zepto.core.constants import TAB_STOP
from zepto.errors import IoError

logger = logging.getLogger(__name__)


def load(path: str | Path, tab_stop: int = TAB_STOP) -> TextBuffer:
    """
    Load a text file from disk, one row per line.

    Trailing ``\\n``/``\\r`` bytes are stripped from each line. Content is
    kept as bytes; no decoding is attempted.
    """
    path = Path(path)
    buffer = TextBuffer(tab_stop=tab_stop)
    try:
        with open(path, "rb") as f:
            for line in f:
                buffer.append_row(line.rstrip(b"\r\n"))
    except OSError as err:
        raise IoError.from_os_error("open", err) from err

    logger.debug("Loaded %d rows from %s", buffer.row_count(), path)
    return buffer
