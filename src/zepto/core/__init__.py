"""Core editor data structures - rows, text buffer, viewport."""

from zepto.core.row import Row, expand_tabs
from zepto.core.buffer import TextBuffer
from zepto.core.viewport import Direction, ViewportState

__all__ = [
    "Row",
    "expand_tabs",
    "TextBuffer",
    "Direction",
    "ViewportState",
]
