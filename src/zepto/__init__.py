"""
zepto: a minimal terminal text viewer

Takes over the terminal in raw mode, draws a scrollable view of a text file
with ANSI escape sequences and moves a cursor through it from the keyboard.

Quick Start:
    $ zepto notes.txt        # arrows, PgUp/PgDn, Home/End; Ctrl-Q quits

Library use:
    >>> import zepto
    >>> buf = zepto.load("notes.txt")
    >>> buf.row_at(0).rendered
"""

__version__ = "0.0.1"

# Core types
from zepto.core.row import Row
from zepto.core.buffer import TextBuffer
from zepto.core.viewport import Direction, ViewportState

# Errors
from zepto.errors import ZeptoError, TerminalError, IoError, RenderError

# Convenience functions
from zepto.io.reader import load

__all__ = [
    # Version
    "__version__",
    # Core types
    "Row",
    "TextBuffer",
    "Direction",
    "ViewportState",
    # Errors
    "ZeptoError",
    "TerminalError",
    "IoError",
    "RenderError",
    # I/O
    "load",
]
