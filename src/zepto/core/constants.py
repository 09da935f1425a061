"""Shared constants for the editor and its terminal protocol."""

VERSION = "0.0.1"
GREETING = f"Zepto editor -- version {VERSION}"

TAB_STOP = 8

# ANSI escape sequences
ESC = b"\x1b"
CSI = ESC + b"["

CLEAR_SCREEN = CSI + b"2J"
CURSOR_HOME = CSI + b"H"
ERASE_LINE = CSI + b"K"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"

# Cursor position report request; the reply is ESC [ <row> ; <col> R
REPORT_CURSOR = CSI + b"6n"
# Oversized relative move, clamped by the terminal to the bottom-right cell
CURSOR_FAR_CORNER = CSI + b"999C" + CSI + b"999B"

ROW_FILLER = b"~"
NEWLINE = b"\r\n"


def cursor_to(row: int, col: int) -> bytes:
    """Absolute cursor position (1-indexed)."""
    return CSI + f"{row};{col}H".encode("ascii")
