"""Core TUI infrastructure - terminal session and input decoding."""

from zepto.cli.core.terminal import TerminalSession, TerminalSize
from zepto.cli.core.input import InputDecoder, KeyEvent, Key, DecoderState

__all__ = [
    "TerminalSession",
    "TerminalSize",
    "InputDecoder",
    "KeyEvent",
    "Key",
    "DecoderState",
]
