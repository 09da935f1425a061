"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from zepto.config import ctrl

logger = logging.getLogger(__name__)

ESC_BYTE = 0x1B


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    ESCAPE = auto()
    QUIT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[int] = None  # Literal byte otherwise
    raw: bytes = b""  # Bytes consumed for this event

    @property
    def is_char(self) -> bool:
        """Check if this is a literal byte."""
        return self.char is not None and self.key is None


class DecoderState(Enum):
    NORMAL = auto()
    SAW_ESCAPE = auto()
    SAW_SS3 = auto()  # ESC O
    SAW_BRACKET = auto()  # ESC [
    SAW_DIGIT = auto()  # ESC [ <digit>


# Final byte after ESC [ or ESC O
LETTER_KEYS: dict[int, Key] = {
    ord('A'): Key.UP,
    ord('B'): Key.DOWN,
    ord('C'): Key.RIGHT,
    ord('D'): Key.LEFT,
    ord('H'): Key.HOME,
    ord('F'): Key.END,
}

SS3_KEYS: dict[int, Key] = {
    ord('H'): Key.HOME,
    ord('F'): Key.END,
}

# Digit in ESC [ <digit> ~
TILDE_KEYS: dict[int, Key] = {
    ord('1'): Key.HOME,
    ord('3'): Key.DELETE,
    ord('4'): Key.END,
    ord('5'): Key.PAGE_UP,
    ord('6'): Key.PAGE_DOWN,
    ord('7'): Key.HOME,
    ord('8'): Key.END,
}

ByteSource = Callable[[], Optional[bytes]]


class InputDecoder:
    """
    Turns raw terminal bytes into key events.

    Escape sequences are decoded by a small state machine. Every read after
    the initial ESC is bounded by the raw-mode timeout, so a lone ESC press
    or a truncated/unknown sequence comes out as ``Key.ESCAPE`` instead of
    stalling the editor.
    """

    def __init__(self, read_byte: ByteSource, quit_byte: int = ctrl('q')) -> None:
        self._read_byte = read_byte
        self.quit_byte = quit_byte

    def read_key(self) -> KeyEvent:
        """Block until one key event is decoded."""
        state = DecoderState.NORMAL
        raw = bytearray()
        digit = 0

        while True:
            data = self._read_byte()
            if data is None:
                if state is DecoderState.NORMAL:
                    continue
                # Sequence cut short by the read timeout
                return self._escape(raw)
            byte = data[0]
            raw.append(byte)

            if state is DecoderState.NORMAL:
                if byte == ESC_BYTE:
                    state = DecoderState.SAW_ESCAPE
                elif byte == self.quit_byte:
                    return KeyEvent(key=Key.QUIT, raw=bytes(raw))
                else:
                    return KeyEvent(char=byte, raw=bytes(raw))

            elif state is DecoderState.SAW_ESCAPE:
                if byte == ord('['):
                    state = DecoderState.SAW_BRACKET
                elif byte == ord('O'):
                    state = DecoderState.SAW_SS3
                else:
                    return self._escape(raw)

            elif state is DecoderState.SAW_SS3:
                return self._named(SS3_KEYS.get(byte), raw)

            elif state is DecoderState.SAW_BRACKET:
                if ord('0') <= byte <= ord('9'):
                    digit = byte
                    state = DecoderState.SAW_DIGIT
                else:
                    return self._named(LETTER_KEYS.get(byte), raw)

            elif state is DecoderState.SAW_DIGIT:
                if byte != ord('~'):
                    return self._escape(raw)
                return self._named(TILDE_KEYS.get(digit), raw)

    def _named(self, key: Optional[Key], raw: bytearray) -> KeyEvent:
        if key is None:
            return self._escape(raw)
        return KeyEvent(key=key, raw=bytes(raw))

    @staticmethod
    def _escape(raw: bytearray) -> KeyEvent:
        if len(raw) > 1:
            logger.debug("Unrecognized escape sequence %r", bytes(raw))
        return KeyEvent(key=Key.ESCAPE, raw=bytes(raw))
