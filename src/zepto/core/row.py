"""Row - one line of text with its display form."""

from __future__ import annotations

from dataclasses import dataclass, field

from zepto.core.constants import TAB_STOP

TAB = 0x09


def expand_tabs(raw: bytes, tab_stop: int = TAB_STOP) -> bytes:
    """
    Expand tabs to spaces for display.

    Each tab emits at least one space and pads up to the next column that is
    a multiple of ``tab_stop``. All other bytes pass through unchanged.
    """
    if TAB not in raw:
        return bytes(raw)
    out = bytearray()
    for byte in raw:
        if byte == TAB:
            out.append(0x20)
            while len(out) % tab_stop:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


@dataclass
class Row:
    """
    A single line of text.

    ``raw`` holds the stored bytes (no line terminator), ``rendered`` the
    tab-expanded form drawn on screen. Change ``raw`` through ``set_raw`` so
    the rendered form stays in sync.
    """
    raw: bytes = b""
    tab_stop: int = TAB_STOP
    rendered: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        self.raw = bytes(self.raw)
        self.update()

    def update(self) -> None:
        """Regenerate ``rendered`` from ``raw``."""
        self.rendered = expand_tabs(self.raw, self.tab_stop)

    def set_raw(self, raw: bytes) -> None:
        self.raw = bytes(raw)
        self.update()

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def render_size(self) -> int:
        return len(self.rendered)
