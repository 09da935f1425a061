"""Interactive text editor application.

This module provides the Editor loop that ties together:
- TerminalSession: raw mode, screen size and byte-level I/O
- TextBuffer / ViewportState: the file and the cursor moving through it
- ScreenRenderer: one coalesced write per frame
- InputDecoder: key events from raw bytes
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Protocol

from zepto.cli.core.input import InputDecoder, Key, KeyEvent
from zepto.cli.core.terminal import TerminalSession
from zepto.config import EditorConfig
from zepto.core.buffer import TextBuffer
from zepto.core.constants import CLEAR_SCREEN, CURSOR_HOME
from zepto.core.viewport import Direction, ViewportState
from zepto.errors import ZeptoError
from zepto.io.reader import load
from zepto.render.screen import ScreenRenderer

logger = logging.getLogger(__name__)

ARROW_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Session(Protocol):
    """The part of TerminalSession the editor loop talks to."""

    def read_byte(self) -> Optional[bytes]:
        ...

    def write(self, data: bytes) -> None:
        ...


class EditorState(Enum):
    RUNNING = auto()
    TERMINATING = auto()


class Editor:
    """Terminal text viewer.

    Keyboard Controls:
        Arrow keys: Move cursor (wrapping at line ends)
        Page Up/Down: Move a screen height
        Home/End: Start/end of line
        Ctrl-Q: Quit
    """

    def __init__(
        self,
        session: Session,
        buffer: TextBuffer,
        screen_rows: int,
        screen_cols: int,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.session = session
        self.buffer = buffer
        self.viewport = ViewportState(buffer, screen_rows, screen_cols)
        self.renderer = ScreenRenderer()
        self.input = InputDecoder(session.read_byte, quit_byte=self.config.quit_byte)
        self.state = EditorState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is EditorState.RUNNING

    def run(self) -> None:
        """Main application loop."""
        logger.info(
            "Editing %d rows on a %dx%d screen",
            self.buffer.row_count(), self.viewport.screen_rows, self.viewport.screen_cols,
        )
        while self.running:
            self.refresh_screen()
            self.process_keypress()

    def refresh_screen(self) -> None:
        """Scroll to the cursor and draw one frame."""
        self.viewport.scroll()
        frame = self.renderer.render(self.buffer, self.viewport)
        frame.flush_to(self.session)

    def process_keypress(self) -> None:
        """Wait for one key and apply it."""
        event = self.input.read_key()
        self.handle_key(event)

    def handle_key(self, event: KeyEvent) -> None:
        if not self.running:
            return

        if event.key is Key.QUIT:
            self.session.write(CLEAR_SCREEN + CURSOR_HOME)
            self.state = EditorState.TERMINATING
        elif event.key in ARROW_DIRECTIONS:
            self.viewport.move_cursor(ARROW_DIRECTIONS[event.key])
        elif event.key is Key.PAGE_UP:
            self.viewport.page_move(Direction.UP, self.viewport.screen_rows)
        elif event.key is Key.PAGE_DOWN:
            self.viewport.page_move(Direction.DOWN, self.viewport.screen_rows)
        elif event.key is Key.HOME:
            self.viewport.home()
        elif event.key is Key.END:
            self.viewport.end()


def run_editor(path: Optional[Path] = None, config: Optional[EditorConfig] = None) -> None:
    """Launch the editor on the controlling terminal."""
    config = config or EditorConfig()
    session = TerminalSession(read_timeout=config.read_timeout)
    try:
        with session.raw_mode():
            size = session.query_size()
            buffer = load(path, tab_stop=config.tab_stop) if path else TextBuffer(tab_stop=config.tab_stop)
            editor = Editor(session, buffer, size.rows, size.cols, config)
            editor.run()
    except ZeptoError as err:
        logger.error("Fatal: %s", err)
        session.fail()
        raise
