"""Raw terminal session - attribute lifecycle, size query, low-level I/O."""

from __future__ import annotations

import atexit
import copy
import errno
import logging
import os
import re
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from zepto.core.constants import CLEAR_SCREEN, CURSOR_FAR_CORNER, CURSOR_HOME, REPORT_CURSOR
from zepto.errors import RenderError, TerminalError

logger = logging.getLogger(__name__)

# termios attribute list indexes
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

_CURSOR_REPORT = re.compile(rb"\x1b\[(\d+);(\d+)")
_REPORT_MAX = 32


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class TerminalSession:
    """
    Owns the controlling terminal for the lifetime of the editor.

    ``enter_raw_mode`` saves the current attributes and switches to raw
    input: no echo, no line buffering, no signal keys, no flow control, no
    output post-processing, 8-bit chars and a short read timeout so reads
    return even without input. The saved attributes are put back exactly
    once, by ``restore`` or at interpreter exit, whichever comes first.
    """

    def __init__(
        self,
        fd_in: Optional[int] = None,
        fd_out: Optional[int] = None,
        read_timeout: int = 1,
    ) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self.read_timeout = read_timeout
        self._saved: Optional[list] = None

    @property
    def is_raw(self) -> bool:
        return self._saved is not None

    def enter_raw_mode(self) -> None:
        try:
            saved = termios.tcgetattr(self.fd_in)
        except termios.error as err:
            raise TerminalError.from_os_error("tcgetattr", err) from err

        raw = copy.deepcopy(saved)
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        raw[IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] |= termios.CS8
        raw[CC][termios.VMIN] = 0
        raw[CC][termios.VTIME] = self.read_timeout

        self._saved = saved
        atexit.register(self._restore_at_exit)
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as err:
            raise TerminalError.from_os_error("tcsetattr", err) from err
        logger.debug("Raw mode enabled on fd %d", self.fd_in)

    def restore(self) -> None:
        """Reapply the attributes saved by ``enter_raw_mode``."""
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        atexit.unregister(self._restore_at_exit)
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, saved)
        except termios.error as err:
            raise TerminalError.from_os_error("tcsetattr", err) from err
        logger.debug("Terminal attributes restored on fd %d", self.fd_in)

    def _restore_at_exit(self) -> None:
        try:
            self.restore()
        except TerminalError as err:
            logger.error("Could not restore terminal at exit: %s", err)
            self._clear()
            sys.stderr.write(f"{err}\n")

    @contextmanager
    def raw_mode(self) -> Iterator["TerminalSession"]:
        """Context manager for raw terminal mode."""
        self.enter_raw_mode()
        try:
            yield self
        finally:
            self.restore()

    def fail(self) -> None:
        """
        Fatal-error cleanup: clear the screen, home the cursor and leave raw
        mode so the caller can print a diagnostic on a sane terminal.
        """
        try:
            self._clear()
        finally:
            self.restore()

    def _clear(self) -> None:
        try:
            os.write(self.fd_out, CLEAR_SCREEN + CURSOR_HOME)
        except OSError:
            logger.warning("Could not clear screen on fd %d", self.fd_out)

    def query_size(self) -> TerminalSize:
        """
        Get terminal dimensions.

        Asks the OS first; if that fails or reports zero columns, pushes the
        cursor to the bottom-right corner and asks the terminal where it is.
        """
        try:
            size = os.get_terminal_size(self.fd_out)
            if size.columns:
                return TerminalSize(size.lines, size.columns)
        except OSError:
            pass

        logger.debug("Window size unavailable, falling back to cursor report")
        try:
            self.write(CURSOR_FAR_CORNER)
        except RenderError as err:
            raise TerminalError("get_terminal_size", err.reason) from err
        return self.cursor_position()

    def cursor_position(self) -> TerminalSize:
        """Ask the terminal for the cursor position (``ESC [ 6 n``)."""
        try:
            self.write(REPORT_CURSOR)
        except RenderError as err:
            raise TerminalError("get_cursor_position", err.reason) from err

        reply = bytearray()
        while len(reply) < _REPORT_MAX - 1:
            byte = self.read_byte()
            if byte is None or byte == b"R":
                break
            reply += byte

        match = _CURSOR_REPORT.match(bytes(reply))
        if match is None:
            raise TerminalError("get_terminal_size", f"unexpected cursor report {bytes(reply)!r}")
        return TerminalSize(int(match.group(1)), int(match.group(2)))

    def read_byte(self) -> Optional[bytes]:
        """
        Read a single byte.

        Returns None when the raw-mode timeout expires (or at end of input).
        """
        try:
            data = os.read(self.fd_in, 1)
        except BlockingIOError:
            return None
        except OSError as err:
            if err.errno in (errno.EAGAIN, errno.EINTR):
                return None
            raise TerminalError.from_os_error("read", err) from err
        return data or None

    def write(self, data: bytes) -> None:
        """Write all of ``data`` to the terminal."""
        view = memoryview(data)
        try:
            while view:
                written = os.write(self.fd_out, view)
                view = view[written:]
        except OSError as err:
            raise RenderError.from_os_error("write", err) from err
