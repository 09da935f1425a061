"""Error taxonomy.

Every error raised here is fatal for the editing session: the terminal is
restored, a one-line diagnostic is printed and the process exits non-zero.
"""

from __future__ import annotations

from typing import Optional


class ZeptoError(Exception):
    """Base class for editor failures.

    ``operation`` names the call that failed (``tcsetattr``, ``open``...),
    ``reason`` is the underlying OS error text.
    """

    def __init__(self, operation: str, reason: Optional[str] = None) -> None:
        self.operation = operation
        self.reason = reason or "unknown error"
        super().__init__(f"{operation}: {self.reason}")

    @classmethod
    def from_os_error(cls, operation: str, err: BaseException) -> "ZeptoError":
        """Wrap an ``OSError``/``termios.error`` keeping its message text."""
        reason = getattr(err, "strerror", None)
        if not reason and err.args:
            # termios.error carries (errno, message)
            reason = str(err.args[-1])
        reason = reason or str(err) or type(err).__name__
        filename = getattr(err, "filename", None)
        if filename is not None:
            reason = f"{reason} ({filename})"
        return cls(operation, reason)


class TerminalError(ZeptoError):
    """Terminal attribute get/set or size query failed."""


class IoError(ZeptoError):
    """File could not be opened or read."""


class RenderError(ZeptoError):
    """Frame output could not be buffered or written."""
