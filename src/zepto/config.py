"""Editor configuration, read from ``ZEPTO_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from zepto.core.constants import TAB_STOP

ENV_PREFIX = "ZEPTO_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def ctrl(key: str) -> int:
    """Byte produced by Ctrl+<key> (e.g. ``ctrl('q') == 0x11``)."""
    return ord(key) & 0x1F


@dataclass(frozen=True)
class EditorConfig:
    """
    Runtime settings for an editing session.

    Defaults reproduce the classic behavior: 8-column tabs, a 100ms read
    timeout and Ctrl-Q to quit. Logging is off unless a log file is given,
    since the screen belongs to the editor.
    """
    tab_stop: int = TAB_STOP
    read_timeout: int = 1  # deciseconds (termios VTIME)
    quit_key: str = "q"
    log_file: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError(f"tab_stop must be positive, got {self.tab_stop}")
        if not 1 <= self.read_timeout <= 255:
            raise ValueError(f"read_timeout must be in 1..255 deciseconds, got {self.read_timeout}")
        if len(self.quit_key) != 1 or not (self.quit_key.isascii() and self.quit_key.isalpha()):
            raise ValueError(f"quit_key must be a single ASCII letter, got {self.quit_key!r}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    @property
    def quit_byte(self) -> int:
        """Control byte that ends the session."""
        return ctrl(self.quit_key.lower())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from the environment, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if tab_stop := env.get(f"{ENV_PREFIX}TAB_STOP"):
            kwargs["tab_stop"] = _parse_int("TAB_STOP", tab_stop)
        if timeout := env.get(f"{ENV_PREFIX}READ_TIMEOUT"):
            kwargs["read_timeout"] = _parse_int("READ_TIMEOUT", timeout)
        if quit_key := env.get(f"{ENV_PREFIX}QUIT_KEY"):
            kwargs["quit_key"] = quit_key
        if log_file := env.get(f"{ENV_PREFIX}LOG_FILE"):
            kwargs["log_file"] = Path(log_file).expanduser()
        if log_level := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            kwargs["log_level"] = log_level.upper()

        return cls(**kwargs)  # type: ignore[arg-type]


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None
