"""File I/O."""

from zepto.io.reader import load

__all__ = ["load"]
