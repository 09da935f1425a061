"""Screen rendering."""

from zepto.render.append_buffer import AppendBuffer
from zepto.render.screen import ScreenRenderer

__all__ = ["AppendBuffer", "ScreenRenderer"]
