"""Viewport, status line, and frame rendering."""

from .renderer import Renderer, move_to
from .status import StatusMessage
from .viewport import FOOTER_ROWS, Viewport

__all__ = ["Renderer", "move_to", "StatusMessage", "FOOTER_ROWS", "Viewport"]
