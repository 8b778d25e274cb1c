"""Terminal frame rendering."""

from .terminal import TerminalRenderer

__all__ = ['TerminalRenderer']
