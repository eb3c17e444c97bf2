"""Adapter for hosts that capture terminal key events themselves."""

from .controller import TerminalAdapter, TerminalUIHooks

__all__ = ["TerminalAdapter", "TerminalUIHooks"]
