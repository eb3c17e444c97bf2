"""Renderer boundary types and buffer error classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .state import Cursor


@dataclass(frozen=True, slots=True)
class RenderLine:
    """One visible line paired with its 1-based document line number."""

    number: int
    text: str
    overflow: bool = False


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Read-only view of the buffer a renderer paints each cycle."""

    lines: Tuple[RenderLine, ...]
    cursor: Cursor
    scroll_offset: int
    screen_cursor: Tuple[int, int]  # (x, y) terminal coordinates
    gutter_width: int
    text_width: int
    dirty: bool = False
    version: int = 0


class BufferSync(Protocol):
    """Protocol describing how a host renderer pulls buffer state."""

    def pull_snapshot(self, text_width: int) -> RenderSnapshot:
        """Return the latest snapshot that the host should paint."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a cursor or viewport falls outside the document."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class BufferIOError(OSError):
    """Raised when a document cannot be loaded from or saved to disk."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "RenderLine",
    "RenderSnapshot",
    "BufferSync",
    "BufferValidationError",
    "BufferIOError",
]
