"""Cursor and viewport state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (window row, grapheme column)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Immutable cursor + scroll snapshot stored in undo entries."""

    row: int
    col: int
    scroll_offset: int

    @property
    def absolute_row(self) -> int:
        return self.scroll_offset + self.row


@dataclass(slots=True)
class BufferState:
    """Mutable cursor and viewport info for one editing session.

    ``row`` is relative to the visible window and ``col`` counts grapheme
    clusters into line ``scroll_offset + row``.
    """

    row: int = 0
    col: int = 0
    scroll_offset: int = 0
    window_height: int = 1

    def __post_init__(self) -> None:
        if self.window_height < 1:
            raise ValueError("window_height must be at least 1")

    @property
    def cursor(self) -> Cursor:
        return (self.row, self.col)

    @property
    def absolute_row(self) -> int:
        return self.scroll_offset + self.row

    @property
    def bottom_row(self) -> int:
        return self.window_height - 1

    def set_cursor(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def capture(self) -> ViewState:
        return ViewState(row=self.row, col=self.col, scroll_offset=self.scroll_offset)

    def restore(self, view: ViewState) -> None:
        self.row = view.row
        self.col = view.col
        self.scroll_offset = view.scroll_offset
        self.fit_window()

    def fit_window(self) -> None:
        """Scroll so the cursor row lies inside the current window."""

        if self.row > self.bottom_row:
            self.scroll_offset += self.row - self.bottom_row
            self.row = self.bottom_row


__all__ = ["Cursor", "ViewState", "BufferState"]
