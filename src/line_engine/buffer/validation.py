"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Document
from .graphemes import grapheme_count
from .state import BufferState
from .sync import BufferValidationError


def ensure_view(document: Document, state: BufferState) -> BufferState:
    cursor = state.cursor
    if state.scroll_offset < 0:
        raise BufferValidationError("Scroll offset out of range", cursor=cursor)
    if state.row < 0 or state.row >= state.window_height:
        raise BufferValidationError("Row outside window", cursor=cursor)
    if state.absolute_row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(state.absolute_row)
    if state.col < 0 or state.col > grapheme_count(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return state
