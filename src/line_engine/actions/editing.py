"""Content mutations: insert, split and delete on grapheme boundaries."""

from __future__ import annotations

from typing import Optional

from line_engine.buffer import (
    Buffer,
    ContentEdit,
    StructuralEdit,
    Transaction,
    UndoEntry,
)
from line_engine.buffer.graphemes import delete_before, grapheme_count, split_at


class Editor:
    """Applies edits to a buffer, pushing one undo entry per mutation.

    Columns index between grapheme clusters, so a combining sequence or an
    emoji with modifiers is inserted, stepped over and deleted as one unit.
    """

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def insert_char(self, text: str) -> Optional[UndoEntry]:
        if not text:
            return None
        if "\n" in text or "\r" in text:
            raise ValueError("insert_char cannot insert a line break; use enter()")

        buffer = self.buffer
        state = buffer.state
        row = state.absolute_row
        line = buffer.current_line
        prefix, suffix = split_at(line, state.col)
        updated = prefix + text + suffix

        with Transaction(buffer, "insert_char") as tx:
            buffer.document.set_line(row, updated)
            state.col = min(grapheme_count(prefix + text), grapheme_count(updated))
            return tx.commit(ContentEdit(row, line, updated))

    def enter(self) -> UndoEntry:
        """Split the current line at the cursor (or open an empty line below)."""

        buffer = self.buffer
        state = buffer.state
        row = state.absolute_row
        line = buffer.current_line
        prefix, suffix = split_at(line, state.col)

        with Transaction(buffer, "enter") as tx:
            if prefix != line:
                buffer.document.set_line(row, prefix)
            buffer.document.insert_line(row + 1, suffix)
            if state.row >= state.bottom_row:
                state.scroll_offset += 1
            else:
                state.row += 1
            state.col = 0
            return tx.commit(
                ContentEdit(row, line, prefix),
                StructuralEdit(row + 1, inserted=True, text=suffix),
            )

    def backspace(self) -> Optional[UndoEntry]:
        buffer = self.buffer
        state = buffer.state
        row = state.absolute_row
        line = buffer.current_line

        if state.col > 0:
            updated = delete_before(line, state.col)
            with Transaction(buffer, "delete_grapheme") as tx:
                buffer.document.set_line(row, updated)
                state.col -= 1
                return tx.commit(ContentEdit(row, line, updated))

        if row == 0:
            return None

        previous = buffer.document.get_line(row - 1)
        merged = previous + line
        label = "merge_line" if line else "remove_line"
        with Transaction(buffer, label) as tx:
            if line:
                buffer.document.set_line(row - 1, merged)
            buffer.document.remove_line(row)
            self._step_up()
            state.col = grapheme_count(previous)
            buffer.clamp_column()
            return tx.commit(
                ContentEdit(row - 1, previous, merged),
                StructuralEdit(row, inserted=False, text=line),
            )

    def _step_up(self) -> None:
        state = self.buffer.state
        if state.row > 0:
            state.row -= 1
        else:
            # Previous line sits above the window.
            state.scroll_offset = max(0, state.scroll_offset - 1)


__all__ = ["Editor"]
