"""Undo/redo application against a buffer session."""

from __future__ import annotations

from typing import Optional

from line_engine.buffer import Buffer, UndoEntry
from line_engine.runtime import telemetry


class History:
    """Walks a buffer's undo timeline backwards and forwards."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def can_undo(self) -> bool:
        return self.buffer.undo.can_undo()

    def can_redo(self) -> bool:
        return self.buffer.undo.can_redo()

    def undo(self) -> Optional[UndoEntry]:
        entry = self.buffer.undo.undo()
        if entry is None:
            return None
        document = self.buffer.document
        with telemetry.span(
            "history::undo",
            component="history",
            metadata={"label": entry.label, "buffer": self.buffer.name},
        ):
            for record in reversed(entry.records):
                record.revert(document)
            self.buffer.restore_view(entry.view_before)
        telemetry.record_event(
            "undo.apply",
            level="debug",
            data={"label": entry.label, "index": self.buffer.undo.index},
        )
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.buffer.undo.redo()
        if entry is None:
            return None
        document = self.buffer.document
        with telemetry.span(
            "history::redo",
            component="history",
            metadata={"label": entry.label, "buffer": self.buffer.name},
        ):
            for record in entry.records:
                record.apply(document)
            self.buffer.restore_view(entry.view_after)
        telemetry.record_event(
            "redo.apply",
            level="debug",
            data={"label": entry.label, "index": self.buffer.undo.index},
        )
        return entry


__all__ = ["History"]
