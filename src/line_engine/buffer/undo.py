"""Undo/redo records and the linear timeline that stores them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from .document import Document
from .state import ViewState


@dataclass(frozen=True, slots=True)
class ContentEdit:
    """Text of ``row`` changed in place from ``before`` to ``after``."""

    row: int
    before: str
    after: str

    def revert(self, document: Document) -> None:
        document.set_line(self.row, self.before)

    def apply(self, document: Document) -> None:
        document.set_line(self.row, self.after)


@dataclass(frozen=True, slots=True)
class StructuralEdit:
    """Existence of ``row`` flipped.

    ``inserted`` is true when the forward edit created the row holding
    ``text`` and false when it removed the row that held ``text``.
    """

    row: int
    inserted: bool
    text: str = ""

    def revert(self, document: Document) -> None:
        if self.inserted:
            document.remove_line(self.row)
        else:
            document.insert_line(self.row, self.text)

    def apply(self, document: Document) -> None:
        if self.inserted:
            document.insert_line(self.row, self.text)
        else:
            document.remove_line(self.row)


EditRecord = Union[ContentEdit, StructuralEdit]


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    content: ContentEdit
    view_before: ViewState
    view_after: ViewState
    structure: Optional[StructuralEdit] = None

    @property
    def records(self) -> tuple[EditRecord, ...]:
        if self.structure is None:
            return (self.content,)
        return (self.content, self.structure)

    @property
    def is_structural(self) -> bool:
        return self.structure is not None


class UndoTimeline:
    """Linear undo/redo history.

    ``index`` is the next entry redo would apply; ``index - 1`` is the last
    entry undo would reverse.
    """

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = 0

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        if self._index < len(self._entries):
            del self._entries[self._index :]
        self._entries.append(entry)
        self._index = len(self._entries)

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries)

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        entry = self._entries[self._index]
        self._index += 1
        return entry

    def clear(self) -> None:
        self._entries.clear()
        self._index = 0
