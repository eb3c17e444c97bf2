"""Core document storage for line_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


def split_lines(text: str) -> List[str]:
    """Split loaded text into lines.

    Lines end at ``\\n`` (a ``\\r`` right before it is dropped too). A final
    terminator does not open an extra empty line, and text without any
    lines becomes a single empty line.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines or [""]


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with a single newline and no trailing terminator."""

    return "\n".join(lines)


@dataclass(slots=True)
class Document:
    """Mutable list-of-lines text storage.

    A document always holds at least one line. Row indices are absolute;
    inserting or removing a row shifts every row after it, so callers must
    recompute cursor and scroll state afterwards.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        self._lines = list(self._lines) or [""]

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(_lines=split_lines(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Document":
        return cls(_lines=list(lines))

    def to_text(self) -> str:
        return join_lines(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        self._touch()

    def insert_line(self, index: int, text: str) -> None:
        self._lines.insert(index, text)
        self._touch()

    def remove_line(self, index: int) -> str:
        removed = self._lines.pop(index)
        if not self._lines:
            self._lines.append("")
        self._touch()
        return removed

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True

    def __len__(self) -> int:
        return len(self._lines)
