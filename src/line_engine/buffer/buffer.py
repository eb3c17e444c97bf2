"""Buffer session combining document, cursor/viewport state and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from line_engine.runtime import telemetry
from line_engine.runtime.settings import DEFAULT_SETTINGS, EngineSettings

from . import storage
from .document import Document
from .graphemes import display_width, grapheme_count, split_at
from .state import BufferState, ViewState
from .sync import RenderLine, RenderSnapshot
from .undo import ContentEdit, StructuralEdit, UndoEntry, UndoTimeline
from .validation import ensure_view


class Buffer:
    """The single editing session the navigator and editor operate on."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[Document] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
        settings: Optional[EngineSettings] = None,
        path: Optional[str] = None,
    ) -> None:
        self.name = name
        self.document = document if document is not None else Document()
        self.state = state if state is not None else BufferState()
        self.undo = undo if undo is not None else UndoTimeline()
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.path = path
        ensure_view(self.document, self.state)

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", window_height: int = 24
    ) -> "Buffer":
        return cls(
            name=name,
            document=Document.from_text(text),
            state=BufferState(window_height=window_height),
        )

    @classmethod
    def open(
        cls,
        path: str,
        *,
        window_height: int = 24,
        settings: Optional[EngineSettings] = None,
    ) -> "Buffer":
        """Load ``path`` into a fresh session; I/O errors propagate."""

        return cls(
            name=path,
            document=storage.load_document(path),
            state=BufferState(window_height=window_height),
            settings=settings,
            path=path,
        )

    def save(self, path: Optional[str] = None) -> str:
        target = path or self.path
        if not target:
            raise ValueError("Buffer has no file path to save to")
        storage.save_document(self.document, target)
        self.path = target
        return target

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self.document.snapshot())

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    @property
    def current_line(self) -> str:
        return self.document.get_line(self.state.absolute_row)

    def line_length(self, row: Optional[int] = None) -> int:
        index = self.state.absolute_row if row is None else row
        return grapheme_count(self.document.get_line(index))

    def clamp_column(self) -> None:
        self.state.col = max(0, min(self.state.col, self.line_length()))

    def view(self) -> ViewState:
        return self.state.capture()

    def restore_view(self, view: ViewState) -> None:
        self.state.restore(view)
        self.clamp_column()

    def render(self, text_width: int) -> RenderSnapshot:
        state = self.state
        start = state.scroll_offset
        end = min(start + state.window_height, self.document.line_count)
        lines = tuple(
            RenderLine(
                number=index + 1,
                text=text,
                overflow=display_width(text) > text_width,
            )
            for index, text in enumerate(
                self.document.snapshot()[start:end], start=start
            )
        )
        prefix, _ = split_at(self.current_line, state.col)
        gutter = self.settings.gutter_width
        screen_cursor = (
            gutter + display_width(prefix),
            self.settings.top_margin + state.row,
        )
        return RenderSnapshot(
            lines=lines,
            cursor=state.cursor,
            scroll_offset=state.scroll_offset,
            screen_cursor=screen_cursor,
            gutter_width=gutter,
            text_width=text_width,
            dirty=self.document.dirty,
            version=self.document.version,
        )

    def pull_snapshot(self, text_width: int) -> RenderSnapshot:
        return self.render(text_width)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit: opens a telemetry span and records one undo entry."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.entry: Optional[UndoEntry] = None
        self._span_cm: Optional[ContextManager[object]] = None
        self._before: ViewState | None = None

    def __enter__(self) -> "Transaction":
        self._before = self.buffer.view()
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        content: ContentEdit,
        structure: Optional[StructuralEdit] = None,
    ) -> UndoEntry:
        assert self._before is not None
        entry = UndoEntry(
            label=self.label,
            content=content,
            structure=structure,
            view_before=self._before,
            view_after=self.buffer.view(),
        )
        self.buffer.undo.push(entry)
        self.entry = entry
        return entry

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
