"""Buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, Transaction
from .document import Document, join_lines, split_lines
from .state import BufferState, Cursor, ViewState
from .storage import load_document, save_document
from .sync import (
    BufferIOError,
    BufferSync,
    BufferValidationError,
    RenderLine,
    RenderSnapshot,
)
from .undo import ContentEdit, EditRecord, StructuralEdit, UndoEntry, UndoTimeline
from .validation import ensure_view

__all__ = [
    "Buffer",
    "Transaction",
    "Document",
    "split_lines",
    "join_lines",
    "BufferState",
    "Cursor",
    "ViewState",
    "load_document",
    "save_document",
    "BufferIOError",
    "BufferSync",
    "BufferValidationError",
    "RenderLine",
    "RenderSnapshot",
    "ContentEdit",
    "StructuralEdit",
    "EditRecord",
    "UndoEntry",
    "UndoTimeline",
    "ensure_view",
]
