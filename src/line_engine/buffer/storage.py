"""Plain-text load/save for documents."""

from __future__ import annotations

import errno
import os
import shutil
import tempfile

from line_engine.runtime import telemetry

from .document import Document
from .sync import BufferIOError


def load_document(path: str, *, encoding: str = "utf-8") -> Document:
    """Read ``path`` into a new document.

    Raises:
        BufferIOError: the file is missing, unreadable or not decodable.
    """

    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            content = handle.read()
    except UnicodeDecodeError as exc:
        raise BufferIOError(f"Cannot decode {path}: {exc.reason}", path=path) from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise BufferIOError(f"Cannot open {path}: {reason}", path=path) from exc

    document = Document.from_text(content)
    telemetry.record_event(
        "buffer.load", data={"path": path, "lines": document.line_count}
    )
    return document


def save_document(document: Document, path: str, *, encoding: str = "utf-8") -> None:
    """Write ``document`` to ``path`` atomically and mark it clean.

    The text goes to a temporary file in the target directory first, which
    is then renamed over ``path``; a failure leaves the old file untouched.
    Symlinks are written through and an existing file keeps its mode.

    Raises:
        BufferIOError: the file could not be written.
    """

    content = document.to_text()
    target = os.path.realpath(path)
    dir_name = os.path.dirname(target)
    suffix = os.path.splitext(target)[1]
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="",
            dir=dir_name,
            suffix=suffix,
            delete=False,
        ) as temp_file:
            temp_name = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if os.path.exists(target):
            shutil.copymode(target, temp_name)
        os.replace(temp_name, target)
    except OSError as exc:
        if temp_name is not None and os.path.exists(temp_name):
            os.remove(temp_name)
        if isinstance(exc, PermissionError):
            message = f"Permission denied saving {path}"
        elif exc.errno == errno.ENOSPC:
            message = "No space left on device"
        else:
            message = f"Cannot save to {path}"
        raise BufferIOError(message, path=path) from exc

    document.mark_clean()
    telemetry.record_event(
        "buffer.save", data={"path": path, "lines": document.line_count}
    )


__all__ = ["load_document", "save_document"]
