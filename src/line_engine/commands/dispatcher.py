"""Command dispatch: one command in, one fully applied state change out."""

from __future__ import annotations

from typing import Callable, Dict

from line_engine.actions import Editor, History, Navigator
from line_engine.buffer import Buffer, BufferIOError
from line_engine.runtime import telemetry

from .models import (
    Backspace,
    Command,
    CommandResult,
    Enter,
    InsertChar,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Quit,
    Redo,
    Save,
    Undo,
)


class EngineBus:
    """Minimal event bus letting hosts observe save/quit/error signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class CommandDispatcher:
    """Owns the navigator, editor and history for a single buffer session."""

    def __init__(self, buffer: Buffer, *, bus: EngineBus | None = None) -> None:
        self.buffer = buffer
        self.bus = bus if bus is not None else EngineBus()
        self.navigator = Navigator(buffer)
        self.editor = Editor(buffer)
        self.history = History(buffer)
        self._handlers: Dict[type, Callable[[Command], CommandResult]] = {
            MoveUp: lambda cmd: self._move(self.navigator.move_up, cmd.amount),
            MoveDown: lambda cmd: self._move(self.navigator.move_down, cmd.amount),
            MoveLeft: lambda cmd: self._move(self.navigator.move_left, cmd.amount),
            MoveRight: lambda cmd: self._move(self.navigator.move_right, cmd.amount),
            InsertChar: lambda cmd: self._edited(self.editor.insert_char(cmd.text)),
            Enter: lambda cmd: self._edited(self.editor.enter()),
            Backspace: lambda cmd: self._edited(self.editor.backspace()),
            Undo: lambda cmd: self._history(self.history.undo(), "undo"),
            Redo: lambda cmd: self._history(self.history.redo(), "redo"),
            Save: self._save,
            Quit: self._quit,
        }

    def dispatch(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command {command!r}")
        with telemetry.span(
            name=f"command::{type(command).__name__}",
            component="commands",
            metadata={"buffer": self.buffer.name},
        ):
            return handler(command)

    def _move(self, move: Callable[[int], None], amount: int) -> CommandResult:
        before = self.buffer.view()
        move(amount)
        if self.buffer.view() == before:
            return CommandResult(consumed=True, status="noop")
        return CommandResult(consumed=True, message="moved")

    def _edited(self, entry: object | None) -> CommandResult:
        if entry is None:
            return CommandResult(consumed=True, status="noop")
        return CommandResult(consumed=True, message="edited", edited=True)

    def _history(self, entry: object | None, kind: str) -> CommandResult:
        if entry is None:
            return CommandResult(consumed=True, status="noop", message=f"nothing_to_{kind}")
        return CommandResult(consumed=True, message=kind, edited=True)

    def _save(self, command: Command) -> CommandResult:
        assert isinstance(command, Save)
        try:
            path = self.buffer.save(command.path)
        except (BufferIOError, ValueError) as exc:
            telemetry.record_event(
                "buffer.save_failed", level="error", data={"reason": str(exc)}
            )
            self.bus.emit("buffer.error", {"operation": "save", "reason": str(exc)})
            return CommandResult(consumed=True, status="error", message=str(exc))
        self.bus.emit("buffer.save", {"path": path})
        return CommandResult(consumed=True, message=f"saved {path}")

    def _quit(self, command: Command) -> CommandResult:
        del command
        self.bus.emit("buffer.quit", {"dirty": self.buffer.dirty})
        return CommandResult(consumed=True, message="quit", quit=True)


__all__ = ["CommandDispatcher", "EngineBus"]
