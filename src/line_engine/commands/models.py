"""Discrete commands a host dispatcher feeds into the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class MoveUp:
    amount: int = 1


@dataclass(frozen=True, slots=True)
class MoveDown:
    amount: int = 1


@dataclass(frozen=True, slots=True)
class MoveLeft:
    amount: int = 1


@dataclass(frozen=True, slots=True)
class MoveRight:
    amount: int = 1


@dataclass(frozen=True, slots=True)
class InsertChar:
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("InsertChar requires text")


@dataclass(frozen=True, slots=True)
class Enter:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Save:
    path: str | None = None


Command = Union[
    MoveUp,
    MoveDown,
    MoveLeft,
    MoveRight,
    InsertChar,
    Enter,
    Backspace,
    Undo,
    Redo,
    Quit,
    Save,
]


@dataclass(slots=True)
class CommandResult:
    """Outcome of dispatching one command."""

    consumed: bool
    status: str = "ok"
    message: str | None = None
    quit: bool = False
    edited: bool = False


__all__ = [
    "MoveUp",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "InsertChar",
    "Enter",
    "Backspace",
    "Undo",
    "Redo",
    "Quit",
    "Save",
    "Command",
    "CommandResult",
]
