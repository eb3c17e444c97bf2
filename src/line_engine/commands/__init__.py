"""Abstract command surface and the dispatcher that applies it."""

from .dispatcher import CommandDispatcher, EngineBus
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

__all__ = [
    "CommandDispatcher",
    "EngineBus",
    "Command",
    "CommandResult",
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
]
