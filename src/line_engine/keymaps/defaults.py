"""Built-in key bindings for the editing session."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from line_engine.commands import (
    Backspace,
    Enter,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Quit,
    Redo,
    Save,
    Undo,
)
from line_engine.runtime.settings import DEFAULT_SETTINGS, EngineSettings

from .models import Binding, KeyStroke
from .registry import KeymapRegistry


def default_bindings(settings: EngineSettings = DEFAULT_SETTINGS) -> tuple[Binding, ...]:
    page = settings.page_step
    return (
        Binding("move.up", KeyStroke("up"), lambda: MoveUp(1), "Cursor up"),
        Binding("move.down", KeyStroke("down"), lambda: MoveDown(1), "Cursor down"),
        Binding("move.left", KeyStroke("left"), lambda: MoveLeft(1), "Cursor left"),
        Binding("move.right", KeyStroke("right"), lambda: MoveRight(1), "Cursor right"),
        Binding("move.page_up", KeyStroke("pageup"), lambda: MoveUp(page), "Page up"),
        Binding(
            "move.page_down", KeyStroke("pagedown"), lambda: MoveDown(page), "Page down"
        ),
        Binding("edit.enter", KeyStroke("enter"), Enter, "Split line"),
        Binding("edit.backspace", KeyStroke("backspace"), Backspace, "Delete backwards"),
        Binding("history.undo", KeyStroke("z", ("ctrl",)), Undo, "Undo last edit"),
        Binding("history.redo", KeyStroke("y", ("ctrl",)), Redo, "Redo next edit"),
        Binding("file.save", KeyStroke("s", ("ctrl",)), Save, "Save to disk"),
        Binding("session.quit", KeyStroke("escape"), Quit, "Quit"),
        Binding("session.quit_ctrl", KeyStroke("q", ("ctrl",)), Quit, "Quit"),
    )


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Optional[Sequence[str]] = None,
) -> None:
    """Register the built-in bindings, then any extras."""

    excluded = set(exclude_bindings or ())
    for binding in default_bindings(settings):
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["default_bindings", "load_default_keymaps"]
