"""Host adapter translating key events into commands and snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from line_engine.buffer import BufferSync, RenderSnapshot
from line_engine.commands import Command, CommandDispatcher, CommandResult, InsertChar
from line_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TerminalUIHooks:
    """Callbacks the adapter invokes to update the host renderer."""

    update_view: Callable[[RenderSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TerminalAdapter:
    """Bridges host key events to the command dispatcher.

    A key bound in the registry becomes its command; unbound printable text
    (no modifiers other than shift) becomes ``InsertChar``. Everything else
    is reported back as unconsumed.
    Views are pulled from ``source``, the dispatcher's buffer by default.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        hooks: TerminalUIHooks,
        *,
        registry: KeymapRegistry | None = None,
        source: BufferSync | None = None,
        text_width: int = 80,
    ) -> None:
        self.dispatcher = dispatcher
        self.source: BufferSync = source if source is not None else dispatcher.buffer
        self.hooks = hooks
        self.text_width = text_width
        if registry is None:
            registry = KeymapRegistry(logger_name="line_engine.keymaps")
            load_default_keymaps(registry, settings=dispatcher.buffer.settings)
        self.registry = registry
        self.finished = False
        self._subscribe_events()
        self._refresh_view()

    def handle_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> CommandResult:
        stroke = KeyStroke(key, tuple(modifiers))
        self._log_state("key ->", key=stroke.token, text=text)
        command = self._command_for(stroke, text)
        if command is None:
            return CommandResult(consumed=False, status="unbound")
        result = self.dispatch(command)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def dispatch(self, command: Command) -> CommandResult:
        result = self.dispatcher.dispatch(command)
        if result.quit:
            self.finished = True
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_view()
        return result

    def resize(self, term_width: int, term_height: int) -> None:
        settings = self.dispatcher.buffer.settings
        self.text_width, window_height = settings.window_size(term_width, term_height)
        self.dispatcher.navigator.resize(window_height)
        self._refresh_view()

    def _command_for(self, stroke: KeyStroke, text: Optional[str]) -> Optional[Command]:
        command = self.registry.resolve(stroke)
        if command is not None:
            return command
        modifiers = set(stroke.modifiers) - {"shift"}
        if text and text.isprintable() and not modifiers:
            return InsertChar(text)
        return None

    def _subscribe_events(self) -> None:
        bus = self.dispatcher.bus
        for event in ("buffer.save", "buffer.quit", "buffer.error"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.source.pull_snapshot(self.text_width))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.dispatcher.buffer
        return {
            "cursor": buffer.state.cursor,
            "scroll": buffer.state.scroll_offset,
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


__all__ = ["TerminalAdapter", "TerminalUIHooks"]
