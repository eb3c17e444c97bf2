"""Dataclasses describing key strokes and the commands they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from line_engine.commands import Command


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+s"`` style notation."""

        parts = [part for part in token.split("+") if part]
        if not parts:
            raise ValueError("token cannot be empty")
        return cls(parts[-1], tuple(parts[:-1]))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke with a command factory."""

    id: str
    stroke: KeyStroke
    command: Callable[[], Command]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not callable(self.command):
            raise TypeError("command must be callable")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "Binding"]
