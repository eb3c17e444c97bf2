"""Keymap registry mapping key strokes to commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from line_engine.commands import Command
from line_engine.runtime.telemetry import span

from .models import Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    signatures: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a stroke that is already bound."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on '{binding.key_signature}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns bindings, indexed by stroke token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._by_signature: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key_signature},
        ) as handle:
            existing_id = self._by_signature.get(binding.key_signature)
            if existing_id is not None and existing_id != binding.id:
                existing = self._bindings[existing_id]
                if not replace:
                    handle.add_metadata("conflict", existing.id)
                    raise KeymapConflictError(binding, existing)
                self._drop(existing)
            previous = self._bindings.get(binding.id)
            if previous is not None:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._drop(previous)

            self._bindings[binding.id] = binding
            self._by_signature[binding.key_signature] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self._revision += 1
        return binding

    def lookup(self, stroke: KeyStroke) -> Optional[Binding]:
        binding_id = self._by_signature.get(stroke.token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def resolve(self, stroke: KeyStroke) -> Optional[Command]:
        binding = self.lookup(stroke)
        if binding is None:
            return None
        return binding.command()

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            signatures=tuple(sorted(self._by_signature)),
        )

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        if self._by_signature.get(binding.key_signature) == binding.id:
            del self._by_signature[binding.key_signature]


__all__ = ["KeymapRegistry", "KeymapConflictError", "RegistryStats"]
