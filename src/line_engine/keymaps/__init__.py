"""Key stroke registry and default bindings."""

from .models import Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import default_bindings, load_default_keymaps

__all__ = [
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "default_bindings",
    "load_default_keymaps",
]
