"""UI-agnostic line buffer engine for terminal text editors."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "commands",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
