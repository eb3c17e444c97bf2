"""Navigation, editing and history verbs applied to a buffer session."""

from .editing import Editor
from .history import History
from .navigation import Navigator

__all__ = ["Editor", "History", "Navigator"]
