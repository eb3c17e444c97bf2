"""Layout and navigation settings, overridable through the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "LINE_ENGINE_"


def _env_int(
    environ: Mapping[str, str], key: str, fallback: int, minimum: int = 0
) -> int:
    value = environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Static layout numbers shared by the navigator and the render snapshot.

    ``left_margin`` and ``number_width`` together form the line-number gutter
    (numbers are right-aligned in ``number_width`` columns followed by one
    space). ``chrome_rows`` and ``chrome_columns`` are the rows and columns
    a host spends on borders, title and gutter.
    """

    page_step: int = 10
    left_margin: int = 3
    number_width: int = 4
    top_margin: int = 2
    chrome_rows: int = 4
    chrome_columns: int = 10

    def __post_init__(self) -> None:
        for item in fields(self):
            if getattr(self, item.name) < 0:
                raise ValueError(f"{item.name} cannot be negative")
        if self.page_step < 1:
            raise ValueError("page_step must be at least 1")

    @property
    def gutter_width(self) -> int:
        return self.left_margin + self.number_width + 1

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        source = os.environ if environ is None else environ
        defaults = cls()
        values = {
            item.name: _env_int(
                source,
                item.name.upper(),
                getattr(defaults, item.name),
                minimum=1 if item.name == "page_step" else 0,
            )
            for item in fields(cls)
        }
        return cls(**values)

    def window_size(self, term_width: int, term_height: int) -> Tuple[int, int]:
        """Return ``(text_width, window_height)`` for a terminal size."""

        text_width = max(1, term_width - self.chrome_columns)
        window_height = max(1, term_height - self.chrome_rows)
        return text_width, window_height


DEFAULT_SETTINGS = EngineSettings()

__all__ = ["EngineSettings", "DEFAULT_SETTINGS"]
