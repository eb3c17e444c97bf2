"""Cursor movement and scrolling."""

from __future__ import annotations

from line_engine.buffer import Buffer
from line_engine.runtime import telemetry


class Navigator:
    """Translates directional moves into cursor and scroll updates.

    The cursor row is relative to the window and the scroll offset is the
    first document row on screen; all arithmetic saturates at the document
    edges instead of raising.
    """

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def move_up(self, amount: int = 1) -> None:
        if amount < 1:
            return
        state = self.buffer.state
        if state.row >= amount:
            state.row -= amount
        else:
            state.scroll_offset -= min(amount - state.row, state.scroll_offset)
            state.row = 0
        self.buffer.clamp_column()

    def move_down(self, amount: int = 1) -> None:
        if amount < 1:
            return
        state = self.buffer.state
        remaining = self.buffer.document.line_count - state.absolute_row - 1
        step = min(amount, max(remaining, 0))
        if state.row + step < state.window_height:
            state.row += step
        else:
            in_window = state.bottom_row - state.row
            state.row = state.bottom_row
            state.scroll_offset += step - in_window
        self.buffer.clamp_column()

    def move_left(self, amount: int = 1) -> None:
        if amount < 1:
            return
        state = self.buffer.state
        state.col = max(0, state.col - amount)

    def move_right(self, amount: int = 1) -> None:
        if amount < 1:
            return
        state = self.buffer.state
        state.col = min(self.buffer.line_length(), state.col + amount)

    def page_up(self) -> None:
        self.move_up(self.buffer.settings.page_step)

    def page_down(self) -> None:
        self.move_down(self.buffer.settings.page_step)

    def resize(self, window_height: int) -> None:
        """Adopt a new window height and keep the cursor row on screen."""

        if window_height < 1:
            raise ValueError("window_height must be at least 1")
        state = self.buffer.state
        state.window_height = window_height
        state.fit_window()
        telemetry.record_event(
            "viewport.resize",
            level="debug",
            data={"window_height": window_height, "scroll": state.scroll_offset},
        )


__all__ = ["Navigator"]
