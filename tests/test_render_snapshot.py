from __future__ import annotations

from typing import Sequence

from line_engine.buffer import Buffer, BufferState, Document
from line_engine.runtime import EngineSettings


def make_buffer(
    lines: Sequence[str],
    *,
    row: int = 0,
    col: int = 0,
    scroll_offset: int = 0,
    window_height: int = 24,
    settings: EngineSettings | None = None,
) -> Buffer:
    return Buffer(
        document=Document.from_lines(lines),
        state=BufferState(
            row=row, col=col, scroll_offset=scroll_offset, window_height=window_height
        ),
        settings=settings,
    )


def test_visible_slice_uses_one_based_line_numbers() -> None:
    buffer = make_buffer(
        [f"line {n}" for n in range(10)], scroll_offset=4, window_height=3
    )

    snapshot = buffer.render(text_width=40)

    assert [line.number for line in snapshot.lines] == [5, 6, 7]
    assert [line.text for line in snapshot.lines] == ["line 4", "line 5", "line 6"]
    assert snapshot.scroll_offset == 4


def test_short_document_renders_every_line() -> None:
    snapshot = make_buffer(["a", "b"], window_height=5).render(text_width=10)

    assert len(snapshot.lines) == 2


def test_overflow_flag_uses_display_width() -> None:
    buffer = make_buffer(["12345", "123456", "世界世"])

    flags = [line.overflow for line in buffer.render(text_width=5).lines]

    assert flags == [False, True, True]


def test_screen_cursor_adds_gutter_and_top_margin() -> None:
    buffer = make_buffer(["first", "abc"], row=1, col=2)

    snapshot = buffer.render(text_width=20)

    assert snapshot.gutter_width == 8
    assert snapshot.screen_cursor == (10, 3)
    assert snapshot.cursor == (1, 2)


def test_screen_cursor_accounts_for_wide_graphemes() -> None:
    buffer = make_buffer(["世界"], col=1)

    assert buffer.render(text_width=20).screen_cursor == (10, 2)


def test_custom_layout_settings() -> None:
    settings = EngineSettings(left_margin=0, number_width=2, top_margin=0)
    buffer = make_buffer(["abc"], col=3, settings=settings)

    snapshot = buffer.render(text_width=20)

    assert snapshot.gutter_width == 3
    assert snapshot.screen_cursor == (6, 0)


def test_snapshot_reports_dirty_and_version() -> None:
    buffer = make_buffer(["abc"])
    clean = buffer.render(text_width=10)

    buffer.document.set_line(0, "abcd")
    edited = buffer.pull_snapshot(text_width=10)

    assert clean.dirty is False
    assert edited.dirty is True
    assert edited.version == clean.version + 1
