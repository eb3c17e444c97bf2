from __future__ import annotations

from typing import List

from line_engine.adapters.terminal import TerminalAdapter, TerminalUIHooks
from line_engine.buffer import Buffer, RenderSnapshot
from line_engine.commands import CommandDispatcher


def make_adapter(
    text: str = "",
    *,
    views: List[RenderSnapshot] | None = None,
    statuses: List[str] | None = None,
    events: List[tuple[str, object | None]] | None = None,
    logs: List[str] | None = None,
) -> TerminalAdapter:
    dispatcher = CommandDispatcher(Buffer.from_text(text, window_height=5))
    hooks = TerminalUIHooks(
        update_view=(views.append if views is not None else lambda snapshot: None),
        update_status=(statuses.append if statuses is not None else lambda status: None),
        handle_event=(
            (lambda name, payload: events.append((name, payload)))
            if events is not None
            else lambda name, payload: None
        ),
        log=(logs.append if logs is not None else lambda line: None),
    )
    return TerminalAdapter(dispatcher, hooks, text_width=20)


def test_adapter_pushes_initial_view() -> None:
    views: List[RenderSnapshot] = []

    make_adapter("hello", views=views)

    assert len(views) == 1
    assert views[0].lines[0].text == "hello"


def test_typing_inserts_text_and_refreshes_view() -> None:
    views: List[RenderSnapshot] = []
    statuses: List[str] = []
    adapter = make_adapter(views=views, statuses=statuses)

    adapter.handle_key("h", text="h")
    adapter.handle_key("I", text="I", modifiers=("shift",))

    assert adapter.dispatcher.buffer.lines == ("hI",)
    assert views[-1].cursor == (0, 2)
    assert "edited" in statuses


def test_bound_keys_dispatch_commands() -> None:
    adapter = make_adapter("ab")

    adapter.handle_key("RIGHT")
    adapter.handle_key("ENTER")
    assert adapter.dispatcher.buffer.lines == ("a", "b")

    adapter.handle_key("z", text="z", modifiers=("CTRL",))
    assert adapter.dispatcher.buffer.lines == ("ab",)
    assert adapter.dispatcher.buffer.state.cursor == (0, 1)

    adapter.handle_key("y", modifiers=("ctrl",))
    assert adapter.dispatcher.buffer.lines == ("a", "b")


def test_unbound_keys_are_not_consumed() -> None:
    adapter = make_adapter("ab")

    result = adapter.handle_key("f5")
    control = adapter.handle_key("k", text="k", modifiers=("ctrl",))

    assert result.consumed is False
    assert control.consumed is False
    assert adapter.dispatcher.buffer.lines == ("ab",)


def test_escape_finishes_session_and_relays_event() -> None:
    events: List[tuple[str, object | None]] = []
    adapter = make_adapter("ab", events=events)

    result = adapter.handle_key("escape")

    assert result.quit is True
    assert adapter.finished is True
    assert events == [("buffer.quit", {"dirty": False})]


def test_save_failure_is_relayed_as_event() -> None:
    events: List[tuple[str, object | None]] = []
    statuses: List[str] = []
    adapter = make_adapter("ab", events=events, statuses=statuses)

    result = adapter.handle_key("s", modifiers=("ctrl",))

    assert result.status == "error"
    assert events and events[0][0] == "buffer.error"
    assert statuses[-1] == result.message


def test_resize_updates_window_and_text_width() -> None:
    views: List[RenderSnapshot] = []
    adapter = make_adapter("\n".join(str(n) for n in range(20)), views=views)
    for _ in range(4):
        adapter.handle_key("down")

    adapter.resize(30, 6)

    buffer = adapter.dispatcher.buffer
    assert buffer.state.window_height == 2
    assert buffer.state.absolute_row == 4
    assert views[-1].text_width == 20
    assert [line.number for line in views[-1].lines] == [4, 5]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter("ab", logs=logs)

    adapter.handle_key("x", text="x")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_pulls_views_from_custom_source() -> None:
    buffer = Buffer.from_text("abc", window_height=5)
    widths: List[int] = []

    class RecordingSource:
        def pull_snapshot(self, text_width: int) -> RenderSnapshot:
            widths.append(text_width)
            return buffer.render(text_width)

    views: List[RenderSnapshot] = []
    adapter = TerminalAdapter(
        CommandDispatcher(buffer),
        TerminalUIHooks(update_view=views.append),
        source=RecordingSource(),
        text_width=12,
    )

    adapter.handle_key("right")

    assert widths == [12, 12]
    assert views[-1].cursor == (0, 1)
