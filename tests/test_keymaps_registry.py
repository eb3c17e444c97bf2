import pytest

from line_engine.commands import Enter, MoveDown, MoveUp, Quit, Save, Undo
from line_engine.keymaps import (
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    default_bindings,
    load_default_keymaps,
)
from line_engine.runtime import EngineSettings


def make_binding(
    *,
    binding_id: str,
    key: str = "x",
    modifiers: tuple[str, ...] = ("ctrl",),
    command=Enter,
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke(key, modifiers), command=command)


def test_stroke_tokens_are_normalized() -> None:
    stroke = KeyStroke("S", ("Shift", "CTRL", "ctrl"))

    assert stroke.token == "ctrl+shift+s"
    assert KeyStroke.parse("ctrl+shift+s") == stroke
    assert KeyStroke("Enter").token == "enter"


def test_empty_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    binding = make_binding(binding_id="edit.x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.lookup(KeyStroke("x", ("ctrl",))) is binding
    assert registry.revision() == 1


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="edit.x"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="edit.x.duplicate"))

    assert info.value.existing.id == "edit.x"


def test_register_binding_replace_drops_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="edit.x"))

    registry.register_binding(
        make_binding(binding_id="history.x", command=Undo), replace=True
    )

    assert registry.stats().binding_count == 1
    assert registry.resolve(KeyStroke("x", ("ctrl",))) == Undo()


def test_duplicate_binding_id_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="edit.x"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="edit.x", key="y"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="edit.x"))

    removed = registry.unregister_binding("edit.x")

    assert removed is not None
    assert registry.lookup(KeyStroke("x", ("ctrl",))) is None
    assert registry.unregister_binding("edit.x") is None
    with pytest.raises(KeyError):
        registry.get_binding("edit.x")


def test_default_keymaps_resolve_commands() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    assert registry.resolve(KeyStroke("up")) == MoveUp(1)
    assert registry.resolve(KeyStroke("pagedown")) == MoveDown(10)
    assert registry.resolve(KeyStroke("s", ("ctrl",))) == Save()
    assert registry.resolve(KeyStroke("escape")) == Quit()
    assert registry.resolve(KeyStroke("f1")) is None


def test_default_page_step_follows_settings() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry, settings=EngineSettings(page_step=3))

    assert registry.resolve(KeyStroke("pageup")) == MoveUp(3)


def test_default_keymaps_can_be_filtered_and_extended() -> None:
    registry = KeymapRegistry()
    extra = make_binding(binding_id="session.quit_alt", key="w", command=Quit)

    load_default_keymaps(
        registry, exclude_bindings=["session.quit"], extra_bindings=[extra]
    )

    assert registry.lookup(KeyStroke("escape")) is None
    assert registry.resolve(KeyStroke("w", ("ctrl",))) == Quit()
    assert registry.stats().binding_count == len(default_bindings())
