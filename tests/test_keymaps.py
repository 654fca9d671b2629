import pytest

from notepad_engine.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str = "test.action") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    chord: str = "ctrl+k",
    action_id: str = "test.action",
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(chord), action_id=action_id)


def test_stroke_normalizes_case_and_modifier_order() -> None:
    stroke = KeyStroke("Z", ("Shift", "CTRL", "ctrl"))

    assert stroke.token == "ctrl+shift+z"
    assert KeyStroke.parse("CTRL+Z") == KeyStroke("z", ("ctrl",))


def test_stroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
    with pytest.raises(ValueError):
        KeyStroke.parse("+")


def test_binding_accepts_chord_text() -> None:
    binding = Binding(id="b", stroke="ctrl+y", action_id="history.redo")  # type: ignore[arg-type]

    assert binding.key_signature == "ctrl+y"


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="global.k")
    revision = registry.revision()

    registry.register_binding(binding)

    assert list(registry.iter_bindings("ctrl+k")) == [binding]
    assert list(registry.iter_bindings()) == [binding]
    assert registry.revision() == revision + 1


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="global.k"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="global.k.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["global.k"]
    assert [b.id for b in registry.iter_bindings("ctrl+k")] == ["global.k"]


def test_register_binding_rejects_duplicate_id() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="global.k"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="global.k", chord="ctrl+j"))
    assert list(registry.iter_bindings("ctrl+j")) == []


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="global.k"))


def test_duplicate_action_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_default_keymaps_bind_only_undo_and_redo_chords() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    chords = {
        binding.key_signature: binding.action_id
        for binding in registry.iter_bindings()
    }
    assert chords == {"ctrl+z": "history.undo", "ctrl+y": "history.redo"}
    assert registry.get_action("file.save_as").description == "Save As"
    with pytest.raises(KeyError):
        registry.get_action("file.print")


def test_resolver_matches_and_misses() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)

    undo = resolver.resolve(KeyStroke("z", ("ctrl",)))
    alias = resolver.resolve("ctrl+shift+z")

    assert undo.status == "match"
    assert undo.match is not None and undo.match.action.id == "history.undo"
    assert alias.status == "miss"
    assert alias.token == "ctrl+shift+z"


def test_resolver_tracks_registry_revisions() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
    assert resolver.resolve("ctrl+s").status == "miss"

    registry.register_binding(
        Binding(id="global.save", stroke=KeyStroke.parse("ctrl+s"), action_id="file.save")
    )

    result = resolver.resolve("ctrl+s")
    assert result.status == "match"
    assert result.match is not None and result.match.binding.id == "global.save"
