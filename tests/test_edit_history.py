from __future__ import annotations

from typing import List

from notepad_engine.buffer import (
    ChangeKind,
    ChangeObserver,
    DocumentSession,
    EditHistory,
    TextChange,
    TextDocument,
)


def make_session(text: str = "") -> DocumentSession:
    return DocumentSession.from_text(text)


def type_text(session: DocumentSession, *texts: str) -> None:
    for text in texts:
        session.on_user_edit(session.get_current_text(), text)


def test_edit_pushes_previous_text_and_clears_redo() -> None:
    session = make_session("a")

    type_text(session, "b")

    assert session.history.undo_stack[-1] == "a"
    assert session.history.redo_stack == ()


def test_undo_then_redo_restores_both_texts() -> None:
    session = make_session("a")
    type_text(session, "b")

    session.undo()
    assert session.get_current_text() == "a"

    session.redo()
    assert session.get_current_text() == "b"


def test_new_edit_after_undo_discards_redo() -> None:
    session = make_session("a")
    type_text(session, "b")
    session.undo()

    type_text(session, "c")

    assert session.history.redo_stack == ()
    assert session.redo() is None
    assert session.get_current_text() == "c"


def test_editing_to_empty_clears_both_stacks() -> None:
    session = make_session()
    type_text(session, "a", "ab", "abc")
    session.undo()
    assert session.history.redo_stack == ("abc",)

    type_text(session, "")

    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ()
    assert session.undo() is None
    assert session.redo() is None
    assert session.get_current_text() == ""


def test_undo_and_redo_on_empty_stacks_change_nothing() -> None:
    session = make_session("steady")
    version = session.document.version

    assert session.undo() is None
    assert session.redo() is None

    assert session.get_current_text() == "steady"
    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ()
    assert session.document.version == version


def test_multi_step_sequence() -> None:
    session = make_session()
    type_text(session, "a", "ab", "abc")
    history = session.history
    assert history.undo_stack == ("", "a", "ab")

    session.undo()
    assert session.get_current_text() == "ab"
    assert history.undo_stack == ("", "a")
    assert history.redo_stack == ("abc",)

    session.undo()
    assert session.get_current_text() == "a"
    assert history.redo_stack == ("abc", "ab")

    session.redo()
    assert session.get_current_text() == "ab"
    assert history.redo_stack == ("abc",)
    assert history.undo_stack == ("", "a")


def test_undo_back_to_empty_keeps_redo_history() -> None:
    session = make_session()
    type_text(session, "a")

    change = session.undo()

    assert change == TextChange(old="a", new="", kind=ChangeKind.UNDO_REPLAY)
    assert session.get_current_text() == ""
    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ("a",)

    session.redo()
    assert session.get_current_text() == "a"
    assert session.history.undo_stack == ("",)


def test_replay_kinds_are_not_recorded() -> None:
    history = EditHistory(TextDocument(text="x"))

    history.record_if_needed("x", "y", ChangeKind.UNDO_REPLAY)
    history.record_if_needed("y", "", ChangeKind.REDO_REPLAY)

    assert history.undo_stack == ()
    assert history.redo_stack == ()


def test_record_if_needed_leaves_buffer_alone() -> None:
    document = TextDocument(text="x")
    history = EditHistory(document)

    history.record_if_needed("x", "y")

    assert document.text == "x"
    assert history.undo_stack == ("x",)


def test_replays_reach_the_attached_sink() -> None:
    document = TextDocument(text="one")
    history = EditHistory(document)
    seen: List[TextChange] = []
    history.attach(seen.append)
    history.record_if_needed("zero", "one")

    history.undo()
    history.redo()

    assert [change.kind for change in seen] == [
        ChangeKind.UNDO_REPLAY,
        ChangeKind.REDO_REPLAY,
    ]
    assert document.text == "one"
    assert history.undo_stack == ("zero",)


def test_observer_replays_do_not_push_or_clear() -> None:
    document = TextDocument(text="b")
    history = EditHistory(document)
    ChangeObserver(history)
    history.record_if_needed("a", "b")

    history.undo()

    assert document.text == "a"
    assert history.undo_stack == ()
    assert history.redo_stack == ("b",)
