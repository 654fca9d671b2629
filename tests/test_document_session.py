from __future__ import annotations

import threading
from pathlib import Path
from typing import List

import pytest

from notepad_engine.buffer import (
    APP_NAME,
    DocumentDecodeError,
    DocumentIOError,
    DocumentSession,
)


def type_text(session: DocumentSession, *texts: str) -> None:
    for text in texts:
        session.on_user_edit(session.get_current_text(), text)


def make_edited_session() -> DocumentSession:
    session = DocumentSession()
    type_text(session, "d", "dr", "dra", "draft")
    session.undo()
    return session


def test_open_replaces_text_and_clears_history(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello\nworld\n", encoding="utf-8")
    session = make_edited_session()

    text = session.open_file(target)

    assert text == "hello\nworld\n"
    assert session.get_current_text() == "hello\nworld\n"
    assert session.path == str(target)
    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ()
    assert session.document.dirty is False
    assert session.title == f"{APP_NAME} ({target})"


def test_open_missing_file_leaves_state_untouched(tmp_path: Path) -> None:
    session = make_edited_session()
    before = (
        session.get_current_text(),
        session.history.undo_stack,
        session.history.redo_stack,
        session.path,
    )

    with pytest.raises(DocumentIOError) as excinfo:
        session.open_file(tmp_path / "missing.txt")

    assert excinfo.value.path == str(tmp_path / "missing.txt")
    after = (
        session.get_current_text(),
        session.history.undo_stack,
        session.history.redo_stack,
        session.path,
    )
    assert after == before


def test_open_undecodable_file_fails_without_mutation(tmp_path: Path) -> None:
    target = tmp_path / "binary.txt"
    target.write_bytes(b"\xff\xfe\x00bad")
    session = make_edited_session()
    text_before = session.get_current_text()
    undo_before = session.history.undo_stack

    with pytest.raises(DocumentDecodeError):
        session.open_file(target)

    assert session.get_current_text() == text_before
    assert session.history.undo_stack == undo_before
    assert session.path is None


def test_save_without_path_needs_a_target() -> None:
    session = DocumentSession.from_text("unsaved")

    assert session.save() is None
    assert session.path is None


def test_save_as_writes_verbatim_and_adopts_path(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    session = DocumentSession()
    session.on_user_edit("", "héllo\r\nwörld")

    written = session.save_as(target)

    assert written == str(target)
    assert target.read_bytes() == "héllo\r\nwörld".encode("utf-8")
    assert session.path == str(target)
    assert session.document.dirty is False
    assert session.history.undo_stack == ("",)


def test_save_writes_to_current_path(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    session = DocumentSession()
    session.on_user_edit("", "first")
    session.save_as(target)
    session.on_user_edit("first", "second")

    assert session.save() == str(target)
    assert target.read_text(encoding="utf-8") == "second"


def test_save_as_failure_keeps_previous_path(tmp_path: Path) -> None:
    good = tmp_path / "good.txt"
    session = DocumentSession()
    session.on_user_edit("", "text")
    session.save_as(good)

    with pytest.raises(DocumentIOError):
        session.save_as(tmp_path)

    assert session.path == str(good)


def test_new_document_resets_everything(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("loaded", encoding="utf-8")
    session = DocumentSession()
    session.open_file(target)
    session.on_user_edit("loaded", "loaded!")
    resets: List[object] = []
    session.bus.subscribe("document.reset", resets.append)

    session.new_document()

    assert session.get_current_text() == ""
    assert session.path is None
    assert session.title == APP_NAME
    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ()
    assert resets == [None]


def test_set_current_text_bypasses_recording() -> None:
    session = make_edited_session()

    session.set_current_text("replacement")

    assert session.get_current_text() == "replacement"
    assert session.history.undo_stack == ()
    assert session.history.redo_stack == ()
    assert session.undo() is None


def test_discard_confirmation_tracks_non_empty_buffer() -> None:
    session = DocumentSession()
    assert session.requires_discard_confirmation is False

    type_text(session, "x")

    assert session.requires_discard_confirmation is True


def test_file_events_are_published(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    session = DocumentSession()
    events: List[tuple[str, object]] = []
    for name in ("document.loaded", "document.saved"):
        session.bus.subscribe(name, lambda payload, name=name: events.append((name, payload)))

    type_text(session, "body")
    session.save_as(target)
    session.open_file(target)

    assert events == [
        ("document.saved", str(target)),
        ("document.loaded", str(target)),
    ]


def test_mirror_reports_history_availability() -> None:
    session = DocumentSession()
    type_text(session, "abc")

    mirror = session.mirror()

    assert mirror.text == "abc"
    assert mirror.title == APP_NAME
    assert mirror.attributes == {
        "dirty": "true",
        "can_undo": "true",
        "can_redo": "false",
    }


def test_threadsafe_session_serializes_edits() -> None:
    session = DocumentSession(threadsafe=True)

    def worker(index: int) -> None:
        for step in range(50):
            type_text(session, f"w{index}-{step}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(session.history.undo_stack) == 400
    assert session.history.undo_stack[0] == ""
    assert session.history.redo_stack == ()
