from __future__ import annotations

import pytest

from amanita import Editor, EditorMode
from amanita.buffer import Buffer
from amanita.errors import InvalidModeTransition
from amanita.motions import Word
from amanita.view import Viewport


def make_editor(*texts: str) -> Editor:
    buffers = [Buffer.from_text(text, name=f"buf{i}") for i, text in enumerate(texts)]
    return Editor(buffers, viewport=Viewport(width=80, height=24))


def test_editor_needs_a_buffer() -> None:
    with pytest.raises(ValueError):
        Editor([])


def test_default_editor_starts_on_an_empty_scratch_buffer() -> None:
    editor = Editor(viewport=Viewport(width=80, height=24))

    assert len(editor.buffers) == 1
    assert editor.buffer.content == ""
    assert editor.buffer.name == "scratch"
    assert editor.mode is EditorMode.NORMAL


def test_switch_buffer_resets_per_buffer_state() -> None:
    editor = make_editor("abc def", "other")
    editor.insert_text("x")
    editor.enter_mode(EditorMode.VISUAL)

    editor.switch_buffer(1)

    assert editor.current_index == 1
    assert editor.buffer.content == "other"
    assert editor.mode is EditorMode.NORMAL
    assert editor.selection is None
    assert len(editor.history) == 0
    assert editor.undo() is False


def test_switch_buffer_rejects_bad_index() -> None:
    editor = make_editor("abc")

    with pytest.raises(IndexError):
        editor.switch_buffer(3)


def test_clipboard_is_shared_across_buffers() -> None:
    editor = make_editor("abc def", "")
    editor.yank_with_motion(Word(1))

    editor.switch_buffer(1)
    editor.paste()

    assert editor.buffer.content == "abc d"


def test_mode_guards() -> None:
    editor = make_editor("abc")

    with pytest.raises(InvalidModeTransition):
        editor.leave_insert_mode()
    with pytest.raises(InvalidModeTransition):
        editor.delete_selection()
    with pytest.raises(InvalidModeTransition):
        editor.yank_selection()

    editor.enter_mode(EditorMode.INSERT)
    with pytest.raises(InvalidModeTransition) as excinfo:
        editor.enter_mode(EditorMode.VISUAL)
    assert excinfo.value.target == "visual"


def test_view_reports_renderer_state() -> None:
    editor = make_editor("ab\ncd")
    editor.insert_text("x")

    view = editor.view()

    assert view.text == "xab\ncd"
    assert view.raw_position == 1
    assert view.cursor == (1, 0)
    assert view.offset == (0, 0)
    assert view.mode is EditorMode.NORMAL
    assert view.selection is None
    assert view.buffer_name == "buf0"
    assert view.file_path is None
    assert view.dirty is True
    assert not view.contains(0)


def test_view_is_built_from_buffer_snapshot() -> None:
    editor = make_editor("hello")
    editor.perform_motion(Word(1))

    snapshot = editor.buffer.snapshot()
    view = editor.view()

    assert snapshot.text == view.text == "hello"
    assert snapshot.raw_position == view.raw_position == 4
    assert snapshot.version == view.version == 0
    assert snapshot.dirty is view.dirty is False

    editor.insert_text("x")

    assert editor.view().version == 1
    assert editor.view().dirty is True
