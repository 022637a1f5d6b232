from __future__ import annotations

import pytest

from amanita.editor import Editor
from amanita.errors import EditorError
from amanita.modes import OperatorKind, OperatorPipeline
from amanita.motions import Char, EndOfLine, Line, Word
from amanita.view import Viewport


def make_editor(text: str) -> Editor:
    return Editor.from_text(text, viewport=Viewport(width=80, height=24))


def test_delete_forward_includes_landing_character() -> None:
    editor = make_editor("abc def")

    removed = editor.delete_with_motion(Word(1))

    assert removed == "abc d"
    assert editor.buffer.content == "ef"
    assert editor.clipboard.get() == "abc d"
    assert editor.buffer.raw_position == 0


def test_delete_backward_excludes_start_character() -> None:
    editor = make_editor("abc def")
    editor.perform_motion(Word(1))

    removed = editor.delete_with_motion(Word(-1))

    assert removed == "abc "
    assert editor.buffer.content == "def"
    assert editor.buffer.raw_position == 0


def test_delete_to_end_of_line() -> None:
    editor = make_editor("abc\ndef")

    editor.delete_with_motion(EndOfLine())

    assert editor.buffer.content == "\ndef"


def test_delete_across_lines() -> None:
    editor = make_editor("ab\ncd\nef")

    editor.delete_with_motion(Line(1))

    assert editor.buffer.content == "d\nef"


def test_yank_leaves_text_and_cursor() -> None:
    editor = make_editor("abc def")

    yanked = editor.yank_with_motion(Word(1))

    assert yanked == "abc d"
    assert editor.clipboard.get() == "abc d"
    assert editor.buffer.content == "abc def"
    assert editor.buffer.raw_position == 0
    assert len(editor.history) == 0


def test_unresolved_motion_deletes_nothing() -> None:
    editor = make_editor("abc")
    editor.clipboard.yank("keep")

    assert editor.delete_with_motion(Char("z")) == ""
    assert editor.yank_with_motion(Char("z")) == ""

    assert editor.buffer.content == "abc"
    assert editor.clipboard.get() == "keep"
    assert len(editor.history) == 0


def test_delete_is_undoable() -> None:
    editor = make_editor("abc def")
    editor.delete_with_motion(Word(1))

    editor.undo()

    assert editor.buffer.content == "abc def"


def test_pipeline_spends_the_operator_once() -> None:
    editor = make_editor("abc def")
    pipeline = OperatorPipeline(editor)

    with pytest.raises(EditorError):
        pipeline.plan(Word(1))
    pipeline.arm(OperatorKind.YANK)
    plan = pipeline.plan(Word(1))

    assert pipeline.execute(plan) == "abc d"
    assert pipeline.pending is None
    with pytest.raises(EditorError):
        pipeline.plan(Word(1))
