from __future__ import annotations

from typing import List, Tuple

from amanita.editor import Editor
from amanita.modes import (
    ChangeMode,
    Complete,
    DeleteChar,
    DeleteMotion,
    DeleteSelection,
    EditorMode,
    Escape,
    InsertText,
    InsertVariant,
    ModeController,
    Move,
    Paste,
    Undo,
    YankMotion,
    YankSelection,
    can_transition,
)
from amanita.motions import Direction, Word
from amanita.view import Viewport


def make_controller(text: str) -> ModeController:
    editor = Editor.from_text(text, viewport=Viewport(width=80, height=24))
    return ModeController(editor)


def record_events(controller: ModeController, name: str) -> List[object]:
    seen: List[object] = []
    controller.bus.subscribe(name, seen.append)
    return seen


def test_transition_table() -> None:
    assert can_transition(EditorMode.NORMAL, EditorMode.INSERT)
    assert can_transition(EditorMode.NORMAL, EditorMode.PENDING_YANK)
    assert can_transition(EditorMode.VISUAL, EditorMode.NORMAL)
    assert not can_transition(EditorMode.INSERT, EditorMode.VISUAL)
    assert not can_transition(EditorMode.NORMAL, EditorMode.NORMAL)
    assert not can_transition(EditorMode.PENDING_DELETE, EditorMode.INSERT)


def test_insert_round_trip_through_controller() -> None:
    controller = make_controller("abc")
    switches = record_events(controller, "mode.switch")

    result = controller.handle(ChangeMode(EditorMode.INSERT))
    assert result.switch_to is EditorMode.INSERT
    assert result.message == "enter_insert"
    assert controller.active_mode.name is EditorMode.INSERT

    controller.handle(InsertText("hi"))
    result = controller.handle(Escape())

    assert result.switch_to is EditorMode.NORMAL
    assert controller.editor.buffer.content == "hiabc"
    assert controller.editor.buffer.raw_position == 2
    assert switches == [
        {"from": EditorMode.NORMAL, "to": EditorMode.INSERT},
        {"from": EditorMode.INSERT, "to": EditorMode.NORMAL},
    ]


def test_escape_from_end_of_line_steps_back() -> None:
    controller = make_controller("abc")

    controller.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND_END_OF_LINE))
    assert controller.editor.buffer.raw_position == 3

    controller.handle(Escape())
    assert controller.editor.buffer.raw_position == 2


def test_insert_variants_position_the_cursor() -> None:
    append = make_controller("abc")
    append.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND))
    assert append.editor.buffer.raw_position == 1

    first = make_controller("  ab")
    first.handle(ChangeMode(EditorMode.INSERT, InsertVariant.INSERT_FIRST_NON_BLANK))
    assert first.editor.buffer.raw_position == 2

    below = make_controller("one\ntwo")
    below.handle(ChangeMode(EditorMode.INSERT, InsertVariant.OPEN_BELOW))
    below.handle(InsertText("x"))
    assert below.editor.buffer.content == "one\nx\ntwo"


def test_invalid_transition_is_reported_not_raised() -> None:
    controller = make_controller("abc")
    controller.handle(ChangeMode(EditorMode.INSERT))

    result = controller.handle(ChangeMode(EditorMode.VISUAL))

    assert result.status == "error"
    assert result.message == "Cannot switch from insert mode to visual mode"
    assert controller.editor.mode is EditorMode.INSERT


def test_commands_outside_their_mode_are_ignored() -> None:
    controller = make_controller("abc")

    result = controller.handle(InsertText("x"))

    assert result.consumed is False
    assert result.status == "ignored"
    assert controller.editor.buffer.content == "abc"

    result = controller.handle(DeleteChar())
    assert result.consumed is False


def test_normal_mode_operators_and_history() -> None:
    controller = make_controller("abc def")

    controller.handle(YankMotion(Word(1)))
    assert controller.editor.clipboard.get() == "abc d"

    controller.handle(DeleteMotion(Word(1)))
    assert controller.editor.buffer.content == "ef"

    result = controller.handle(Undo())
    assert result.message == "undo"
    assert controller.editor.buffer.content == "abc def"

    result = controller.handle(Undo())
    assert result.status == "noop"
    assert result.message == "Already at oldest change"


def test_paste_with_empty_clipboard_is_a_noop() -> None:
    controller = make_controller("abc")

    result = controller.handle(Paste())

    assert result.status == "noop"
    assert controller.editor.buffer.content == "abc"


def test_pending_delete_applies_to_next_motion() -> None:
    controller = make_controller("abc def")
    yanks = record_events(controller, "clipboard.yank")

    result = controller.handle(ChangeMode(EditorMode.PENDING_DELETE))
    assert result.switch_to is EditorMode.PENDING_DELETE

    result = controller.handle(Move(Word(1)))

    assert result.status == "ok"
    assert result.switch_to is EditorMode.NORMAL
    assert controller.editor.mode is EditorMode.NORMAL
    assert controller.editor.buffer.content == "ef"
    assert controller.editor.clipboard.get() == "abc d"
    assert yanks == [{"text": "abc d", "source": "delete"}]


def test_pending_yank_keeps_text() -> None:
    controller = make_controller("abc def")

    controller.handle(ChangeMode(EditorMode.PENDING_YANK))
    controller.handle(Move(Word(1)))

    assert controller.editor.mode is EditorMode.NORMAL
    assert controller.editor.buffer.content == "abc def"
    assert controller.editor.buffer.raw_position == 0
    assert controller.editor.clipboard.get() == "abc d"


def test_pending_mode_cancelled_by_other_commands() -> None:
    controller = make_controller("abc def")
    controller.handle(ChangeMode(EditorMode.PENDING_DELETE))

    result = controller.handle(Undo())

    assert result.consumed is False
    assert result.status == "cancelled"
    assert controller.editor.mode is EditorMode.NORMAL

    controller.handle(ChangeMode(EditorMode.PENDING_YANK))
    result = controller.handle(Escape())
    assert result.status == "cancelled"
    assert controller.editor.mode is EditorMode.NORMAL
    assert controller.editor.clipboard.get() == ""


def test_pending_operator_on_locked_buffer_reports_error() -> None:
    controller = make_controller("abc def")
    editor = controller.editor

    with editor.buffer.save_lock():
        controller.handle(ChangeMode(EditorMode.PENDING_DELETE))
        result = controller.handle(Move(Word(1)))

    assert result.status == "error"
    assert "being saved" in (result.message or "")
    assert editor.mode is EditorMode.NORMAL
    assert editor.buffer.content == "abc def"
    assert editor.clipboard.get() == ""


def test_visual_delete_selection() -> None:
    controller = make_controller("hello world")
    selections = record_events(controller, "visual.selection")

    controller.handle(ChangeMode(EditorMode.VISUAL))
    result = controller.handle(Move(Word(1)))
    assert result.status == "visual_select"
    assert selections[-1] == {"start": 0, "end": 6}

    view = controller.editor.view()
    assert view.selection == (0, 6)
    assert view.contains(3)
    assert not view.contains(7)

    controller.handle(DeleteSelection())

    assert controller.editor.buffer.content == "orld"
    assert controller.editor.clipboard.get() == "hello w"
    assert controller.editor.mode is EditorMode.NORMAL
    assert controller.editor.selection is None


def test_visual_yank_selection() -> None:
    controller = make_controller("hello world")

    controller.handle(ChangeMode(EditorMode.VISUAL))
    controller.handle(Move(Word(1)))
    result = controller.handle(YankSelection())

    assert result.switch_to is EditorMode.NORMAL
    assert controller.editor.clipboard.get() == "hello w"
    assert controller.editor.buffer.content == "hello world"
    assert controller.editor.buffer.raw_position == 6


def test_visual_escape_clears_selection() -> None:
    controller = make_controller("hello world")

    controller.handle(ChangeMode(EditorMode.VISUAL))
    controller.handle(Move(Word(1)))
    controller.handle(Escape())

    assert controller.editor.selection is None
    assert controller.editor.view().selection is None
    assert not controller.editor.selection_contains(0)


def test_completion_cycles_through_candidates() -> None:
    controller = make_controller("alpha alpine al")
    editor = controller.editor
    controller.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND_END_OF_LINE))

    result = controller.handle(Complete())
    assert result.message == "alpha"
    assert editor.buffer.content == "alpha alpine alpha"
    assert editor.buffer.raw_position == 18

    controller.handle(Complete())
    assert editor.buffer.content == "alpha alpine alpine"

    controller.handle(Complete())
    assert editor.buffer.content == "alpha alpine alpha"


def test_completion_session_resets_on_other_commands() -> None:
    controller = make_controller("alpha alpine al")
    editor = controller.editor
    controller.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND_END_OF_LINE))

    controller.handle(Complete())
    assert editor.completion.active

    controller.handle(InsertText(" "))
    assert not editor.completion.active


def test_completion_backward_starts_from_the_last_candidate() -> None:
    controller = make_controller("ab ac ab a")
    editor = controller.editor
    controller.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND_END_OF_LINE))

    first = controller.handle(Complete(Direction.BACKWARD))
    second = controller.handle(Complete(Direction.BACKWARD))

    assert (first.message, second.message) == ("ab", "ac")
    assert editor.buffer.content == "ab ac ab ac"


def test_completion_without_candidates_is_a_noop() -> None:
    controller = make_controller("xyz q")
    controller.handle(ChangeMode(EditorMode.INSERT, InsertVariant.APPEND_END_OF_LINE))

    result = controller.handle(Complete())

    assert result.status == "noop"
    assert controller.editor.buffer.content == "xyz q"


def test_mode_hooks_fire_on_every_switch() -> None:
    controller = make_controller("abc")
    seen: List[Tuple[str, str]] = []
    controller.bus.subscribe(
        "mode.switch",
        lambda payload: seen.append((payload["from"].value, payload["to"].value)),  # type: ignore[index]
    )

    controller.handle(ChangeMode(EditorMode.PENDING_YANK))
    controller.handle(Escape())
    controller.handle(ChangeMode(EditorMode.VISUAL))
    controller.handle(Escape())

    assert seen == [
        ("normal", "pending_yank"),
        ("pending_yank", "normal"),
        ("normal", "visual"),
        ("visual", "normal"),
    ]
