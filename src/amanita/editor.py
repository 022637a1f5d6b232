"""Editor state and the entry points the command dispatcher calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from amanita.buffer.buffer import Buffer
from amanita.buffer.registers import Clipboard
from amanita.buffer.state import Selection
from amanita.buffer.storage import FileStorage, TextStorage
from amanita.buffer.undo import UndoHistory
from amanita.completion import CompletionEngine
from amanita.config import EditorSettings
from amanita.editing.edits import Edit
from amanita.editing.engine import EditEngine
from amanita.errors import InvalidModeTransition
from amanita.modes.states import EditorMode, InsertVariant, can_transition
from amanita.motions import words
from amanita.motions.models import (
    Cursor,
    Direction,
    EndOfLine,
    FirstNonWhitespaceOfLine,
    Motion,
    ToRaw,
    Word,
)
from amanita.motions.resolver import MotionResolver
from amanita.runtime import telemetry
from amanita.view.viewport import Viewport, ViewportModel


@dataclass(slots=True)
class EditorView:
    """Everything a renderer needs after a command."""

    text: str
    cursor: Tuple[int, int]
    offset: Tuple[int, int]
    raw_position: int
    mode: EditorMode
    selection: Optional[Tuple[int, int]]
    buffer_name: str
    file_path: Optional[str]
    dirty: bool
    version: int

    def contains(self, offset: int) -> bool:
        if self.selection is None:
            return False
        low, high = self.selection
        return low <= offset <= high


class Editor:
    """Owns the buffers, clipboard, history, selection and completion session.

    Exactly one buffer is current. History, selection and completion belong to
    the editor and are reset when the current buffer changes.
    """

    def __init__(
        self,
        buffers: Optional[Sequence[Buffer]] = None,
        *,
        viewport: Optional[Viewport] = None,
        storage: Optional[TextStorage] = None,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        if buffers is not None and not buffers:
            raise ValueError("Editor needs at least one buffer")
        self.settings = settings or EditorSettings.from_env()
        self._buffers: List[Buffer] = list(buffers) if buffers else [Buffer()]
        self._current = 0
        self.mode = EditorMode.NORMAL
        self.clipboard = Clipboard()
        self.selection: Optional[Selection] = None
        self._history: UndoHistory[Edit] = UndoHistory()
        self.completion = CompletionEngine()
        self._viewport = ViewportModel(
            viewport
            or Viewport(self.settings.viewport_width, self.settings.viewport_height)
        )
        self.storage: TextStorage = storage or FileStorage(
            encoding=self.settings.encoding
        )
        self.motions = MotionResolver(self._viewport)
        self.engine = EditEngine(self)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "Editor":
        return cls([Buffer.from_text(text)], **kwargs)

    # state shared with the edit engine

    @property
    def buffer(self) -> Buffer:
        return self._buffers[self._current]

    @property
    def buffers(self) -> Tuple[Buffer, ...]:
        return tuple(self._buffers)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def viewport(self) -> ViewportModel:
        return self._viewport

    @property
    def history(self) -> UndoHistory[Edit]:
        return self._history

    @property
    def insert_mode(self) -> bool:
        return self.mode is EditorMode.INSERT

    def _require(self, mode: EditorMode, operation: str) -> None:
        if self.mode is not mode:
            raise InvalidModeTransition(self.mode.value, operation=operation)

    # motions

    def perform_motion(self, motion: Motion) -> bool:
        return self.motions.perform(self.buffer, motion, insert_mode=self.insert_mode)

    def visual_move(self, motion: Motion) -> bool:
        self._require(EditorMode.VISUAL, "visual move")
        moved = self.perform_motion(motion)
        if self.selection is None:
            self.selection = Selection.at_cursor(self.buffer.raw_position)
        self.selection.end = self.buffer.raw_position
        return moved

    def _delete_motion(self, motion: Motion) -> Optional[str]:
        buffer = self.buffer
        old = buffer.raw_position
        if not self.perform_motion(motion):
            return None
        new = buffer.raw_position
        start = min(old, new)
        end = min(old if old > new else new + 1, len(buffer.content))
        if start >= end:
            return ""
        return self.engine.delete_range(start, end)

    def delete_with_motion(self, motion: Motion) -> str:
        """Delete from the cursor to where ``motion`` lands and yank the text.

        A forward move includes the landing character. A motion without a
        target deletes nothing and leaves the clipboard alone.
        """

        removed = self._delete_motion(motion)
        if removed:
            self.clipboard.yank(removed)
        return removed or ""

    def yank_with_motion(self, motion: Motion) -> str:
        buffer = self.buffer
        old = buffer.raw_position
        if not self.perform_motion(motion):
            return ""
        new = buffer.raw_position
        low, high = min(old, new), max(old, new)
        yanked = buffer.store.slice(low, high + 1)
        self.clipboard.yank(yanked)
        self.viewport.move_to_raw(buffer, old, insert_mode=self.insert_mode)
        return yanked

    # text edits

    def insert_text(self, text: str) -> None:
        self.engine.insert_text(text)

    def insert_char(self, char: str) -> None:
        self.engine.insert_char(char)

    def insert_tab(self) -> None:
        self.engine.insert_tab()

    def delete_char(self) -> None:
        self.engine.delete_char()

    def insert_newline(self) -> None:
        self.engine.insert_newline()

    def open_line(self, n: int) -> None:
        self.engine.open_line(n)

    def paste(self) -> None:
        self.engine.insert_text(self.clipboard.get())

    def undo(self) -> bool:
        return self.engine.undo()

    def redo(self) -> bool:
        return self.engine.redo()

    # completion

    def complete(self, direction: Direction) -> Optional[str]:
        """Replace the word before the cursor with the next candidate."""

        buffer = self.buffer
        word = self.completion.next_word(
            buffer.content, buffer.raw_position, direction
        )
        if word is None:
            return None
        position = buffer.raw_position
        if position > 0 and words.is_word_char(buffer.store.char_at(position - 1)):
            self._delete_motion(Word(-1))
        self.engine.insert_text(word)
        return word

    def complete_next(self) -> Optional[str]:
        return self.complete(Direction.FORWARD)

    def complete_prev(self) -> Optional[str]:
        return self.complete(Direction.BACKWARD)

    def reset_completion(self) -> None:
        self.completion.reset()

    # modes

    def enter_mode(
        self, target: EditorMode, variant: InsertVariant = InsertVariant.INSERT
    ) -> None:
        if not can_transition(self.mode, target):
            raise InvalidModeTransition(self.mode.value, target=target.value)
        if target is EditorMode.NORMAL:
            self.escape()
        elif target is EditorMode.INSERT:
            self._enter_insert(variant)
        elif target is EditorMode.VISUAL:
            self.selection = Selection.at_cursor(self.buffer.raw_position)
            self.mode = EditorMode.VISUAL
        else:
            self.mode = target

    def _enter_insert(self, variant: InsertVariant) -> None:
        if variant is InsertVariant.OPEN_BELOW:
            self.engine.open_line(0)
        elif variant is InsertVariant.OPEN_ABOVE:
            self.engine.open_line(-1)
        self.mode = EditorMode.INSERT
        if variant is InsertVariant.APPEND:
            self.perform_motion(Cursor(1))
        elif variant is InsertVariant.APPEND_END_OF_LINE:
            self.perform_motion(EndOfLine())
        elif variant is InsertVariant.INSERT_FIRST_NON_BLANK:
            self.perform_motion(FirstNonWhitespaceOfLine())

    def leave_insert_mode(self) -> None:
        self._require(EditorMode.INSERT, "leave insert mode")
        buffer = self.buffer
        if buffer.x > 0 and buffer.x >= buffer.current_line_length:
            self.perform_motion(Cursor(-1))
        self.mode = EditorMode.NORMAL
        self.completion.reset()

    def escape(self) -> None:
        """Return to Normal from whatever mode is active."""

        if self.mode is EditorMode.INSERT:
            self.leave_insert_mode()
            return
        if self.mode is EditorMode.VISUAL:
            self.selection = None
        self.mode = EditorMode.NORMAL

    def delete_selection(self) -> str:
        self._require(EditorMode.VISUAL, "delete selection")
        low, high = self._selection_bounds()
        self.viewport.move_to_raw(self.buffer, low, insert_mode=False)
        removed = self.delete_with_motion(ToRaw(high))
        self.selection = None
        self.mode = EditorMode.NORMAL
        return removed

    def yank_selection(self) -> str:
        self._require(EditorMode.VISUAL, "yank selection")
        low, high = self._selection_bounds()
        yanked = self.buffer.store.slice(low, high + 1)
        self.clipboard.yank(yanked)
        self.selection = None
        self.mode = EditorMode.NORMAL
        return yanked

    def _selection_bounds(self) -> Tuple[int, int]:
        if self.selection is None:
            raw = self.buffer.raw_position
            return raw, raw
        return self.selection.bounds()

    def selection_contains(self, offset: int) -> bool:
        if self.mode is not EditorMode.VISUAL or self.selection is None:
            return False
        return self.selection.contains(offset)

    # buffers and storage

    def switch_buffer(self, index: int) -> None:
        if not 0 <= index < len(self._buffers):
            raise IndexError(f"buffer index {index} out of range")
        self._current = index
        self._history.clear()
        self.selection = None
        self.completion.reset()
        self.mode = EditorMode.NORMAL
        telemetry.record_event(
            "buffer.switch", data={"index": index, "buffer": self.buffer.name}
        )

    async def open(self, path: str) -> Buffer:
        buffer = await Buffer.from_file(path, self.storage)
        self._buffers.append(buffer)
        self.switch_buffer(len(self._buffers) - 1)
        return buffer

    async def save(self) -> None:
        buffer = self.buffer
        await buffer.save(self.storage)
        telemetry.record_event(
            "editor.save", data={"buffer": buffer.name, "path": buffer.file_path}
        )

    def view(self) -> EditorView:
        snapshot = self.buffer.snapshot()
        selection = None
        if self.mode is EditorMode.VISUAL and self.selection is not None:
            selection = self.selection.bounds()
        return EditorView(
            text=snapshot.text,
            cursor=snapshot.cursor,
            offset=snapshot.offset,
            raw_position=snapshot.raw_position,
            mode=self.mode,
            selection=selection,
            buffer_name=self.buffer.name,
            file_path=snapshot.file_path,
            dirty=snapshot.dirty,
            version=snapshot.version,
        )
