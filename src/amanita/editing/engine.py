"""Applies text edits, keeps the viewport in sync and records inverses."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Protocol

from amanita.buffer.buffer import Buffer
from amanita.buffer.undo import UndoHistory
from amanita.buffer.validation import ensure_offset
from amanita.config import TAB_RUN
from amanita.runtime import telemetry
from amanita.view.viewport import ViewportModel

from .edits import DeleteEdit, Edit, InsertEdit

_LOGGER = "amanita.editing"


class EditHost(Protocol):
    """State an :class:`EditEngine` works against (implemented by ``Editor``)."""

    @property
    def buffer(self) -> Buffer: ...

    @property
    def viewport(self) -> ViewportModel: ...

    @property
    def history(self) -> UndoHistory[Edit]: ...

    @property
    def insert_mode(self) -> bool: ...


class EditEngine:
    def __init__(self, host: EditHost) -> None:
        self.host = host

    @contextmanager
    def recording(self, label: str) -> Iterator[Callable[[Edit], None]]:
        """Profile one recorded edit; the yielded callable pushes its inverse."""

        with telemetry.span(
            name=f"edit::{label}",
            logger_name=_LOGGER,
            component=True,
            metadata={"buffer": self.host.buffer.name},
        ):
            yield self.host.history.push

    # primitives shared by edits and undo/redo; these never record

    def move_to(self, target: int) -> None:
        host = self.host
        host.viewport.move_to_raw(host.buffer, target, insert_mode=host.insert_mode)

    def splice(self, at: int, text: str) -> None:
        buffer = self.host.buffer
        buffer.ensure_writable()
        ensure_offset(buffer.store, at)
        buffer.store.insert(at, text)
        self._resync(at + len(text))

    def remove(self, start: int, end: int) -> str:
        buffer = self.host.buffer
        buffer.ensure_writable()
        removed = buffer.store.delete(start, end)
        self._resync(max(0, min(start, end, len(buffer.store))))
        return removed

    def _resync(self, target: int) -> None:
        host = self.host
        host.viewport.resync(host.buffer, target, insert_mode=host.insert_mode)

    # recorded operations

    def insert_text(self, text: str) -> None:
        if not text:
            return
        with self.recording("insert_text") as record:
            record(InsertEdit(self.host.buffer.raw_position, text).apply(self))

    def insert_char(self, char: str) -> None:
        self.insert_text(char)

    def insert_tab(self) -> None:
        self.insert_text("\t" * TAB_RUN)

    def insert_newline(self) -> None:
        with self.recording("insert_newline") as record:
            record(InsertEdit(self.host.buffer.raw_position, "\n").apply(self))

    def open_line(self, n: int) -> None:
        """Insert an empty line ``n`` lines below the cursor, or above when negative.

        ``open_line(0)`` opens below the current line and ``open_line(-1)``
        above it. The cursor lands on the new line.
        """

        content = self.host.buffer.content
        position = self.host.buffer.raw_position
        at = -1
        if n >= 0:
            start = position
            for _ in range(n + 1):
                at = content.find("\n", start)
                if at == -1:
                    break
                start = at + 1
            if at == -1:
                at = len(content)
            landing = at + 1
        else:
            end = position
            for _ in range(-n):
                at = content.rfind("\n", 0, end)
                if at == -1:
                    break
                end = at
            at = at + 1 if at != -1 else 0
            landing = at
        with self.recording("open_line") as record:
            record(InsertEdit(at, "\n").apply(self))
            self.move_to(landing)

    def delete_char(self) -> None:
        """Backspace: remove the character before the cursor.

        At column 0 the previous newline goes, merging the two lines. A tab
        takes up to ``TAB_RUN - 1`` directly preceding tabs on the same line
        with it.
        """

        buffer = self.host.buffer
        position = buffer.raw_position
        if position == 0:
            return
        start = position - 1
        if buffer.x > 0 and buffer.content[start] == "\t":
            line_start = position - buffer.x
            extra = 0
            while (
                extra < TAB_RUN - 1
                and start - 1 >= line_start
                and buffer.content[start - 1] == "\t"
            ):
                start -= 1
                extra += 1
        with self.recording("delete_char") as record:
            record(DeleteEdit(start, position).apply(self))

    def delete_range(self, start: int, end: int) -> str:
        """Remove ``[start, end)``, record it and return the removed text."""

        with self.recording("delete_range") as record:
            inverse = DeleteEdit(start, end).apply(self)
            record(inverse)
        return inverse.text

    # history

    def undo(self) -> bool:
        history = self.host.history
        edit = history.undo()
        if edit is None:
            return False
        history.replace_undo(edit.apply(self))
        telemetry.record_event(
            "history.undo",
            data={"edit": type(edit).__name__, "index": history.insert_index},
            logger_name=_LOGGER,
        )
        return True

    def redo(self) -> bool:
        history = self.host.history
        edit = history.redo()
        if edit is None:
            return False
        history.replace_redo(edit.apply(self))
        telemetry.record_event(
            "history.redo",
            data={"edit": type(edit).__name__, "index": history.insert_index},
            logger_name=_LOGGER,
        )
        return True
