"""Buffer façade combining text, screen cursor, scroll offset and file binding."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from amanita.errors import BufferLocked, NoFileAssociated
from amanita.runtime import telemetry

from .state import CursorPosition, ScrollOffset
from .storage import TextStorage, collapse_tabs
from .text import TextStore


@dataclass(slots=True)
class BufferView:
    """Point-in-time copy of the buffer state that editor views are built from."""

    version: int
    text: str
    cursor: Tuple[int, int]
    offset: Tuple[int, int]
    raw_position: int
    file_path: Optional[str]
    dirty: bool


@dataclass(slots=True)
class Buffer:
    """Text content plus the cached coordinates that locate the cursor in it.

    ``cursor`` is screen-relative and ``offset`` is the scroll position, both in
    logical lines/columns. They are only ever changed through
    :class:`amanita.view.viewport.ViewportModel`.
    """

    store: TextStore = field(default_factory=TextStore)
    cursor: CursorPosition = field(default_factory=CursorPosition)
    offset: ScrollOffset = field(default_factory=ScrollOffset)
    file_path: Optional[str] = None
    name: str = "scratch"
    _saving: bool = False

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "scratch", file_path: Optional[str] = None
    ) -> "Buffer":
        return cls(store=TextStore(text), file_path=file_path, name=name)

    @classmethod
    async def from_file(cls, path: str, storage: TextStorage) -> "Buffer":
        """Load ``path``; a missing file gives an empty buffer bound to it."""

        text = await storage.load_text(path)
        return cls(store=TextStore(text), file_path=path, name=path)

    @property
    def content(self) -> str:
        return self.store.content

    @property
    def x(self) -> int:
        return self.cursor.x + self.offset.x

    @property
    def y(self) -> int:
        return self.cursor.y + self.offset.y

    @property
    def lines_count(self) -> int:
        return self.store.line_count

    @property
    def current_line(self) -> str:
        return self.store.line(self.y)

    @property
    def current_line_length(self) -> int:
        return len(self.current_line)

    @property
    def raw_position(self) -> int:
        return self.store.offset_for(self.y, self.x)

    def raw_position_coordinates(self, x: int, y: int) -> int:
        return self.store.offset_for(y, x)

    @property
    def saving(self) -> bool:
        return self._saving

    def ensure_writable(self) -> None:
        if self._saving:
            raise BufferLocked(self.name)

    @contextmanager
    def save_lock(self) -> Iterator[str]:
        """Hold the buffer read-only and yield the text to persist."""

        self.ensure_writable()
        self._saving = True
        try:
            yield collapse_tabs(self.store.content)
        finally:
            self._saving = False

    async def save(self, storage: TextStorage) -> None:
        if not self.file_path:
            raise NoFileAssociated(self.name)
        with telemetry.span(
            name="buffer::save",
            logger_name="amanita.buffer",
            metadata={"buffer": self.name, "path": self.file_path},
        ):
            with self.save_lock() as snapshot:
                await storage.save_text(self.file_path, snapshot)
            self.store.dirty = False

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.store.version,
            text=self.store.content,
            cursor=self.cursor.as_tuple(),
            offset=self.offset.as_tuple(),
            raw_position=self.raw_position,
            file_path=self.file_path,
            dirty=self.store.dirty,
        )
