"""Plain-text persistence for buffers."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from amanita.config import TAB_RUN
from amanita.errors import StorageError
from amanita.runtime import telemetry

_LOGGER = "amanita.storage"


def collapse_tabs(text: str) -> str:
    """Collapse each run of ``TAB_RUN`` tab characters into a single tab."""

    return text.replace("\t" * TAB_RUN, "\t")


class TextStorage(Protocol):
    """Collaborator that reads and writes whole buffers."""

    async def load_text(self, path: str) -> str:
        """Return the file content, or ``""`` when the file does not exist."""
        ...

    async def save_text(self, path: str, text: str) -> None:
        """Replace the file content with ``text``."""
        ...


class FileStorage:
    """Local filesystem storage; blocking I/O runs in a worker thread."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def load_text(self, path: str) -> str:
        try:
            text = await asyncio.to_thread(Path(path).read_text, encoding=self.encoding)
        except FileNotFoundError:
            telemetry.record_event(
                "storage.missing", data={"path": path}, logger_name=_LOGGER
            )
            return ""
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc}", path=path) from exc
        telemetry.record_event(
            "storage.load",
            data={"path": path, "chars": len(text)},
            logger_name=_LOGGER,
        )
        return text

    async def save_text(self, path: str, text: str) -> None:
        try:
            await asyncio.to_thread(Path(path).write_text, text, encoding=self.encoding)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}", path=path) from exc
        telemetry.record_event(
            "storage.save",
            data={"path": path, "chars": len(text)},
            logger_name=_LOGGER,
        )
