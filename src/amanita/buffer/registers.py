"""Clipboard shared by delete, yank and paste."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Clipboard:
    text: str = ""

    def yank(self, text: str) -> None:
        self.text = text

    def get(self) -> str:
        return self.text

    def __bool__(self) -> bool:
        return bool(self.text)
